"""Simulator configuration.

Example ``feesim.yaml``::

    datasets:
      individual: data/banks_individual.json
      business: data/banks_business.json
    default_client_type: individual
    default_channel: digital
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from .sepa import CHANNELS
from .store import DEFAULT_CLIENT_TYPE

__all__ = ["SimulatorConfig", "load_config", "DEFAULT_DATA_DIR"]

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


def _default_datasets() -> Dict[str, Path]:
    return {
        "individual": DEFAULT_DATA_DIR / "banks_individual.json",
        "business": DEFAULT_DATA_DIR / "banks_business.json",
    }


@dataclass
class SimulatorConfig:
    datasets: Dict[str, Path] = field(default_factory=_default_datasets)
    default_client_type: str = DEFAULT_CLIENT_TYPE
    default_channel: str = "digital"

    def __post_init__(self) -> None:
        if self.default_channel not in CHANNELS:
            raise ValueError(f"Unknown channel {self.default_channel!r}, expected one of {CHANNELS}")
        if self.default_client_type not in self.datasets:
            raise ValueError(f"No dataset configured for client type {self.default_client_type!r}")


def load_config(path: Optional[Union[str, Path]] = None) -> SimulatorConfig:
    """Load a YAML config; without ``path`` return the built-in defaults."""
    if path is None:
        return SimulatorConfig()

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    datasets = raw.get("datasets")
    if datasets is None:
        resolved = _default_datasets()
    elif isinstance(datasets, dict):
        resolved = {str(k): path.parent / v for k, v in datasets.items()}
    else:
        raise ValueError(f"'datasets' must be a mapping in {path}")

    return SimulatorConfig(
        datasets=resolved,
        default_client_type=raw.get("default_client_type", DEFAULT_CLIENT_TYPE),
        default_channel=raw.get("default_channel", "digital"),
    )
