"""Load bank profile datasets from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Union

from .schemas import BankProfile
from .store import BankRuleStore

__all__ = ["load_bank_profiles", "load_store"]

PathLike = Union[str, Path]


def _validate_profiles(data: Any, path: PathLike) -> None:
    """Ensure the dataset is a list of named profile objects."""
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of bank profiles in {path}")
    unnamed = [
        i for i, entry in enumerate(data)
        if not isinstance(entry, Mapping) or not isinstance(entry.get("name"), str)
    ]
    if unnamed:
        raise ValueError(f"Entries without a name at positions {unnamed} in {path}")


def load_bank_profiles(path: PathLike) -> List[BankProfile]:
    """Load a bank profile JSON file.

    Rule content is read leniently: values that are not numbers are treated
    as unpublished.
    """
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    _validate_profiles(data, path)
    return [BankProfile.from_dict(entry) for entry in data]


def load_store(datasets: Mapping[str, PathLike]) -> BankRuleStore:
    """Load every configured dataset into a :class:`BankRuleStore`."""
    profiles = {}
    for client_type, path in datasets.items():
        profiles[client_type] = load_bank_profiles(path)
        logging.info("Loaded %d %s bank profiles from %s", len(profiles[client_type]), client_type, path)
    return BankRuleStore(profiles)
