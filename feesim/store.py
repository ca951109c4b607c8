"""Read-only store of bank fee profiles per client type."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from .schemas import BankProfile

__all__ = ["BankRuleStore", "CLIENT_TYPES", "DEFAULT_CLIENT_TYPE"]

CLIENT_TYPES = ("individual", "business")
DEFAULT_CLIENT_TYPE = "individual"


class BankRuleStore:
    """Lookup bank profiles loaded once at start-up.

    Parameters
    ----------
    datasets : Mapping[str, Iterable[BankProfile]]
        Bank profiles keyed by client type (``individual`` / ``business``).
    """

    def __init__(self, datasets: Mapping[str, Iterable[BankProfile]]) -> None:
        self._datasets = MappingProxyType(
            {client_type: tuple(profiles) for client_type, profiles in datasets.items()}
        )

    @property
    def client_types(self) -> Tuple[str, ...]:
        return tuple(self._datasets)

    def list_banks(self, client_type: str = DEFAULT_CLIENT_TYPE) -> Tuple[BankProfile, ...]:
        """Return every profile for ``client_type``; empty when it has no data."""
        return self._datasets.get(client_type, ())

    def find_bank(self, name: str, client_type: str = DEFAULT_CLIENT_TYPE) -> Optional[BankProfile]:
        return next((b for b in self.list_banks(client_type) if b.name == name), None)

    def __repr__(self) -> str:
        counts = ", ".join(f"{k}={len(v)}" for k, v in self._datasets.items())
        return f"BankRuleStore({counts})"
