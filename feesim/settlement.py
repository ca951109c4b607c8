"""Settlement speed choices offered for SHA transfers."""

from __future__ import annotations

from typing import List, Optional

from .schemas import BankProfile

__all__ = [
    "settlement_options",
    "default_settlement",
    "settlement_speed_for",
    "NAMED_SPEEDS",
    "STANDARD",
]

NAMED_SPEEDS = ("T+0", "T+1", "T+2")
STANDARD = "Standard"


def settlement_options(profile: BankProfile, resident: bool = True) -> List[str]:
    """Return the settlement choices to offer for ``profile``.

    Named speeds come first in T+0, T+1, T+2 order, followed by any extra keys
    of the ``special`` map. ``"Standard"`` leads the list unless all three named
    speeds are priced.
    """
    speeds = list(profile.for_residency(resident).transfer_out.special or {})
    named = [s for s in NAMED_SPEEDS if s in speeds]
    extra = [s for s in speeds if s not in NAMED_SPEEDS]
    if not named and not extra:
        return []
    if len(named) == len(NAMED_SPEEDS):
        return named + extra
    return [STANDARD] + named + extra


def default_settlement(profile: BankProfile, resident: bool = True) -> str:
    """Initial choice: the slowest named speed when all three exist."""
    speeds = profile.for_residency(resident).transfer_out.special or {}
    if all(s in speeds for s in NAMED_SPEEDS):
        return NAMED_SPEEDS[-1]
    return STANDARD


def settlement_speed_for(profile: BankProfile, selection: Optional[str]) -> Optional[str]:
    """Map a settlement choice to the speed passed to :func:`feesim.fee.swift_fee`.

    ``profile`` must already be the residency-specific profile.
    """
    if profile.transfer_out.special is None or not selection or selection == STANDARD:
        return None
    return selection
