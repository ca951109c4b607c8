"""SEPA credit transfer fees."""

from __future__ import annotations

from .fee import round2
from .schemas import FeeResult

__all__ = ["sepa_fee", "sepa_total", "CHANNELS", "SEPA_STANDARD_FEE_CAP", "FIRST_OF_DAY_LIMIT"]

CHANNELS = ("digital", "branch")

SEPA_STANDARD_FEE_CAP = 20_000
FIRST_OF_DAY_LIMIT = 200
FIRST_OF_DAY_FEE = 0.02

# channel -> (fee up to the cap, fee above the cap)
_CHANNEL_FEES = {
    "digital": (1.99, 25.0),
    "branch": (3.99, 50.0),
}


def sepa_fee(amount: float, channel: str, first_of_day: bool) -> float:
    """Return the SEPA fee for ``amount``.

    The first qualifying transfer of the day up to 200 EUR costs 0.02 EUR.
    Any channel other than ``"digital"`` is priced as an in-branch order.
    """
    if first_of_day and amount <= FIRST_OF_DAY_LIMIT:
        return FIRST_OF_DAY_FEE
    standard, large = _CHANNEL_FEES["digital" if channel == "digital" else "branch"]
    return standard if amount <= SEPA_STANDARD_FEE_CAP else large


def sepa_total(amount: float, channel: str, first_of_day: bool) -> FeeResult:
    fee = sepa_fee(amount, channel, first_of_day)
    return FeeResult(sender_fee=fee, sender_pays_total=round2(amount + fee))
