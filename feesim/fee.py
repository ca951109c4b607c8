"""SWIFT transfer fee resolution.

Rules come from a bank's transfer-out table (see :mod:`feesim.schemas`).
Each option (SHA, OUR, BEN) holds ordered amount bands; the first band that
contains the amount is priced as either

* ``fixed``: ``fee_value + additional_fee``
* anything else: ``amount * fee_value + additional_fee``

and clamped to ``[min_fee, max_fee]`` when both limits are published.
Banks may also price settlement speed, either with bands tagged by
``settlement`` or with a flat surcharge in the ``special`` map.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, Iterable, Optional, Tuple

from .schemas import BankProfile, FeeResult, FeeRule, is_number

__all__ = [
    "swift_fee",
    "combined_sha_our_fee",
    "rule_fee",
    "round2",
    "FEE_STRATEGIES",
    "SWIFT_OPTIONS",
]

SWIFT_OPTIONS = ("SHA", "OUR", "BEN")

FeeStrategy = Callable[[float, BankProfile, Optional[str]], Optional[FeeResult]]


def round2(value: float) -> float:
    """Round half-up to the cent; NaN and infinities pass through."""
    if not math.isfinite(value):
        return value
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _in_band(rule: FeeRule, amount: float) -> bool:
    """Inclusive band test with optional bounds, used for settlement bands."""
    min_ok = amount >= rule.min_amount if rule.min_amount is not None else True
    max_ok = amount <= rule.max_amount if rule.max_amount is not None else True
    return min_ok and max_ok


def _in_open_band(rule: FeeRule, amount: float) -> bool:
    """Return True for ``min < amount <= max`` (max None is unbounded)."""
    if rule.min_amount is None:
        return False
    high = rule.max_amount if rule.max_amount is not None else math.inf
    return rule.min_amount < amount <= high


def _first(rules: Iterable[FeeRule], match: Callable[[FeeRule], bool]) -> Optional[FeeRule]:
    return next((r for r in rules if match(r)), None)


def rule_fee(rule: FeeRule, amount: float) -> float:
    """Return the clamped fee for ``amount`` under ``rule``.

    The fee is 0 when the rule does not publish both ``fee_value`` and
    ``additional_fee``.
    """
    if rule.fee_value is None or rule.additional_fee is None:
        return 0.0
    if rule.fee_type == "fixed":
        fee = rule.fee_value + rule.additional_fee
    else:
        fee = amount * rule.fee_value + rule.additional_fee

    if rule.min_fee is not None and rule.max_fee is not None:
        if rule.max_fee > 0 and fee > rule.max_fee:
            fee = rule.max_fee
        elif fee < rule.min_fee:
            fee = rule.min_fee
    return fee


def _select_rule(
    rules: Tuple[FeeRule, ...],
    amount: float,
    settlement_speed: Optional[str],
    tagged: bool,
) -> Optional[FeeRule]:
    rule = None
    if tagged and settlement_speed:
        rule = _first(rules, lambda r: r.settlement == settlement_speed and _in_band(r, amount))
    if rule is None:
        # Untagged lookup keeps the exclusive lower bound of the published bands.
        rule = _first(rules, lambda r: _in_open_band(r, amount))
    return rule


def _general_fee(
    amount: float,
    profile: BankProfile,
    option: str,
    settlement_speed: Optional[str] = None,
) -> Optional[FeeResult]:
    rules = profile.transfer_out.rules(option)
    if rules is None:
        logging.debug("%s: no %s rules defined", profile.name, option)
        return None

    tagged = any(r.settlement is not None for r in rules)
    rule = _select_rule(rules, amount, settlement_speed, tagged)
    if rule is None:
        logging.debug("%s: no %s band for amount %s", profile.name, option, amount)
        return None

    fee = rule_fee(rule, amount)

    special = profile.transfer_out.special or {}
    if not tagged and settlement_speed and is_number(special.get(settlement_speed)):
        fee += special[settlement_speed]

    fee = round2(fee)
    return FeeResult(sender_fee=fee, sender_pays_total=round2(amount + fee))


def _tier_fee(rule: FeeRule, amount: float) -> float:
    """Unclamped fixed/percentage fee with missing values read as 0."""
    fee_value = rule.fee_value or 0.0
    additional = rule.additional_fee or 0.0
    if rule.fee_type == "fixed":
        return fee_value + additional
    return amount * fee_value + additional


def combined_sha_our_fee(
    amount: float,
    profile: BankProfile,
    settlement_speed: Optional[str] = None,
) -> FeeResult:
    """Price OUR as the SHA band fee plus the OUR band fee.

    Both bands must resolve, otherwise the sender pays no fee.
    ``settlement_speed`` is accepted for signature compatibility and ignored.
    """
    sha = _first(profile.transfer_out.rules("SHA") or (), lambda r: _in_open_band(r, amount))
    our = _first(profile.transfer_out.rules("OUR") or (), lambda r: _in_open_band(r, amount))

    if sha is None or our is None:
        logging.debug("%s: SHA or OUR band missing for amount %s", profile.name, amount)
        return FeeResult(sender_fee=0.0, sender_pays_total=amount)

    fee = round2(_tier_fee(sha, amount) + _tier_fee(our, amount))
    return FeeResult(sender_fee=fee, sender_pays_total=round2(amount + fee))


# Bank specific pricing, keyed by (bank name, option).
FEE_STRATEGIES: Dict[Tuple[str, str], FeeStrategy] = {
    ("Universal Capital Bank AD", "OUR"): combined_sha_our_fee,
}


def swift_fee(
    amount: float,
    profile: BankProfile,
    option: str,
    settlement_speed: Optional[str] = None,
) -> Optional[FeeResult]:
    """Return the SWIFT fee for ``amount`` sent with ``option``.

    Parameters
    ----------
    amount : float
        Amount being sent, in EUR.
    profile : BankProfile
        Bank profile whose ``transfer_out`` table is priced. Use
        :meth:`BankProfile.for_residency` to pick the residency table first.
    option : str
        SWIFT cost option, one of ``SHA``, ``OUR``, ``BEN``.
    settlement_speed : str, optional
        Requested settlement speed such as ``"T+0"``.

    Returns
    -------
    FeeResult or None
        None when the bank defines no rule for the option or amount.
    """
    strategy = FEE_STRATEGIES.get((profile.name, option))
    if strategy is not None:
        return strategy(amount, profile, settlement_speed)
    return _general_fee(amount, profile, option, settlement_speed)
