"""Compose SEPA and SWIFT quotes for a bank selection."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pandas as pd

from .export import COLUMNS
from .fee import SWIFT_OPTIONS, swift_fee
from .schemas import BankProfile, FeeResult
from .sepa import sepa_total
from .settlement import default_settlement, settlement_speed_for
from .store import DEFAULT_CLIENT_TYPE, BankRuleStore

__all__ = ["Quote", "quote", "quote_profile", "compare_banks", "parse_amount"]


@dataclass(frozen=True)
class Quote:
    """Indicative cost of sending ``amount`` abroad from one bank.

    ``sha`` is the headline SWIFT price; ``our`` and ``ben`` are informative
    and None when the bank publishes no rules for them.
    """

    amount: float
    bank: str
    client_type: str
    resident: bool
    channel: str
    settlement: str
    sepa: FeeResult
    sha: Optional[FeeResult]
    our: Optional[FeeResult]
    ben: Optional[FeeResult]

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "amount": self.amount,
            "bank": self.bank,
            "client_type": self.client_type,
            "resident": self.resident,
            "channel": self.channel,
            "settlement": self.settlement,
        }
        for key in ("sepa", "sha", "our", "ben"):
            result = getattr(self, key)
            data[key] = result.to_dict() if result is not None else None
        return data


def parse_amount(text: str) -> float:
    """Parse user input such as ``"250,5"`` or ``"0250"``; invalid input gives 0."""
    text = (text or "").strip()
    if not text:
        return 0.0
    normalized = re.sub(r"^0+(?=\d)", "", text.replace(",", ".", 1))
    try:
        value = float(normalized)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def quote_profile(
    amount: float,
    profile: BankProfile,
    *,
    client_type: str = DEFAULT_CLIENT_TYPE,
    resident: bool = True,
    channel: str = "digital",
    first_of_day: bool = True,
    settlement: Optional[str] = None,
) -> Quote:
    """Quote ``amount`` against an already resolved bank profile."""
    priced = profile.for_residency(resident)
    if settlement is None:
        settlement = default_settlement(profile, resident)
    speed = settlement_speed_for(priced, settlement)

    return Quote(
        amount=amount,
        bank=profile.name,
        client_type=client_type,
        resident=resident,
        channel=channel,
        settlement=settlement,
        sepa=sepa_total(amount, channel, first_of_day),
        sha=swift_fee(amount, priced, "SHA", speed),
        our=swift_fee(amount, priced, "OUR"),
        ben=swift_fee(amount, priced, "BEN"),
    )


def quote(
    store: BankRuleStore,
    amount: float,
    bank_name: str,
    client_type: str = DEFAULT_CLIENT_TYPE,
    resident: bool = True,
    channel: str = "digital",
    first_of_day: bool = True,
    settlement: Optional[str] = None,
) -> Optional[Quote]:
    """Quote ``amount`` for the named bank; None when the bank is unknown."""
    profile = store.find_bank(bank_name, client_type)
    if profile is None:
        logging.warning("Bank %r not found for client type %s", bank_name, client_type)
        return None
    return quote_profile(
        amount,
        profile,
        client_type=client_type,
        resident=resident,
        channel=channel,
        first_of_day=first_of_day,
        settlement=settlement,
    )


def compare_banks(
    store: BankRuleStore,
    amount: float,
    client_type: str = DEFAULT_CLIENT_TYPE,
    resident: bool = True,
    settlement: Optional[str] = None,
) -> pd.DataFrame:
    """Return SWIFT fees of every bank for ``amount``, cheapest SHA first.

    Banks without a rule for an option get NaN in that option's columns.
    ``settlement`` applies to SHA only and is ignored by banks that do not
    price it.
    """
    rows: List[Dict[str, Any]] = []
    for profile in store.list_banks(client_type):
        priced = profile.for_residency(resident)
        speed = settlement_speed_for(priced, settlement)
        row: Dict[str, Any] = {"bank": profile.name}
        for option in SWIFT_OPTIONS:
            result = swift_fee(amount, priced, option, speed if option == "SHA" else None)
            key = option.lower()
            row[f"{key}_fee"] = result.sender_fee if result is not None else float("nan")
            row[f"{key}_total"] = result.sender_pays_total if result is not None else float("nan")
        rows.append(row)

    df = pd.DataFrame(rows, columns=COLUMNS)
    return df.sort_values("sha_fee", na_position="last", kind="stable").reset_index(drop=True)
