"""Data model for bank fee profiles and fee results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

__all__ = [
    "FeeRule",
    "TransferOut",
    "BankProfile",
    "FeeResult",
    "is_number",
]


def is_number(value: Any) -> bool:
    """Return True for int/float values, excluding bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number(value: Any) -> Optional[float]:
    return value if is_number(value) else None


@dataclass(frozen=True)
class FeeRule:
    """One amount band of a bank's SWIFT price list."""

    min_amount: Optional[float] = None
    max_amount: Optional[float] = None  # None -> unbounded
    fee_type: Optional[str] = None  # fixed|percentage|...
    fee_value: Optional[float] = None
    min_fee: Optional[float] = None
    max_fee: Optional[float] = None
    additional_fee: Optional[float] = None
    settlement: Optional[str] = None  # T+0|T+1|T+2|...

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeeRule":
        fee_type = data.get("feeType")
        settlement = data.get("settlement")
        return cls(
            min_amount=_number(data.get("minAmount")),
            max_amount=_number(data.get("maxAmount")),
            fee_type=fee_type if isinstance(fee_type, str) else None,
            fee_value=_number(data.get("feeValue")),
            min_fee=_number(data.get("minFee")),
            max_fee=_number(data.get("maxFee")),
            additional_fee=_number(data.get("additionalFee")),
            settlement=settlement if isinstance(settlement, str) else None,
        )


@dataclass(frozen=True)
class TransferOut:
    """Transfer-out table of a bank.

    ``options`` maps a SWIFT option (SHA/OUR/BEN) to its ordered rule bands,
    ``special`` maps a settlement speed to a flat surcharge (None when the
    bank publishes no such map; non-numeric surcharges are offered as choices
    but never priced) and ``notices`` holds options published as text only.
    """

    options: Mapping[str, Tuple[FeeRule, ...]] = field(default_factory=dict)
    special: Optional[Mapping[str, Any]] = None
    notices: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "TransferOut":
        if not isinstance(data, Mapping):
            return cls()
        options: Dict[str, Tuple[FeeRule, ...]] = {}
        special: Optional[Dict[str, Any]] = None
        notices: Dict[str, str] = {}
        for key, value in data.items():
            if key == "special":
                if isinstance(value, Mapping):
                    special = {str(speed): surcharge for speed, surcharge in value.items()}
            elif isinstance(value, list):
                options[key] = tuple(
                    FeeRule.from_dict(item) for item in value if isinstance(item, Mapping)
                )
            elif isinstance(value, Mapping) and isinstance(value.get("notice"), str):
                notices[key] = value["notice"]
        return cls(options=options, special=special, notices=notices)

    def rules(self, option: str) -> Optional[Tuple[FeeRule, ...]]:
        """Return the rule bands for ``option`` or None when it has none."""
        return self.options.get(option)


@dataclass(frozen=True)
class BankProfile:
    """One bank's published fee schedule."""

    name: str
    transfer_out: TransferOut = field(default_factory=TransferOut)
    resident: Optional[TransferOut] = None
    non_resident: Optional[TransferOut] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BankProfile":
        def _nested(key: str) -> Optional[TransferOut]:
            section = data.get(key)
            if isinstance(section, Mapping) and section.get("transferOut") is not None:
                return TransferOut.from_dict(section["transferOut"])
            return None

        return cls(
            name=data["name"],
            transfer_out=TransferOut.from_dict(data.get("transferOut")),
            resident=_nested("resident"),
            non_resident=_nested("non-resident"),
        )

    def for_residency(self, resident: bool = True) -> "BankProfile":
        """Return a profile priced with the resident or non-resident table.

        Falls back to the default ``transfer_out`` when the bank publishes no
        residency-specific table.
        """
        table = self.resident if resident else self.non_resident
        return BankProfile(name=self.name, transfer_out=table or self.transfer_out)


@dataclass(frozen=True)
class FeeResult:
    """Fee charged to the sender and the total leaving the account."""

    sender_fee: float
    sender_pays_total: float

    def to_dict(self) -> Dict[str, float]:
        return {"sender_fee": self.sender_fee, "sender_pays_total": self.sender_pays_total}
