"""SEPA and SWIFT transfer fee simulator."""

__version__ = "0.3.0"

from .fee import swift_fee
from .schemas import BankProfile, FeeResult, FeeRule, TransferOut
from .sepa import sepa_fee
from .settlement import default_settlement, settlement_options
from .store import BankRuleStore

__all__ = [
    "BankProfile",
    "BankRuleStore",
    "FeeResult",
    "FeeRule",
    "TransferOut",
    "default_settlement",
    "sepa_fee",
    "settlement_options",
    "swift_fee",
]
