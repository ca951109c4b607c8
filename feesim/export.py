import pandas as pd

__all__ = ["to_csv", "format_eur", "COLUMNS"]

COLUMNS = [
    "bank",
    "sha_fee",
    "sha_total",
    "our_fee",
    "our_total",
    "ben_fee",
    "ben_total",
]


def to_csv(comparison: pd.DataFrame, path: str) -> None:
    """Write a bank fee comparison to CSV with fixed column order."""
    comparison[COLUMNS].to_csv(path, index=False, float_format="%.2f")


def format_eur(value: float) -> str:
    """Format ``value`` as ``1.234,56 €``."""
    text = f"{value:,.2f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".") + " €"
