"""Supported display currencies. No conversion is performed between them."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Currency:
    code: str
    symbol: str


CURRENCIES: List[Currency] = [
    Currency("USD", "$"),
    Currency("EUR", "€"),
    Currency("INR", "₹"),
    Currency("GBP", "£"),
    Currency("JPY", "¥"),
]


def find_currency(code: str) -> Optional[Currency]:
    """Look up a currency by its ISO code (case-sensitive)."""
    for currency in CURRENCIES:
        if currency.code == code:
            return currency
    return None
