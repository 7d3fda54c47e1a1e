"""Currencies offered by the calculator.

The selected currency only changes the symbol and label shown next to
amounts; values are never converted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Currency:
    code: str
    symbol: str
    name: str


CURRENCIES: Dict[str, Currency] = {
    "USD": Currency("USD", "$", "US Dollar"),
    "LKR": Currency("LKR", "Rs.", "Sri Lankan Rupee"),
    "EUR": Currency("EUR", "€", "Euro"),
    "GBP": Currency("GBP", "£", "British Pound"),
    "INR": Currency("INR", "₹", "Indian Rupee"),
    "AUD": Currency("AUD", "A$", "Australian Dollar"),
    "CAD": Currency("CAD", "C$", "Canadian Dollar"),
    "JPY": Currency("JPY", "¥", "Japanese Yen"),
}

DEFAULT_CURRENCY = "USD"


def normalize_currency(code: str | None, default: str = DEFAULT_CURRENCY) -> str:
    """Return ``code`` upper-cased if it is known, otherwise ``default``."""
    code = (code or "").strip().upper()
    return code if code in CURRENCIES else default


def get_currency(code: str | None) -> Currency:
    return CURRENCIES[normalize_currency(code)]
