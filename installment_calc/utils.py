"""Input parsing helpers for the installment calculator.

This module turns the raw text typed into the calculator's fields into a
validated ``LoanInput``. Checks run in a fixed order: missing fields first,
then values out of range, then the zero rate the annuity formula cannot
handle.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, getcontext
from typing import Optional

from .data_models import LoanInput
from .engine import MAX_TERM_MONTHS
from .errors import InvalidRange, MissingInput, ZeroRate

getcontext().prec = 28  # increase decimal precision to avoid rounding errors

logger = logging.getLogger(__name__)


def decimal_from_str(value: str) -> Decimal:
    """Convert a numeric string into a ``Decimal``.

    The function strips any commas and handles both integer and float-like
    strings. It raises ``ValueError`` if conversion fails or the value is
    not finite (``"nan"``, ``"inf"``).
    """
    try:
        cleaned = value.strip().replace(",", "")
        number = Decimal(cleaned)
    except (InvalidOperation, AttributeError) as exc:
        raise ValueError(f"Invalid numeric value: {value}") from exc
    if not number.is_finite():
        raise ValueError(f"Invalid numeric value: {value}")
    return number


def parse_amount(value: str) -> Decimal:
    """Parse a numeric string with optional suffixes.

    Accepts plain numbers ("500000") and shorthand with ``k``/``m`` suffixes
    (e.g., "500k" meaning 500_000).
    """
    value = value.strip().lower()
    factor = Decimal(1)
    if value.endswith("k"):
        factor = Decimal(1_000)
        value = value[:-1]
    elif value.endswith("m"):
        factor = Decimal(1_000_000)
        value = value[:-1]
    return decimal_from_str(value) * factor


def parse_percent(value: str) -> Decimal:
    """Parse a percentage string such as "12" or "12.5%"."""
    value = value.strip()
    if value.endswith("%"):
        value = value[:-1]
    return decimal_from_str(value)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def parse_loan_input(principal: Optional[str], years: Optional[str], rate: Optional[str]) -> LoanInput:
    """Validate the three raw calculator fields and build a ``LoanInput``.

    Raises
    ------
    MissingInput
        If any field is empty.
    InvalidRange
        If a value is not a number, the principal or term is not positive,
        the term is shorter than half a month or longer than 100 years, or
        the rate is negative.
    ZeroRate
        If the rate is zero.
    """
    if _is_blank(principal) or _is_blank(years) or _is_blank(rate):
        logger.info("Rejected loan input: missing field")
        raise MissingInput()

    try:
        loan = LoanInput(
            principal=parse_amount(str(principal)),
            years=decimal_from_str(str(years)),
            rate=parse_percent(str(rate)),
        )
    except (ValueError, ArithmeticError) as exc:
        logger.info("Rejected loan input: %s", exc)
        raise InvalidRange() from exc

    if loan.principal <= 0 or loan.years <= 0 or loan.rate < 0:
        logger.info("Rejected loan input: out of range %s", loan)
        raise InvalidRange()
    try:
        term = loan.term_months
    except ArithmeticError as exc:
        logger.info("Rejected loan input: term of %s years cannot be counted in months", loan.years)
        raise InvalidRange() from exc
    if term < 1 or term > MAX_TERM_MONTHS:
        logger.info("Rejected loan input: term of %s years is outside 1..%d months", loan.years, MAX_TERM_MONTHS)
        raise InvalidRange()
    if loan.rate == 0:
        logger.info("Rejected loan input: zero rate")
        raise ZeroRate()
    return loan
