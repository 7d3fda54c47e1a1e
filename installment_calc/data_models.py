"""Data models for the installment calculator.

This module defines dataclasses for the loan inputs, the computed payment
result and the individual schedule entries. All of them are frozen: a new
calculation always produces new objects instead of updating old ones.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP


@dataclass(frozen=True)
class LoanInput:
    """Validated loan parameters.

    Attributes
    ----------
    principal: Decimal
        The amount being amortized.
    years: Decimal
        Loan term in years. Fractional values are allowed.
    rate: Decimal
        Annual percentage rate in percent (e.g. ``Decimal("12")`` for 12 %).
    """

    principal: Decimal
    years: Decimal
    rate: Decimal

    @property
    def term_months(self) -> int:
        """Number of monthly periods, ``12 * years`` rounded to a whole month."""
        return int((self.years * 12).to_integral_value(rounding=ROUND_HALF_UP))

    @property
    def monthly_rate(self) -> Decimal:
        """Annual percentage rate converted to a monthly decimal rate."""
        return (self.rate / Decimal(100)) / Decimal(12)


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a payment calculation.

    Values are not rounded; presentation code rounds to 2 decimals.
    """

    principal: Decimal
    term_months: int
    monthly: Decimal
    total: Decimal
    interest: Decimal


@dataclass(frozen=True)
class ScheduleEntry:
    """An entry in the amortization schedule.

    ``principal`` and ``balance`` are floored at zero, so the last entries
    never show negative values caused by rounding drift.
    """

    month: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal
