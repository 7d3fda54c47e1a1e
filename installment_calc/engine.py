"""Core calculation engine for the installment calculator.

This module implements the fixed-rate annuity formula and the month-by-month
amortization schedule derived from it. Both operations are pure functions of
a ``LoanInput``; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from decimal import Decimal, getcontext
from typing import Dict, Iterable, List, Optional

from .data_models import LoanInput, PaymentResult, ScheduleEntry
from .errors import ComputationFailure, InvalidRange, ZeroRate

getcontext().prec = 28  # increase precision for financial calculations

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")

MAX_TERM_MONTHS = 1200  # 100 years


def _calculate_annuity_payment(principal: Decimal, rate_per_month: Decimal, term: int) -> Decimal:
    """Return the annuity (equal installment) monthly payment for a loan.

    The formula is:

        payment = P * i / (1 - (1 + i)^(-n))

    where ``P`` is the principal, ``i`` is the monthly interest rate and
    ``n`` is the number of payments. The formula is undefined for ``i == 0``,
    so a zero rate must be rejected before calling this function.
    """
    if term <= 0:
        raise InvalidRange()
    if rate_per_month == 0:
        raise ZeroRate()
    try:
        payment = principal * rate_per_month / (1 - (1 + rate_per_month) ** -term)
    except ArithmeticError as exc:
        raise ComputationFailure() from exc
    if not payment.is_finite():
        raise ComputationFailure()
    return payment


def _check_loan(loan: LoanInput) -> int:
    """Check the preconditions of the annuity formula and return the term in months."""
    if loan.principal <= 0 or loan.years <= 0 or loan.rate < 0:
        raise InvalidRange()
    try:
        term = loan.term_months
    except ArithmeticError as exc:
        raise InvalidRange() from exc
    if term < 1 or term > MAX_TERM_MONTHS:
        raise InvalidRange()
    if loan.rate == 0:
        raise ZeroRate()
    return term


def compute_payment(loan: LoanInput) -> PaymentResult:
    """Compute the monthly installment, total payment and total interest.

    Raises
    ------
    InvalidRange
        If the principal or term is not positive, the term exceeds
        ``MAX_TERM_MONTHS`` or the rate is negative.
    ZeroRate
        If the annual rate is zero.
    ComputationFailure
        If the arithmetic fails or produces a non-finite value.
    """
    term = _check_loan(loan)
    monthly = _calculate_annuity_payment(loan.principal, loan.monthly_rate, term)
    try:
        total = monthly * term
        interest = total - loan.principal
    except ArithmeticError as exc:
        raise ComputationFailure() from exc
    if not (total.is_finite() and interest.is_finite()):
        raise ComputationFailure()
    logger.debug(
        "Computed payment %s over %d months for principal %s at %s%%",
        monthly,
        term,
        loan.principal,
        loan.rate,
    )
    return PaymentResult(
        principal=loan.principal,
        term_months=term,
        monthly=monthly,
        total=total,
        interest=interest,
    )


def generate_schedule(loan: LoanInput, payment: Optional[PaymentResult] = None) -> List[ScheduleEntry]:
    """Build the month-by-month amortization schedule for ``loan``.

    Parameters
    ----------
    loan: LoanInput
        The validated loan parameters.
    payment: PaymentResult, optional
        A result previously returned by ``compute_payment`` for the same
        loan. When given, its monthly payment is reused so that the summary
        and the schedule can never disagree.

    Returns
    -------
    List[ScheduleEntry]
        One entry per month. Principal and balance are floored at zero.
    """
    if payment is None:
        payment = compute_payment(loan)
    elif payment.principal != loan.principal or payment.term_months != loan.term_months:
        raise ValueError("Payment result does not belong to this loan")

    rate_per_month = loan.monthly_rate
    monthly_payment = payment.monthly
    balance = loan.principal

    schedule: List[ScheduleEntry] = []
    for month in range(1, payment.term_months + 1):
        interest_payment = balance * rate_per_month
        principal_payment = monthly_payment - interest_payment
        balance -= principal_payment
        schedule.append(
            ScheduleEntry(
                month=month,
                payment=monthly_payment,
                principal=max(_ZERO, principal_payment),
                interest=interest_payment,
                balance=max(_ZERO, balance),
            )
        )
    # Residual drift is absorbed by the clamps above.
    logger.debug("Generated %d schedule entries, residual balance %s", len(schedule), balance)
    return schedule


def summarize_schedule(schedule: Iterable[ScheduleEntry]) -> Dict[str, Decimal]:
    """Return the summed payment, principal and interest of a schedule."""
    totals = {"payment": _ZERO, "principal": _ZERO, "interest": _ZERO}
    for entry in schedule:
        totals["payment"] += entry.payment
        totals["principal"] += entry.principal
        totals["interest"] += entry.interest
    return totals
