"""Output helpers for the installment calculator.

This module rounds amounts for display and renders the payment summary and
amortization schedule in a tabular text format for the terminal.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, Iterable

from .currencies import Currency
from .data_models import LoanInput, PaymentResult, ScheduleEntry

_CENT = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round an amount to 2 decimal places, halves away from zero."""
    value = Decimal(value)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal, currency: Currency | None = None) -> str:
    """Format an amount as ``<symbol><amount>`` with 2 decimals."""
    symbol = currency.symbol if currency else ""
    return f"{symbol}{round_money(value):.2f}"


def summary_dict(loan: LoanInput, result: PaymentResult, currency: Currency) -> Dict[str, object]:
    """Return a JSON-serialisable summary of a calculation."""
    return {
        "principal": float(loan.principal),
        "years": float(loan.years),
        "rate": float(loan.rate),
        "term_months": result.term_months,
        "monthly": float(round_money(result.monthly)),
        "total": float(round_money(result.total)),
        "interest": float(round_money(result.interest)),
        "currency": currency.code,
    }


def schedule_rows(schedule: Iterable[ScheduleEntry]) -> list[dict]:
    """Convert schedule entries into dictionaries rounded for display."""
    return [
        {
            "month": entry.month,
            "payment": float(round_money(entry.payment)),
            "principal": float(round_money(entry.principal)),
            "interest": float(round_money(entry.interest)),
            "balance": float(round_money(entry.balance)),
        }
        for entry in schedule
    ]


def print_summary(loan: LoanInput, result: PaymentResult, currency: Currency) -> None:
    """Print a summary of the calculation in a human-readable format."""
    print("Summary")
    print("-" * 72)
    print(f"Currency           : {currency.name} ({currency.code})")
    print(f"Total amount       : {format_money(loan.principal, currency)}")
    print(f"Number of years    : {loan.years}")
    print(f"Annual rate        : {loan.rate}%")
    print(f"Monthly payment    : {format_money(result.monthly, currency)}")
    print(f"Total payment      : {format_money(result.total, currency)}")
    print(f"Total interest     : {format_money(result.interest, currency)}")
    print("-" * 72)


def print_schedule(schedule: Iterable[ScheduleEntry], currency: Currency | None = None) -> None:
    """Print the amortization schedule as a simple table."""
    headers = ["Month", "Payment", "Principal", "Interest", "Balance"]
    print("\t".join(headers))
    for entry in schedule:
        row = [
            str(entry.month),
            format_money(entry.payment, currency),
            format_money(entry.principal, currency),
            format_money(entry.interest, currency),
            format_money(entry.balance, currency),
        ]
        print("\t".join(row))
