"""Printable HTML report of a calculation.

The report is rendered from ``templates/report.html`` with Jinja2, the same
template engine the web interface uses, so the CLI and the browser export
produce identical documents.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from jinja2 import Environment, PackageLoader, select_autoescape

from .currencies import Currency
from .data_models import LoanInput, PaymentResult, ScheduleEntry
from .engine import summarize_schedule
from .formatter import format_money

_env = Environment(
    loader=PackageLoader("installment_calc", "templates"),
    autoescape=select_autoescape(["html"]),
)
_env.filters["money"] = format_money


def render_report(
    loan: LoanInput,
    result: PaymentResult,
    schedule: Sequence[ScheduleEntry],
    currency: Currency,
    generated_at: Optional[datetime] = None,
    auto_print: bool = False,
) -> str:
    """Render the full report as an HTML document.

    ``auto_print`` adds a script that opens the browser's print dialog once
    the page is loaded.
    """
    template = _env.get_template("report.html")
    return template.render(
        loan=loan,
        result=result,
        schedule=schedule,
        totals=summarize_schedule(schedule),
        currency=currency,
        generated_at=(generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M:%S"),
        auto_print=auto_print,
    )
