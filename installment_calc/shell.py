"""State handling for the calculator form.

The calculator's state (raw field values, selected currency, last result and
current error) lives in a single frozen ``CalculatorState``. Every user
action is a function that takes the current state and returns a new one, so
a result and an error can never be shown together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

from .currencies import DEFAULT_CURRENCY, get_currency, normalize_currency
from .data_models import LoanInput, PaymentResult, ScheduleEntry
from .engine import compute_payment, generate_schedule
from .errors import CalculationError
from .report import render_report
from .utils import parse_loan_input

logger = logging.getLogger(__name__)

INPUT_FIELDS = ("principal", "years", "rate")


@dataclass(frozen=True)
class CalculatorState:
    principal: str = ""
    years: str = ""
    rate: str = ""
    currency: str = DEFAULT_CURRENCY
    loan: Optional[LoanInput] = None
    result: Optional[PaymentResult] = None
    schedule: Tuple[ScheduleEntry, ...] = ()
    error: str = ""

    @classmethod
    def from_fields(
        cls,
        principal: Optional[str] = "",
        years: Optional[str] = "",
        rate: Optional[str] = "",
        currency: Optional[str] = None,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> "CalculatorState":
        """Build a state from raw form values, without calculating."""
        return cls(
            principal=principal or "",
            years=years or "",
            rate=rate or "",
            currency=normalize_currency(currency, default_currency),
        )

    @property
    def has_result(self) -> bool:
        return self.result is not None


def _cleared(state: CalculatorState) -> CalculatorState:
    return replace(state, loan=None, result=None, schedule=(), error="")


def edit_field(state: CalculatorState, name: str, value: str) -> CalculatorState:
    """Replace one of the raw input fields."""
    if name not in INPUT_FIELDS:
        raise KeyError(name)
    return replace(state, **{name: value})


def select_currency(state: CalculatorState, code: str) -> CalculatorState:
    return replace(state, currency=normalize_currency(code))


def calculate(state: CalculatorState) -> CalculatorState:
    """Validate the fields and compute the payment and its schedule.

    The schedule is derived from the computed result, so the summary and the
    schedule always agree. Any ``CalculationError`` is stored as the state's
    error message and leaves no result behind.
    """
    state = _cleared(state)
    try:
        loan = parse_loan_input(state.principal, state.years, state.rate)
        result = compute_payment(loan)
        schedule = generate_schedule(loan, result)
    except CalculationError as exc:
        logger.info("Calculation rejected: %s", exc)
        return replace(state, error=str(exc))
    return replace(state, loan=loan, result=result, schedule=tuple(schedule))


def reset(state: CalculatorState) -> CalculatorState:
    """Clear the inputs, the result and the error; keep the currency."""
    return CalculatorState(currency=state.currency)


def export_report(
    state: CalculatorState,
    generated_at: Optional[datetime] = None,
    auto_print: bool = False,
) -> Optional[str]:
    """Return the printable report of the last calculation, if there is one.

    The report describes the loan captured when ``calculate`` ran, even if
    the fields were edited afterwards.
    """
    if state.result is None or state.loan is None:
        return None
    return render_report(
        state.loan,
        state.result,
        state.schedule,
        get_currency(state.currency),
        generated_at=generated_at,
        auto_print=auto_print,
    )
