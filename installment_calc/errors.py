"""Exceptions raised while validating inputs or computing payments.

The message of every exception is meant to be shown to the user as is.
"""

from __future__ import annotations


class CalculationError(Exception):
    """Base class for every error the calculator reports to the user."""

    default_message = "Calculation error. Please check your inputs."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidInput(CalculationError, ValueError):
    """The inputs cannot be used for a calculation."""


class MissingInput(InvalidInput):
    default_message = "Please fill in all fields"


class InvalidRange(InvalidInput):
    default_message = "Please enter valid positive numbers"


class ZeroRate(InvalidInput):
    default_message = "Annual Percentage Rate cannot be 0%"


class ComputationFailure(CalculationError, ArithmeticError):
    """The arithmetic failed or produced a non-finite value."""
