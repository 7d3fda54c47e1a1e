# tests/test_utils.py
from decimal import Decimal

import pytest

from installment_calc.errors import InvalidInput, InvalidRange, MissingInput, ZeroRate
from installment_calc.utils import decimal_from_str, parse_amount, parse_loan_input, parse_percent


def test_parse_valid_fields():
    loan = parse_loan_input("100000", "1", "12")
    assert loan.principal == Decimal("100000")
    assert loan.years == Decimal("1")
    assert loan.rate == Decimal("12")
    assert loan.monthly_rate == Decimal("0.01")


def test_amount_shorthand_and_separators():
    assert parse_amount("250k") == Decimal("250000")
    assert parse_amount("1.5M") == Decimal("1500000")
    assert parse_amount(" 1,000 ") == Decimal("1000")
    assert parse_percent("12.5%") == Decimal("12.5")


@pytest.mark.parametrize("value", ["abc", "nan", "inf", "-Infinity", "", "1.2.3"])
def test_decimal_from_str_rejects_garbage(value):
    with pytest.raises(ValueError):
        decimal_from_str(value)


@pytest.mark.parametrize(
    "principal,years,rate",
    [
        ("", "1", "12"),
        ("100000", "", "12"),
        ("100000", "1", ""),
        ("   ", "1", "12"),
        (None, "1", "12"),
        ("", "", ""),
    ],
)
def test_blank_field_is_missing_input(principal, years, rate):
    with pytest.raises(MissingInput) as excinfo:
        parse_loan_input(principal, years, rate)
    assert str(excinfo.value) == "Please fill in all fields"


@pytest.mark.parametrize(
    "principal,years,rate",
    [
        ("0", "1", "12"),
        ("-100", "1", "12"),
        ("1000", "0", "12"),
        ("1000", "-2", "12"),
        ("1000", "1", "-1"),
        ("abc", "1", "12"),
        ("1000", "nan", "12"),
        ("1000", "0.04", "12"),
    ],
)
def test_out_of_range_is_invalid_range(principal, years, rate):
    with pytest.raises(InvalidRange) as excinfo:
        parse_loan_input(principal, years, rate)
    assert str(excinfo.value) == "Please enter valid positive numbers"


@pytest.mark.parametrize("rate", ["0", "0.0", "0%"])
def test_zero_rate(rate):
    with pytest.raises(ZeroRate) as excinfo:
        parse_loan_input("10000", "2", rate)
    assert str(excinfo.value) == "Annual Percentage Rate cannot be 0%"


def test_checks_run_in_order():
    # missing wins over a zero rate, range wins over a zero rate
    with pytest.raises(MissingInput):
        parse_loan_input("", "2", "0")
    with pytest.raises(InvalidRange):
        parse_loan_input("-1", "2", "0")


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_loan_input("1000", "1", "0")
    assert issubclass(MissingInput, InvalidInput)


@pytest.mark.parametrize("years", ["100.1", "1e12", "1e999999"])
def test_term_longer_than_a_century_is_invalid_range(years):
    with pytest.raises(InvalidRange):
        parse_loan_input("1000", years, "12")


def test_term_of_exactly_a_century_is_accepted():
    assert parse_loan_input("1000", "100", "12").term_months == 1200


def test_amount_overflowing_with_shorthand_is_invalid_range():
    with pytest.raises(InvalidRange):
        parse_loan_input("9e999999k", "1", "12")
