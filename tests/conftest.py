# tests/conftest.py
from __future__ import annotations

from decimal import Decimal

import pytest

from installment_calc.data_models import LoanInput


def make_loan(principal="100000", years="1", rate="12") -> LoanInput:
    return LoanInput(principal=Decimal(principal), years=Decimal(years), rate=Decimal(rate))


@pytest.fixture
def one_year_loan():
    """100k over one year at 12 %, i.e. a monthly rate of exactly 1 %."""
    return make_loan("100000", "1", "12")


@pytest.fixture
def five_year_loan():
    return make_loan("50000", "5", "6")


@pytest.fixture
def web_client():
    from installment_calc_web.app import app

    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
