"""Canonical test fixtures shared across engine, data, and API tests.

Fixture loans:
  - $120K at 9.25% over 12 months (one-year personal loan)
  - $1K interest-free over 4 months
  - $400K at 7% over 360 months (30yr mortgage)
"""

from decimal import Decimal

import pytest

from src.models.loan import LoanParameters
from src.models.rates import ExchangeRateTable


@pytest.fixture
def one_year_loan() -> LoanParameters:
    return LoanParameters(
        principal=Decimal("120000"),
        annual_rate_percent=Decimal("9.25"),
        term_months=12,
    )


@pytest.fixture
def interest_free_loan() -> LoanParameters:
    return LoanParameters(
        principal=Decimal("1000"),
        annual_rate_percent=Decimal("0"),
        term_months=4,
    )


@pytest.fixture
def mortgage_loan() -> LoanParameters:
    return LoanParameters(
        principal=Decimal("400000"),
        annual_rate_percent=Decimal("7"),
        term_months=360,
    )


@pytest.fixture
def usd_rates() -> ExchangeRateTable:
    return ExchangeRateTable(
        base_currency="USD",
        rates={
            "USD": Decimal("1"),
            "EUR": Decimal("0.92"),
            "INR": Decimal("83.25"),
        },
    )
