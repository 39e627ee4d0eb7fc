"""Canonical loan fixtures used across the engine and API tests.

Fixture: 250K loan, 3% per year, 25 years (300 months), first payment 2024-01-01.
"""

from datetime import date
from decimal import Decimal

import pytest

from mortgage_sim.models.loan import LoanInput, RateType


@pytest.fixture
def standard_loan() -> LoanInput:
    """250K fixed at 3% over 300 months."""
    return LoanInput(
        principal=Decimal("250000"),
        annual_rate_pct=Decimal("3"),
        periods=300,
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def variable_loan() -> LoanInput:
    """Same loan, variable with CAP 5% and FLOOR 1%."""
    return LoanInput(
        principal=Decimal("250000"),
        annual_rate_pct=Decimal("3"),
        periods=300,
        start_date=date(2024, 1, 1),
        rate_type=RateType.VARIABLE,
        cap_annual_pct=Decimal("5"),
        floor_annual_pct=Decimal("1"),
    )


@pytest.fixture
def zero_rate_loan() -> LoanInput:
    """100K interest-free over 12 months."""
    return LoanInput(
        principal=Decimal("100000"),
        annual_rate_pct=Decimal("0"),
        periods=12,
        start_date=date(2024, 1, 1),
    )
