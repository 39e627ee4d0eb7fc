from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class RateType(Enum):
    FIXED = "fixed"
    VARIABLE = "variable"


class DurationUnit(Enum):
    YEARS = "years"
    MONTHS = "months"


@dataclass(frozen=True)
class LoanInput:
    principal: Decimal
    annual_rate_pct: Decimal  # e.g. Decimal("3") for 3% per year
    periods: int  # Monthly payments
    start_date: date
    rate_type: RateType = RateType.FIXED

    # Variable rate only
    cap_annual_pct: Decimal | None = None
    floor_annual_pct: Decimal | None = None

    @property
    def is_variable(self) -> bool:
        return self.rate_type is RateType.VARIABLE


def periods_from_duration(duration: int, unit: DurationUnit) -> int:
    """Number of monthly periods for a term given in years or months."""
    if unit is DurationUnit.YEARS:
        return duration * 12
    return duration
