"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from mortgage_sim.models.loan import DurationUnit, RateType


# ---- Request schemas ----

class AmortizationRequest(BaseModel):
    amount: Decimal = Field(..., description="Loan amount")
    rate: Decimal = Field(..., description="Annual interest rate in percent, e.g. 3 for 3%")
    duration: int = Field(..., description="Loan term, in duration_unit")
    duration_unit: DurationUnit = DurationUnit.YEARS
    rate_type: RateType = RateType.FIXED

    # Variable rate only
    cap: Decimal | None = Field(None, description="Maximum annual rate in percent")
    floor: Decimal | None = Field(None, description="Minimum annual rate in percent")

    start_date: date = Field(default_factory=date.today, description="First payment date")


# ---- Response schemas ----

class ScheduleRowResponse(BaseModel):
    index: int
    date: date
    period_rate_pct: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    payment_total: Decimal
    remaining_balance: Decimal


class YearAggregateResponse(BaseModel):
    year: int
    principal_sum: Decimal
    interest_sum: Decimal
    payment_sum: Decimal
    ending_balance: Decimal
    end_date: date | None = None


class AmortizationResponse(BaseModel):
    currency: str
    rate_type: RateType
    periods: int
    monthly_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal
    min_monthly_payment: Decimal
    max_monthly_payment: Decimal
    schedule: list[ScheduleRowResponse] = []
    yearly: list[YearAggregateResponse] = []
