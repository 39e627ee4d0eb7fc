"""Input checks for the amortization engine and the loan form in front of it.

Two layers:
  - check_loan_input() guards the engine contract and raises LoanInputError.
  - validate_loan_form() applies the business limits of the loan form and
    returns field -> message, so a caller can show every problem at once.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from mortgage_sim.models.loan import DurationUnit, LoanInput, RateType, periods_from_duration

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


class LoanInputError(ValueError):
    """Loan input outside the engine contract."""

    field: str = ""


class InvalidPrincipal(LoanInputError):
    field = "principal"


class InvalidPeriods(LoanInputError):
    field = "periods"


class InvalidRate(LoanInputError):
    field = "annual_rate_pct"


class InvalidCapFloor(LoanInputError):
    field = "cap_floor"


def check_loan_input(loan: LoanInput) -> None:
    """Raise the first contract violation found in `loan`."""
    if loan.principal <= 0:
        raise InvalidPrincipal(f"principal must be > 0, got {loan.principal}")
    if not isinstance(loan.periods, int) or loan.periods <= 0:
        raise InvalidPeriods(f"periods must be a positive integer, got {loan.periods!r}")
    if loan.annual_rate_pct < 0 or loan.annual_rate_pct > HUNDRED:
        raise InvalidRate(f"annual rate must be within [0, 100]%, got {loan.annual_rate_pct}")

    if not loan.is_variable:
        return

    cap, floor = loan.cap_annual_pct, loan.floor_annual_pct
    for name, value in (("cap", cap), ("floor", floor)):
        if value is not None and (value < 0 or value > HUNDRED):
            raise InvalidCapFloor(f"{name} must be within [0, 100]%, got {value}")
    if cap is not None and floor is not None and floor > cap:
        raise InvalidCapFloor(f"floor {floor}% is above cap {cap}%")
    if cap is not None and cap < loan.annual_rate_pct:
        raise InvalidCapFloor(f"cap {cap}% is below the base rate {loan.annual_rate_pct}%")
    if floor is not None and floor > loan.annual_rate_pct:
        raise InvalidCapFloor(f"floor {floor}% is above the base rate {loan.annual_rate_pct}%")


@dataclass(frozen=True)
class FormLimits:
    min_amount: Decimal = Decimal("1000")
    max_amount: Decimal = Decimal("5000000")
    max_rate_pct: Decimal = Decimal("20")
    max_cap_pct: Decimal = Decimal("30")
    max_duration_years: int = 50
    max_duration_months: int = 600

    def max_duration(self, unit: DurationUnit) -> int:
        if unit is DurationUnit.MONTHS:
            return self.max_duration_months
        return self.max_duration_years


@dataclass(frozen=True)
class LoanForm:
    """Raw loan form values, before conversion to a LoanInput."""
    amount: Decimal
    rate: Decimal  # Annual %, e.g. Decimal("3")
    duration: int
    start_date: date
    duration_unit: DurationUnit = DurationUnit.YEARS
    rate_type: RateType = RateType.FIXED
    cap: Decimal | None = None
    floor: Decimal | None = None

    def to_loan_input(self) -> LoanInput:
        """Engine input; cap/floor are dropped for fixed-rate loans."""
        variable = self.rate_type is RateType.VARIABLE
        return LoanInput(
            principal=self.amount,
            annual_rate_pct=self.rate,
            periods=periods_from_duration(self.duration, self.duration_unit),
            start_date=self.start_date,
            rate_type=self.rate_type,
            cap_annual_pct=self.cap if variable else None,
            floor_annual_pct=self.floor if variable else None,
        )


def validate_loan_form(
    form: LoanForm,
    today: date,
    limits: FormLimits | None = None,
) -> dict[str, str]:
    """Check form values against the loan limits.

    Args:
        form: Values as entered.
        today: Reference date for the start date check (no future loans).
        limits: Business limits, defaults to FormLimits().

    Returns:
        Mapping of field name to error message. Empty when the form is valid.
        For cap, the last failing rule wins (ordering > cap limit > rate).
    """
    limits = limits or FormLimits()
    errors: dict[str, str] = {}

    if form.amount < limits.min_amount or form.amount > limits.max_amount:
        errors["amount"] = (
            f"Loan amount must be between {limits.min_amount:,} and {limits.max_amount:,}"
        )
    if form.rate < 0 or form.rate > limits.max_rate_pct:
        errors["rate"] = f"Interest rate must be between 0% and {limits.max_rate_pct}%"

    max_duration = limits.max_duration(form.duration_unit)
    if form.duration < 1 or form.duration > max_duration:
        errors["duration"] = (
            f"Term must be between 1 and {max_duration} {form.duration_unit.value}"
        )

    if form.rate_type is RateType.VARIABLE:
        cap, floor = form.cap, form.floor
        if cap is not None and cap < form.rate:
            errors["cap"] = "CAP must be at least the interest rate"
        if cap is not None and cap > limits.max_cap_pct:
            errors["cap"] = f"CAP may not exceed {limits.max_cap_pct}%"
        if floor is not None and floor > form.rate:
            errors["floor"] = "FLOOR must not exceed the interest rate"
        if floor is not None and floor < 0:
            errors["floor"] = "FLOOR may not be negative"
        if cap is not None and floor is not None and cap < floor:
            errors["cap"] = "CAP below FLOOR is not allowed"

    if form.start_date > today:
        errors["start_date"] = "Use a start date today or in the past"

    if errors:
        logger.debug("Loan form rejected: %s", sorted(errors))
    return errors
