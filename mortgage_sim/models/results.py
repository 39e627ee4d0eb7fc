from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class ScheduleRow:
    index: int  # 1-based
    date: date
    period_rate_pct: Decimal  # Monthly rate in percent, unrounded
    principal_portion: Decimal
    interest_portion: Decimal
    payment_total: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class YearAggregate:
    year: int
    principal_sum: Decimal = Decimal("0")
    interest_sum: Decimal = Decimal("0")
    payment_sum: Decimal = Decimal("0")
    ending_balance: Decimal = Decimal("0")
    end_date: date | None = None


@dataclass(frozen=True)
class AmortizationResult:
    monthly_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal
    schedule: list[ScheduleRow] = field(default_factory=list)
    yearly_aggregates: list[YearAggregate] = field(default_factory=list)

    # Best/worst case under FLOOR/CAP; equal to monthly_payment for fixed loans
    min_monthly_payment: Decimal = Decimal("0")
    max_monthly_payment: Decimal = Decimal("0")

    @property
    def periods(self) -> int:
        return len(self.schedule)
