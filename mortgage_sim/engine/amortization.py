"""Amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O.

Pipeline: annual rate -> compound monthly rate -> level payment -> monthly
schedule -> yearly aggregates -> cap/floor payment bounds.
"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from mortgage_sim.engine.calendar import payment_date
from mortgage_sim.engine.validation import check_loan_input
from mortgage_sim.models.loan import LoanInput
from mortgage_sim.models.results import AmortizationResult, ScheduleRow, YearAggregate

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")
ONE_TWELFTH = Decimal(1) / 12


def round2(value: Decimal) -> Decimal:
    """Round half-up to the cent. Applied to every monetary figure."""
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def periodic_rate(annual_pct: Decimal) -> Decimal:
    """Effective monthly rate for an annual percentage.

    Compound conversion: twelve months at the returned rate reproduce the
    annual rate exactly, (1 + r)^12 = 1 + annual_pct/100.
    """
    if annual_pct == 0:
        return Decimal("0")
    return (1 + annual_pct / HUNDRED) ** ONE_TWELFTH - 1


def level_payment(principal: Decimal, rate: Decimal, periods: int) -> Decimal:
    """Constant payment that clears `principal` in `periods` at periodic `rate`."""
    if rate == 0:
        return round2(principal / periods)

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + rate) ** periods
    return round2(principal * rate * factor / (factor - 1))


def amortization_schedule(
    principal: Decimal,
    rate: Decimal,
    periods: int,
    start_date: date,
    payment: Decimal | None = None,
) -> list[ScheduleRow]:
    """Generate the monthly schedule.

    Args:
        principal: Loan amount
        rate: Periodic (monthly) rate as a fraction, applied to every period
        periods: Number of monthly payments
        start_date: Due date of the first payment
        payment: Level payment, computed from the other arguments if omitted

    The last period pays off whatever balance is left after rounding, so its
    payment can differ from the level payment by a few cents and the final
    balance is exactly zero.
    """
    pmt = level_payment(principal, rate, periods) if payment is None else payment
    rate_pct = rate * HUNDRED

    rows: list[ScheduleRow] = []
    balance = principal

    for index in range(1, periods + 1):
        interest = round2(balance * rate)
        if index < periods:
            principal_paid = round2(pmt - interest)
            actual_payment = pmt
            balance = round2(balance - principal_paid)
        else:
            # Final payment clears the rounding residue
            principal_paid = round2(balance)
            actual_payment = round2(principal_paid + interest)
            balance = Decimal("0.00")

        rows.append(ScheduleRow(
            index=index,
            date=payment_date(start_date, index),
            period_rate_pct=rate_pct,
            principal_portion=principal_paid,
            interest_portion=interest,
            payment_total=actual_payment,
            remaining_balance=balance,
        ))

    return rows


def yearly_aggregates(schedule: list[ScheduleRow]) -> list[YearAggregate]:
    """Aggregate the schedule by calendar year of each payment date.

    Sums are rounded after every addition. The last row seen in a year gives
    that year's ending balance and end date.
    """
    by_year: dict[int, dict] = {}

    for row in schedule:
        acc = by_year.setdefault(row.date.year, {
            "principal_sum": Decimal("0"),
            "interest_sum": Decimal("0"),
            "payment_sum": Decimal("0"),
        })
        acc["principal_sum"] = round2(acc["principal_sum"] + row.principal_portion)
        acc["interest_sum"] = round2(acc["interest_sum"] + row.interest_portion)
        acc["payment_sum"] = round2(acc["payment_sum"] + row.payment_total)
        acc["ending_balance"] = row.remaining_balance
        acc["end_date"] = row.date

    return [YearAggregate(year=year, **by_year[year]) for year in sorted(by_year)]


def payment_bounds(loan: LoanInput, monthly_payment: Decimal) -> tuple[Decimal, Decimal]:
    """(min, max) monthly payment under FLOOR and CAP rates.

    Single projections with the level payment formula; no schedule is built
    for them. A missing cap or floor falls back to the base rate. Fixed loans
    return the base payment twice.
    """
    if not loan.is_variable:
        return monthly_payment, monthly_payment

    cap = loan.cap_annual_pct if loan.cap_annual_pct is not None else loan.annual_rate_pct
    floor = loan.floor_annual_pct if loan.floor_annual_pct is not None else loan.annual_rate_pct

    min_payment = level_payment(loan.principal, periodic_rate(floor), loan.periods)
    max_payment = level_payment(loan.principal, periodic_rate(cap), loan.periods)
    return min_payment, max_payment


def calculate_loan(loan: LoanInput, strict: bool = True) -> AmortizationResult:
    """Full amortization result for a loan.

    The base rate drives every schedule row, variable loans included; cap and
    floor only feed the min/max payment figures.

    Args:
        loan: Loan terms
        strict: Check the input contract first (raises LoanInputError)
    """
    if strict:
        check_loan_input(loan)

    rate = periodic_rate(loan.annual_rate_pct)
    pmt = level_payment(loan.principal, rate, loan.periods)
    schedule = amortization_schedule(loan.principal, rate, loan.periods, loan.start_date, pmt)
    min_payment, max_payment = payment_bounds(loan, pmt)

    result = AmortizationResult(
        monthly_payment=pmt,
        total_interest=round2(sum((row.interest_portion for row in schedule), Decimal("0"))),
        total_paid=round2(sum((row.payment_total for row in schedule), Decimal("0"))),
        schedule=schedule,
        yearly_aggregates=yearly_aggregates(schedule),
        min_monthly_payment=min_payment,
        max_monthly_payment=max_payment,
    )
    logger.debug(
        "Amortized %s over %d months at %s%%: payment %s, interest %s",
        loan.principal, loan.periods, loan.annual_rate_pct, pmt, result.total_interest,
    )
    return result
