"""CLI for the amortization engine.

Usage:
    python -m mortgage_sim.cli 250000 3 --duration 25
    python -m mortgage_sim.cli 250000 3 --duration 300 --unit months --monthly
    python -m mortgage_sim.cli 250000 3 --variable --cap 5 --floor 1 --start 2024-01-01
"""

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal

from mortgage_sim.config import settings
from mortgage_sim.engine.amortization import calculate_loan
from mortgage_sim.engine.validation import LoanForm, validate_loan_form
from mortgage_sim.models.loan import DurationUnit, RateType
from mortgage_sim.models.results import AmortizationResult


def print_summary(result: AmortizationResult, rate_type: RateType, currency: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  Loan Summary ({result.periods} months)")
    print(f"{'=' * 60}")
    print(f"  Monthly payment:      {currency} {result.monthly_payment:>14,.2f}")
    print(f"  Total interest:       {currency} {result.total_interest:>14,.2f}")
    print(f"  Total repayment:      {currency} {result.total_paid:>14,.2f}")
    if rate_type is RateType.VARIABLE:
        print(f"  Max monthly (CAP):    {currency} {result.max_monthly_payment:>14,.2f}")
        print(f"  Min monthly (FLOOR):  {currency} {result.min_monthly_payment:>14,.2f}")
    print()


def print_yearly(result: AmortizationResult) -> None:
    print(f"  {'Year':>6}  {'Principal':>14}  {'Interest':>14}  {'Paid':>14}  {'Balance':>14}")
    for y in result.yearly_aggregates:
        print(
            f"  {y.year:>6}  {y.principal_sum:>14,.2f}  {y.interest_sum:>14,.2f}"
            f"  {y.payment_sum:>14,.2f}  {y.ending_balance:>14,.2f}"
        )
    print()


def print_monthly(result: AmortizationResult) -> None:
    print(
        f"  {'#':>4}  {'Date':>10}  {'Rate %':>9}  {'Principal':>12}"
        f"  {'Interest':>12}  {'Total':>12}  {'Balance':>14}"
    )
    for row in result.schedule:
        print(
            f"  {row.index:>4}  {row.date.isoformat():>10}  {row.period_rate_pct:>9.5f}"
            f"  {row.principal_portion:>12,.2f}  {row.interest_portion:>12,.2f}"
            f"  {row.payment_total:>12,.2f}  {row.remaining_balance:>14,.2f}"
        )
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mortgage amortization schedule")
    parser.add_argument("amount", type=Decimal, help="Loan amount")
    parser.add_argument("rate", type=Decimal, help="Annual interest rate in percent (e.g. 3)")
    parser.add_argument("--duration", type=int, default=25, help="Loan term (default: 25)")
    parser.add_argument(
        "--unit", choices=[u.value for u in DurationUnit], default="years",
        help="Unit of --duration (default: years)",
    )
    parser.add_argument("--variable", action="store_true", help="Variable rate loan")
    parser.add_argument("--cap", type=Decimal, default=None, help="CAP, maximum annual rate in percent")
    parser.add_argument("--floor", type=Decimal, default=None, help="FLOOR, minimum annual rate in percent")
    parser.add_argument(
        "--start", type=date.fromisoformat, default=None,
        help="First payment date, YYYY-MM-DD (default: today)",
    )
    parser.add_argument("--monthly", action="store_true", help="Print the monthly table instead of the yearly one")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    today = date.today()
    rate_type = RateType.VARIABLE if args.variable else RateType.FIXED
    form = LoanForm(
        amount=args.amount,
        rate=args.rate,
        duration=args.duration,
        start_date=args.start or today,
        duration_unit=DurationUnit(args.unit),
        rate_type=rate_type,
        cap=args.cap,
        floor=args.floor,
    )

    errors = validate_loan_form(form, today=today, limits=settings.form_limits)
    if errors:
        for field, message in errors.items():
            print(f"{field}: {message}", file=sys.stderr)
        return 2

    result = calculate_loan(form.to_loan_input())
    print_summary(result, rate_type, settings.currency)
    if args.monthly:
        print_monthly(result)
    else:
        print_yearly(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
