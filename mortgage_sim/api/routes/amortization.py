"""Amortization routes: loan form in, schedule out."""

import logging
from datetime import date

from fastapi import APIRouter, HTTPException

from mortgage_sim.api.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    ScheduleRowResponse,
    YearAggregateResponse,
)
from mortgage_sim.config import settings
from mortgage_sim.engine.amortization import calculate_loan
from mortgage_sim.engine.validation import LoanForm, LoanInputError, validate_loan_form
from mortgage_sim.models.loan import RateType
from mortgage_sim.models.results import AmortizationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["amortization"])


def _to_form(req: AmortizationRequest) -> LoanForm:
    return LoanForm(
        amount=req.amount,
        rate=req.rate,
        duration=req.duration,
        start_date=req.start_date,
        duration_unit=req.duration_unit,
        rate_type=req.rate_type,
        cap=req.cap,
        floor=req.floor,
    )


def _result_to_response(
    result: AmortizationResult,
    rate_type: RateType,
    include_schedule: bool = True,
) -> AmortizationResponse:
    """Convert engine AmortizationResult to API response."""
    schedule = [
        ScheduleRowResponse(
            index=row.index,
            date=row.date,
            period_rate_pct=row.period_rate_pct,
            principal_portion=row.principal_portion,
            interest_portion=row.interest_portion,
            payment_total=row.payment_total,
            remaining_balance=row.remaining_balance,
        )
        for row in result.schedule
    ] if include_schedule else []

    yearly = [
        YearAggregateResponse(
            year=y.year,
            principal_sum=y.principal_sum,
            interest_sum=y.interest_sum,
            payment_sum=y.payment_sum,
            ending_balance=y.ending_balance,
            end_date=y.end_date,
        )
        for y in result.yearly_aggregates
    ]

    return AmortizationResponse(
        currency=settings.currency,
        rate_type=rate_type,
        periods=result.periods,
        monthly_payment=result.monthly_payment,
        total_interest=result.total_interest,
        total_paid=result.total_paid,
        min_monthly_payment=result.min_monthly_payment,
        max_monthly_payment=result.max_monthly_payment,
        schedule=schedule,
        yearly=yearly,
    )


@router.post("/amortization", response_model=AmortizationResponse)
async def amortize(req: AmortizationRequest, include_schedule: bool = True):
    """Loan form -> payment, totals, monthly schedule and yearly table.

    Form errors come back together as 422 {"detail": {"errors": {field: message}}}.
    """
    form = _to_form(req)
    errors = validate_loan_form(form, today=date.today(), limits=settings.form_limits)
    if errors:
        logger.warning("Rejected loan form: %s", errors)
        raise HTTPException(status_code=422, detail={"errors": errors})

    try:
        result = calculate_loan(form.to_loan_input())
    except LoanInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _result_to_response(result, req.rate_type, include_schedule=include_schedule)
