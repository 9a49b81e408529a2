"""POST /v1/calculate-loan - payment calculation endpoint"""

import logging
import time
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from aagt_gateway.api.dependencies import get_request_id, get_settings
from aagt_gateway.api.v1.schemas import AmortizationEntrySchema, CalculationResponse, LoanInputRequest
from aagt_gateway.config import Settings
from aagt_gateway.domain.exceptions import InvalidLoanInputError
from aagt_gateway.domain.models import AmortizationEntry
from aagt_gateway.domain.quotes import quote_loan
from aagt_gateway.domain.validation import get_bounds_policy
from aagt_gateway.infrastructure.observability.logging import log_quote, log_rejection
from aagt_gateway.infrastructure.observability.metrics import record_quote, record_validation_failure

router = APIRouter()

ENDPOINT = "calculate-loan"


def schedule_schema(schedule: List[AmortizationEntry]) -> List[AmortizationEntrySchema]:
    """Serialize a schedule, rounding balances to cents for the wire"""
    return [
        AmortizationEntrySchema(
            month=entry.month,
            payment=entry.payment,
            principal=entry.principal,
            interest=entry.interest,
            balance=round(entry.balance, 2),
        )
        for entry in schedule
    ]


@router.post(
    "/calculate-loan",
    response_model=CalculationResponse,
    response_model_exclude_none=True,
)
def calculate_loan_endpoint(
    request_body: LoanInputRequest,
    request: Request,
    schedule: Optional[bool] = Query(None, description="Include the amortization schedule"),
    app_settings: Settings = Depends(get_settings),
):
    """
    Calculate repayments for a loan.

    Flow:
    1. Validate under the configured bounds policy (400 with the first message)
    2. Calculate payment, totals and effective rate
    3. Attach the amortization schedule when ?schedule=true
    """
    start_time = time.time()
    request_id = get_request_id(request)
    policy = get_bounds_policy(app_settings.calculate_loan_policy)
    include_schedule = app_settings.include_schedule_by_default if schedule is None else schedule

    try:
        quote = quote_loan(request_body.to_mapping(), policy)
    except InvalidLoanInputError as e:
        record_validation_failure(policy.name)
        log_rejection(request_id, ENDPOINT, policy.name, e.errors)
        raise HTTPException(status_code=400, detail=e.errors[0])

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    result = quote.result
    duration_ms = (time.time() - start_time) * 1000
    record_quote(ENDPOINT, quote.input.loan_purpose, quote.input.loan_term_months)
    log_quote(
        request_id,
        ENDPOINT,
        quote.input.loan_amount,
        quote.input.loan_term_months,
        result.monthly_payment,
        quote.input.loan_purpose,
        duration_ms,
    )

    return CalculationResponse(
        monthly_payment=round(result.monthly_payment, 2),
        total_interest=result.total_interest,
        total_amount=result.total_amount,
        effective_rate=round(result.effective_rate, 2),
        amortization_schedule=schedule_schema(result.amortization_schedule) if include_schedule else None,
    )


@router.get("/calculate-loan")
def describe_calculate_loan(app_settings: Settings = Depends(get_settings)):
    """Describe the calculator endpoint and its accepted ranges"""
    policy = get_bounds_policy(app_settings.calculate_loan_policy)

    return {
        "message": "Loan Calculator API",
        "policy": policy.name,
        "endpoints": {
            "POST /v1/calculate-loan": "Calculate loan payments",
            "POST /v1/calculate-loan?schedule=true": "Calculate with amortization schedule",
        },
        "parameters": {
            "amount": f"Loan amount ({policy.min_amount:,.0f} - {policy.max_amount:,.0f})",
            "rate": f"Annual interest rate percentage ({policy.min_rate:g} - {policy.max_rate:g})",
            "term": f"Loan term in months ({policy.min_term} - {policy.max_term})",
        },
    }
