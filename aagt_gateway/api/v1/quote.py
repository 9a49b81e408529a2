"""POST /v1/quote - full quote with bank comparison for the calculator page"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from aagt_gateway.api.dependencies import get_rate_card, get_request_id, get_settings
from aagt_gateway.api.v1.calculate import schedule_schema
from aagt_gateway.api.v1.schemas import LoanInputRequest, QuoteDisplay, QuoteResponse, SavingsSchema
from aagt_gateway.config import Settings
from aagt_gateway.domain.exceptions import InvalidLoanInputError, RateCardError
from aagt_gateway.domain.models import RateCard
from aagt_gateway.domain.quotes import quote_loan
from aagt_gateway.domain.rates import calculate_savings_vs_banks, get_bank_comparison_rates
from aagt_gateway.domain.validation import get_bounds_policy
from aagt_gateway.infrastructure.observability.logging import log_quote, log_rejection
from aagt_gateway.infrastructure.observability.metrics import record_quote, record_validation_failure
from aagt_gateway.utils.formatting import format_currency, format_percentage

router = APIRouter()

ENDPOINT = "quote"


@router.post("/quote", response_model=QuoteResponse, response_model_exclude_none=True)
def create_quote(
    request_body: LoanInputRequest,
    request: Request,
    schedule: Optional[bool] = Query(None, description="Include the amortization schedule"),
    rate_card: RateCard = Depends(get_rate_card),
    app_settings: Settings = Depends(get_settings),
):
    """
    Build a marketing quote.

    Flow:
    1. Validate under the quote bounds policy (strict unless configured)
    2. Calculate payment, totals and effective rate
    3. Compare against the average bank comparison rate
    4. Return raw figures plus display strings
    """
    start_time = time.time()
    request_id = get_request_id(request)
    policy = get_bounds_policy(app_settings.quote_policy)
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

    loan_input, result = quote.input, quote.result

    try:
        savings = calculate_savings_vs_banks(result, loan_input, get_bank_comparison_rates(rate_card))
    except RateCardError as e:
        logging.error(f"Bank comparison unavailable: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Rate comparison unavailable")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_quote(ENDPOINT, loan_input.loan_purpose, loan_input.loan_term_months)
    log_quote(
        request_id,
        ENDPOINT,
        loan_input.loan_amount,
        loan_input.loan_term_months,
        result.monthly_payment,
        loan_input.loan_purpose,
        duration_ms,
    )

    return QuoteResponse(
        loan_amount=loan_input.loan_amount,
        interest_rate=loan_input.interest_rate,
        loan_term_months=loan_input.loan_term_months,
        loan_purpose=loan_input.loan_purpose or "",
        security_type=loan_input.security_type or "",
        monthly_payment=round(result.monthly_payment, 2),
        total_interest=result.total_interest,
        total_amount=result.total_amount,
        effective_rate=round(result.effective_rate, 2),
        savings=SavingsSchema(
            avg_bank_payment=round(savings.avg_bank_payment, 2),
            monthly_savings=round(savings.monthly_savings, 2),
            time_to_approval_days=savings.time_to_approval_days,
            settlement_days=savings.settlement_days,
        ),
        display=QuoteDisplay(
            loan_amount=format_currency(loan_input.loan_amount),
            monthly_payment=format_currency(result.monthly_payment),
            total_interest=format_currency(result.total_interest),
            total_amount=format_currency(result.total_amount),
            interest_rate=format_percentage(loan_input.interest_rate),
            effective_rate=format_percentage(result.effective_rate),
        ),
        amortization_schedule=schedule_schema(result.amortization_schedule) if include_schedule else None,
    )
