"""GET /v1/rates and POST /v1/rates/custom - indicative rates"""

from fastapi import APIRouter, Depends

from aagt_gateway.api.dependencies import get_rate_card
from aagt_gateway.api.v1.schemas import (
    ComparisonRateSchema,
    CustomRateRequest,
    CustomRateResponse,
    RatesResponse,
)
from aagt_gateway.domain.models import RateCard
from aagt_gateway.domain.pricing import quote_custom_rate
from aagt_gateway.domain.rates import get_aagt_rates, get_bank_comparison_rates
from aagt_gateway.infrastructure.observability.metrics import record_quote

router = APIRouter()


@router.get("/rates", response_model=RatesResponse)
def get_rates(rate_card: RateCard = Depends(get_rate_card)):
    """Current indicative rates by purpose and the lender comparison table"""
    return RatesResponse(
        rates=get_aagt_rates(rate_card),
        standard_rate=rate_card.standard_rate,
        comparison_rates=[
            ComparisonRateSchema(
                lender=row.lender,
                rate=row.rate,
                fees=row.fees,
                comparison_rate=row.comparison_rate,
                is_aagt=row.is_aagt,
            )
            for row in get_bank_comparison_rates(rate_card)
        ],
    )


@router.post("/rates/custom", response_model=CustomRateResponse)
def get_custom_rate(request_body: CustomRateRequest, rate_card: RateCard = Depends(get_rate_card)):
    """
    Indicative rate for a specific loan.

    Starts from the purpose rate and adjusts for loan size and security type.
    """
    custom = quote_custom_rate(
        request_body.loan_purpose,
        request_body.loan_amount,
        request_body.security_type,
        rate_card,
    )
    record_quote("rates-custom", request_body.loan_purpose)

    return CustomRateResponse(
        custom_rate=custom.custom_rate,
        standard_rate=custom.standard_rate,
        discount=custom.discount,
        reasoning=custom.reasoning,
    )
