"""Custom indicative rate from loan purpose, size and security"""

from typing import Optional

from aagt_gateway.domain.models import CustomRateQuote, RateCard
from aagt_gateway.domain.rates import DEFAULT_RATE_CARD

# (minimum loan amount, rate adjustment) - first match wins
AMOUNT_ADJUSTMENTS = (
    (2_000_000, -0.25),
    (1_000_000, -0.15),
    (500_000, -0.05),
)

SECURITY_ADJUSTMENTS = {
    "property": -0.10,
    "business-assets": 0.05,
    "personal-guarantee": 0.15,
    "other": 0.25,
}

LARGE_LOAN_THRESHOLD = 500_000


def quote_custom_rate(
    loan_purpose: Optional[str],
    loan_amount: float,
    security_type: Optional[str],
    rate_card: RateCard = DEFAULT_RATE_CARD,
) -> CustomRateQuote:
    """
    Price a loan off the purpose rate with size and security adjustments.

    Rules:
    - Base: rate card purpose rate, standard rate for unknown purposes
    - Size: -0.25 from $2M, -0.15 from $1M, -0.05 from $500k
    - Security: property -0.10, business assets +0.05,
      personal guarantee +0.15, other +0.25
    """
    rate = rate_card.purpose_rates.get(loan_purpose, rate_card.standard_rate)

    for threshold, adjustment in AMOUNT_ADJUSTMENTS:
        if loan_amount >= threshold:
            rate += adjustment
            break

    rate += SECURITY_ADJUSTMENTS.get(security_type, 0.0)
    custom_rate = round(rate, 2)

    return CustomRateQuote(
        custom_rate=custom_rate,
        standard_rate=rate_card.standard_rate,
        discount=round(rate_card.standard_rate - custom_rate, 2),
        reasoning={
            "loan_amount": (
                "Large loan discount applied" if loan_amount >= LARGE_LOAN_THRESHOLD else "Standard rate"
            ),
            "security_type": (
                "Property security discount" if security_type == "property" else "Risk adjustment applied"
            ),
        },
    )
