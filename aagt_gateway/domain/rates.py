"""Indicative rates and the bank comparison used for marketing quotes"""

from typing import Dict, List, Optional, Sequence

from aagt_gateway.domain.amortization import calculate_monthly_payment
from aagt_gateway.domain.exceptions import RateCardError
from aagt_gateway.domain.models import (
    BankSavings,
    ComparisonRate,
    LoanCalculatorInput,
    LoanCalculatorResult,
    RateCard,
)

# Marketing constants, not derived from the loan
TIME_TO_APPROVAL_DAYS = 1
SETTLEMENT_DAYS = 4

DEFAULT_RATE_CARD = RateCard(
    purpose_rates={
        "business": 8.95,
        "investment": 9.25,
        "property": 8.75,
        "working-capital": 9.45,
    },
    comparison_rates=[
        ComparisonRate(lender="AAGT Private Loans", rate=8.95, fees=1500, comparison_rate=9.12, is_aagt=True),
        ComparisonRate(lender="CBA Business", rate=7.25, fees=3500, comparison_rate=7.58, is_aagt=False),
        ComparisonRate(lender="ANZ Business", rate=7.45, fees=3200, comparison_rate=7.74, is_aagt=False),
        ComparisonRate(lender="NAB Business", rate=7.35, fees=3800, comparison_rate=7.71, is_aagt=False),
        ComparisonRate(lender="Westpac Business", rate=7.55, fees=3600, comparison_rate=7.89, is_aagt=False),
    ],
    standard_rate=8.95,
)


def get_aagt_rates(rate_card: RateCard = DEFAULT_RATE_CARD) -> Dict[str, float]:
    """Indicative annual rate per loan purpose"""
    return dict(rate_card.purpose_rates)


def get_bank_comparison_rates(rate_card: RateCard = DEFAULT_RATE_CARD) -> List[ComparisonRate]:
    """Lender comparison table, AAGT row included"""
    return list(rate_card.comparison_rates)


def calculate_savings_vs_banks(
    aagt_result: LoanCalculatorResult,
    loan_input: LoanCalculatorInput,
    comparison_rates: Optional[Sequence[ComparisonRate]] = None,
) -> BankSavings:
    """
    Compare the AAGT payment with a loan at the average bank comparison rate.

    A positive monthly_savings means the banks' payment is higher.

    Raises:
        RateCardError: If the comparison table holds no bank (non-AAGT) rows
    """
    if comparison_rates is None:
        comparison_rates = DEFAULT_RATE_CARD.comparison_rates

    bank_rates = [rate for rate in comparison_rates if not rate.is_aagt]
    if not bank_rates:
        raise RateCardError("No bank comparison rates configured")

    avg_bank_rate = sum(rate.comparison_rate for rate in bank_rates) / len(bank_rates)
    bank_monthly_payment = calculate_monthly_payment(
        loan_input.loan_amount,
        avg_bank_rate / 100 / 12,
        loan_input.loan_term_months,
    )

    return BankSavings(
        avg_bank_payment=bank_monthly_payment,
        monthly_savings=bank_monthly_payment - aagt_result.monthly_payment,
        time_to_approval_days=TIME_TO_APPROVAL_DAYS,
        settlement_days=SETTLEMENT_DAYS,
    )
