"""Settlement fees and the fee-adjusted effective rate"""

from aagt_gateway.domain.models import BaseFees, LoanCalculatorInput

ESTABLISHMENT_FEE_RATE = 0.01
ESTABLISHMENT_FEE_CAP = 5_000
LEGAL_FEE_RATE = 0.005
LEGAL_FEE_CAP = 2_500
PROPERTY_VALUATION_FEE = 800
OTHER_VALUATION_FEE = 500


def get_base_fees(loan_input: LoanCalculatorInput) -> BaseFees:
    """Establishment (1%, max $5,000), legal (0.5%, max $2,500) and valuation fees"""
    loan_amount = loan_input.loan_amount

    return BaseFees(
        establishment=min(loan_amount * ESTABLISHMENT_FEE_RATE, ESTABLISHMENT_FEE_CAP),
        legal=min(loan_amount * LEGAL_FEE_RATE, LEGAL_FEE_CAP),
        valuation=PROPERTY_VALUATION_FEE if loan_input.security_type == "property" else OTHER_VALUATION_FEE,
    )


def calculate_effective_rate(loan_input: LoanCalculatorInput) -> float:
    """
    Annual rate inflated by the one-off fees spread over the loan's life.

    fee_impact = fees / (amount - fees) * 100
    effective  = rate + fee_impact / term_years

    Shorter terms carry the same fees over fewer years, so they show a higher
    effective rate. If fees swallow the whole principal the nominal rate is
    returned unchanged.
    """
    total_fees = get_base_fees(loan_input).total
    net_loan_amount = loan_input.loan_amount - total_fees

    if net_loan_amount <= 0:
        return loan_input.interest_rate

    fee_impact = (total_fees / net_loan_amount) * 100
    return loan_input.interest_rate + fee_impact / (loan_input.loan_term_months / 12)
