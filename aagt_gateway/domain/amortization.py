"""Fixed-rate amortization for monthly repayment loans"""

from typing import Any, List, Mapping, Union

from aagt_gateway.domain.models import AmortizationEntry, LoanCalculatorInput, LoanCalculatorResult
from aagt_gateway.domain.fees import calculate_effective_rate


def calculate_monthly_payment(principal: float, monthly_rate: float, term_months: int) -> float:
    """
    Standard annuity payment for a fully amortizing loan.

    payment = P * r * (1 + r)^n / ((1 + r)^n - 1)

    A zero rate collapses to straight-line repayment (principal / term).
    The value is not rounded; rounding belongs to whoever displays it.
    """
    if monthly_rate == 0:
        return principal / term_months

    factor = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * factor / (factor - 1)


def generate_amortization_schedule(
    principal: float,
    monthly_rate: float,
    monthly_payment: float,
    term_months: int,
) -> List[AmortizationEntry]:
    """
    Break a loan into month-by-month principal and interest portions.

    Requirements:
    - One entry per month, months numbered from 1
    - payment/principal/interest rounded to cents for display
    - Remaining balance carried at full precision between months
    - Reported balance clamped at zero (float drift on the final month)
    """
    schedule = []
    remaining_balance = principal

    for month in range(1, term_months + 1):
        interest = remaining_balance * monthly_rate
        principal_portion = monthly_payment - interest
        remaining_balance -= principal_portion

        schedule.append(
            AmortizationEntry(
                month=month,
                payment=round(monthly_payment, 2),
                principal=round(principal_portion, 2),
                interest=round(interest, 2),
                balance=max(0.0, remaining_balance),
            )
        )

    return schedule


def calculate_loan(loan_input: Union[LoanCalculatorInput, Mapping[str, Any]]) -> LoanCalculatorResult:
    """
    Main entry point: payment, totals, schedule and fee-adjusted rate.

    Input is trusted; run validate_input first. Totals are rounded to cents,
    the monthly payment is kept at full precision.
    """
    if not isinstance(loan_input, LoanCalculatorInput):
        loan_input = LoanCalculatorInput.from_mapping(loan_input)

    principal = loan_input.loan_amount
    term_months = loan_input.loan_term_months
    monthly_rate = loan_input.interest_rate / 100 / 12

    monthly_payment = calculate_monthly_payment(principal, monthly_rate, term_months)
    total_amount = monthly_payment * term_months

    return LoanCalculatorResult(
        monthly_payment=monthly_payment,
        total_interest=round(total_amount - principal, 2),
        total_amount=round(total_amount, 2),
        amortization_schedule=generate_amortization_schedule(
            principal, monthly_rate, monthly_payment, term_months
        ),
        effective_rate=calculate_effective_rate(loan_input),
    )
