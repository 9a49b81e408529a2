"""Validate-then-calculate entry point shared by the HTTP endpoints"""

from typing import Any, Mapping, Union

from aagt_gateway.domain.amortization import calculate_loan
from aagt_gateway.domain.exceptions import InvalidLoanInputError
from aagt_gateway.domain.models import LoanCalculatorInput, LoanQuote
from aagt_gateway.domain.validation import BoundsPolicy, validate_input


def quote_loan(data: Union[LoanCalculatorInput, Mapping[str, Any]], policy: BoundsPolicy) -> LoanQuote:
    """
    Validate raw input under the caller's chosen bounds policy, then calculate.

    Raises:
        InvalidLoanInputError: With every validation message, if any check fails
    """
    errors = validate_input(data, policy)
    if errors:
        raise InvalidLoanInputError(errors)

    loan_input = data if isinstance(data, LoanCalculatorInput) else LoanCalculatorInput.from_mapping(data)
    return LoanQuote(input=loan_input, result=calculate_loan(loan_input))
