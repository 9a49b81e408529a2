"""Calculator input validation against business-rule bounds"""

from dataclasses import dataclass
from typing import Any, List

from aagt_gateway.domain.models import LOAN_PURPOSES, SECURITY_TYPES, lookup_field, to_number


@dataclass(frozen=True)
class BoundsPolicy:
    """Inclusive bounds applied by validate_input"""

    name: str
    min_amount: float
    max_amount: float
    min_rate: float
    max_rate: float
    min_term: int
    max_term: int
    require_purpose_and_security: bool


# Calculator engine consumers (quote page, widgets)
STRICT_POLICY = BoundsPolicy(
    name="strict",
    min_amount=150_000,
    max_amount=5_000_000,
    min_rate=5,
    max_rate=25,
    min_term=1,
    max_term=300,
    require_purpose_and_security=True,
)

# Public calculate-loan endpoint
PERMISSIVE_POLICY = BoundsPolicy(
    name="permissive",
    min_amount=150_000,
    max_amount=5_000_000,
    min_rate=0.1,
    max_rate=50,
    min_term=1,
    max_term=300,
    require_purpose_and_security=False,
)

BOUNDS_POLICIES = {policy.name: policy for policy in (STRICT_POLICY, PERMISSIVE_POLICY)}


def get_bounds_policy(name: str) -> BoundsPolicy:
    """Resolve a policy preset by name ("strict" or "permissive")"""
    try:
        return BOUNDS_POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown bounds policy: {name!r}") from None


def validate_input(partial_input: Any, policy: BoundsPolicy = STRICT_POLICY) -> List[str]:
    """
    Check raw calculator input and return every problem found.

    Accepts a mapping (snake_case, camelCase or short HTTP keys) or a
    LoanCalculatorInput. Never raises: an empty list means the input is safe
    to pass to calculate_loan. Absent, zero and non-numeric amounts, rates and
    terms all fail their range checks, as do fractional terms; a missing amount reports both the
    minimum and maximum messages.
    """
    errors = []

    loan_amount = to_number(lookup_field(partial_input, "loan_amount"))
    interest_rate = to_number(lookup_field(partial_input, "interest_rate"))
    loan_term = to_number(lookup_field(partial_input, "loan_term_months"))
    loan_purpose = lookup_field(partial_input, "loan_purpose")
    security_type = lookup_field(partial_input, "security_type")

    if not loan_amount or loan_amount < policy.min_amount:
        errors.append(f"Loan amount must be at least ${policy.min_amount:,.0f}")
    if not loan_amount or loan_amount > policy.max_amount:
        errors.append(f"Loan amount cannot exceed ${policy.max_amount:,.0f}")
    if not interest_rate or not policy.min_rate <= interest_rate <= policy.max_rate:
        errors.append(f"Interest rate must be between {policy.min_rate:g}% and {policy.max_rate:g}%")
    if not loan_term or loan_term % 1 != 0 or not policy.min_term <= loan_term <= policy.max_term:
        errors.append(f"Loan term must be between {policy.min_term} and {policy.max_term} months")

    if not loan_purpose:
        if policy.require_purpose_and_security:
            errors.append("Loan purpose is required")
    elif loan_purpose not in LOAN_PURPOSES:
        errors.append(f"Loan purpose must be one of: {', '.join(LOAN_PURPOSES)}")

    if not security_type:
        if policy.require_purpose_and_security:
            errors.append("Security type is required")
    elif security_type not in SECURITY_TYPES:
        errors.append(f"Security type must be one of: {', '.join(SECURITY_TYPES)}")

    return errors
