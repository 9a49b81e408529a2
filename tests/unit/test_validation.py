"""Unit tests for calculator input validation"""

from dataclasses import replace

import pytest

from aagt_gateway.domain.exceptions import InvalidLoanInputError
from aagt_gateway.domain.models import LoanCalculatorInput
from aagt_gateway.domain.quotes import quote_loan
from aagt_gateway.domain.validation import (
    PERMISSIVE_POLICY,
    STRICT_POLICY,
    get_bounds_policy,
    validate_input,
)

AMOUNT_MIN = "Loan amount must be at least $150,000"
AMOUNT_MAX = "Loan amount cannot exceed $5,000,000"
RATE_RANGE = "Interest rate must be between 5% and 25%"
TERM_RANGE = "Loan term must be between 1 and 300 months"
PURPOSE_REQUIRED = "Loan purpose is required"
SECURITY_REQUIRED = "Security type is required"


def test_valid_input_has_no_errors(sample_input: LoanCalculatorInput, sample_body: dict):
    assert validate_input(sample_input) == []
    assert validate_input(sample_body) == []


def test_empty_input_reports_every_check():
    errors = validate_input({})

    assert errors == [AMOUNT_MIN, AMOUNT_MAX, RATE_RANGE, TERM_RANGE, PURPOSE_REQUIRED, SECURITY_REQUIRED]


def test_amount_too_low(sample_body: dict):
    errors = validate_input({**sample_body, "loanAmount": 100000})

    assert errors == [AMOUNT_MIN]


def test_amount_too_high(sample_body: dict):
    errors = validate_input({**sample_body, "loanAmount": 6000000})

    assert errors == [AMOUNT_MAX]


@pytest.mark.parametrize("rate", [0, 4.99, 25.01, 30])
def test_rate_out_of_range(sample_body: dict, rate: float):
    assert validate_input({**sample_body, "interestRate": rate}) == [RATE_RANGE]


@pytest.mark.parametrize("term", [12.5, "36.25", 0.5])
def test_fractional_term_rejected(sample_body: dict, term):
    """Terms are whole months; fractions are not rounded into a different loan"""
    assert validate_input({**sample_body, "loanTermMonths": term}) == [TERM_RANGE]
    assert validate_input({**sample_body, "loanTermMonths": term}, PERMISSIVE_POLICY) == [TERM_RANGE]


def test_whole_number_float_term_accepted(sample_body: dict):
    assert validate_input({**sample_body, "loanTermMonths": 240.0}) == []


@pytest.mark.parametrize("term", [0, -12, 301])
def test_term_out_of_range(sample_body: dict, term: int):
    assert validate_input({**sample_body, "loanTermMonths": term}) == [TERM_RANGE]


def test_bounds_are_inclusive(sample_body: dict):
    for overrides in (
        {"loanAmount": 150000, "interestRate": 5, "loanTermMonths": 1},
        {"loanAmount": 5000000, "interestRate": 25, "loanTermMonths": 300},
    ):
        assert validate_input({**sample_body, **overrides}) == []


def test_missing_purpose_and_security():
    errors = validate_input({"loanAmount": 500000, "interestRate": 8.95, "loanTermMonths": 240})

    assert errors == [PURPOSE_REQUIRED, SECURITY_REQUIRED]


def test_unknown_purpose_and_security(sample_input: LoanCalculatorInput):
    errors = validate_input(replace(sample_input, loan_purpose="car", security_type="crypto"))

    assert errors == [
        "Loan purpose must be one of: business, investment, property, working-capital",
        "Security type must be one of: property, business-assets, personal-guarantee, other",
    ]


def test_non_numeric_values_treated_as_missing(sample_body: dict):
    errors = validate_input({**sample_body, "loanAmount": "lots", "interestRate": float("nan")})

    assert errors == [AMOUNT_MIN, AMOUNT_MAX, RATE_RANGE]


def test_numeric_strings_accepted(sample_body: dict):
    """Form fields arrive as strings once the UI has stripped formatting"""
    assert validate_input({**sample_body, "loanAmount": "500000", "loanTermMonths": "240"}) == []


def test_short_http_keys_accepted():
    body = {"amount": 500000, "rate": 8.95, "term": 240, "loan_purpose": "property", "security_type": "other"}

    assert validate_input(body) == []


def test_permissive_policy_rate_bounds(sample_body: dict):
    assert validate_input({**sample_body, "interestRate": 2}, PERMISSIVE_POLICY) == []
    assert validate_input({**sample_body, "interestRate": 45}, PERMISSIVE_POLICY) == []
    assert validate_input({**sample_body, "interestRate": 0.05}, PERMISSIVE_POLICY) == [
        "Interest rate must be between 0.1% and 50%"
    ]


def test_permissive_policy_does_not_require_purpose():
    body = {"amount": 500000, "rate": 2.5, "term": 60}

    assert validate_input(body, PERMISSIVE_POLICY) == []
    assert PURPOSE_REQUIRED in validate_input(body, STRICT_POLICY)


def test_policies_share_amount_and_term_bounds():
    assert PERMISSIVE_POLICY.min_amount == STRICT_POLICY.min_amount
    assert PERMISSIVE_POLICY.max_amount == STRICT_POLICY.max_amount
    assert (PERMISSIVE_POLICY.min_term, PERMISSIVE_POLICY.max_term) == (1, 300)


def test_get_bounds_policy():
    assert get_bounds_policy("strict") is STRICT_POLICY
    assert get_bounds_policy("permissive") is PERMISSIVE_POLICY
    with pytest.raises(ValueError):
        get_bounds_policy("lenient")


def test_quote_loan_raises_with_all_errors(sample_body: dict):
    with pytest.raises(InvalidLoanInputError) as exc_info:
        quote_loan({**sample_body, "loanAmount": 100000, "interestRate": 30}, STRICT_POLICY)

    assert exc_info.value.errors == [AMOUNT_MIN, RATE_RANGE]


def test_quote_loan_rejects_fractional_term(sample_body: dict):
    with pytest.raises(InvalidLoanInputError) as exc_info:
        quote_loan({**sample_body, "loanTermMonths": 12.5}, STRICT_POLICY)

    assert exc_info.value.errors == [TERM_RANGE]


def test_quote_loan_returns_input_and_result(sample_body: dict):
    quote = quote_loan(sample_body, STRICT_POLICY)

    assert quote.input.loan_amount == 500000
    assert quote.input.loan_term_months == 240
    assert quote.input.loan_purpose == "business"
    assert len(quote.result.amortization_schedule) == 240
