"""Unit tests for indicative rates, bank comparison and custom pricing"""

import pytest

from aagt_gateway.domain.amortization import calculate_loan, calculate_monthly_payment
from aagt_gateway.domain.exceptions import RateCardError
from aagt_gateway.domain.models import ComparisonRate, LoanCalculatorInput, RateCard
from aagt_gateway.domain.pricing import quote_custom_rate
from aagt_gateway.domain.rates import (
    DEFAULT_RATE_CARD,
    calculate_savings_vs_banks,
    get_aagt_rates,
    get_bank_comparison_rates,
)


def test_aagt_rates_cover_every_purpose():
    rates = get_aagt_rates()

    assert rates == {"business": 8.95, "investment": 9.25, "property": 8.75, "working-capital": 9.45}
    assert all(8.75 <= rate <= 9.45 for rate in rates.values())


def test_aagt_rates_is_a_copy():
    rates = get_aagt_rates()
    rates["business"] = 1.0

    assert get_aagt_rates()["business"] == 8.95


def test_bank_comparison_rates():
    rates = get_bank_comparison_rates()

    assert len(rates) == 5
    aagt = [rate for rate in rates if rate.is_aagt]
    assert len(aagt) == 1
    assert aagt[0].lender == "AAGT Private Loans"
    assert aagt[0].comparison_rate == 9.12


def test_injected_rate_card():
    card = RateCard(
        purpose_rates={"business": 7.5},
        comparison_rates=[ComparisonRate("Test Bank", 6.0, 1000, 6.2, False)],
        standard_rate=7.5,
    )

    assert get_aagt_rates(card) == {"business": 7.5}
    assert [rate.lender for rate in get_bank_comparison_rates(card)] == ["Test Bank"]


def test_savings_vs_banks(sample_input: LoanCalculatorInput):
    """Average of the four bank comparison rates is 7.73%"""
    result = calculate_loan(sample_input)
    savings = calculate_savings_vs_banks(result, sample_input)

    expected_bank_payment = calculate_monthly_payment(500000, 7.73 / 100 / 12, 240)
    assert savings.avg_bank_payment == pytest.approx(expected_bank_payment)
    assert savings.monthly_savings == pytest.approx(expected_bank_payment - result.monthly_payment)
    assert savings.time_to_approval_days == 1
    assert savings.settlement_days == 4


def test_savings_with_injected_comparison_rates(sample_input: LoanCalculatorInput):
    result = calculate_loan(sample_input)
    rows = [
        ComparisonRate("AAGT Private Loans", 8.95, 1500, 9.12, True),
        ComparisonRate("Only Bank", 8.95, 0, 8.95, False),
    ]

    savings = calculate_savings_vs_banks(result, sample_input, rows)

    assert savings.monthly_savings == pytest.approx(0, abs=1e-6)


def test_savings_without_bank_rows(sample_input: LoanCalculatorInput):
    result = calculate_loan(sample_input)
    rows = [ComparisonRate("AAGT Private Loans", 8.95, 1500, 9.12, True)]

    with pytest.raises(RateCardError):
        calculate_savings_vs_banks(result, sample_input, rows)


@pytest.mark.parametrize(
    "purpose, amount, security, expected",
    [
        ("business", 500000, "property", 8.80),
        ("investment", 2500000, "other", 9.25),
        ("working-capital", 200000, "personal-guarantee", 9.60),
        ("property", 1200000, "business-assets", 8.65),
        ("unknown", 300000, None, 8.95),
    ],
)
def test_custom_rate(purpose, amount, security, expected):
    quote = quote_custom_rate(purpose, amount, security)

    assert quote.custom_rate == pytest.approx(expected)
    assert quote.standard_rate == 8.95
    assert quote.discount == pytest.approx(8.95 - expected, abs=1e-9)


def test_custom_rate_reasoning():
    large = quote_custom_rate("business", 750000, "property")
    small = quote_custom_rate("business", 200000, "other")

    assert large.reasoning == {
        "loan_amount": "Large loan discount applied",
        "security_type": "Property security discount",
    }
    assert small.reasoning == {
        "loan_amount": "Standard rate",
        "security_type": "Risk adjustment applied",
    }


def test_default_rate_card_standard_rate():
    assert DEFAULT_RATE_CARD.standard_rate == get_aagt_rates()["business"]
