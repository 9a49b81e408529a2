"""Domain models - pure Python dataclasses representing loan quote values"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

LOAN_PURPOSES: Tuple[str, ...] = ("business", "investment", "property", "working-capital")
SECURITY_TYPES: Tuple[str, ...] = ("property", "business-assets", "personal-guarantee", "other")

# Accepted keys per field: snake_case, camelCase, and the short HTTP names
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "loan_amount": ("loan_amount", "loanAmount", "amount"),
    "interest_rate": ("interest_rate", "interestRate", "rate"),
    "loan_term_months": ("loan_term_months", "loanTermMonths", "term"),
    "loan_purpose": ("loan_purpose", "loanPurpose"),
    "security_type": ("security_type", "securityType"),
    "ltv": ("ltv",),
}


def lookup_field(data: Any, name: str) -> Any:
    """Read a field from a mapping (any accepted key style) or an object attribute"""
    if isinstance(data, Mapping):
        for key in FIELD_ALIASES[name]:
            if data.get(key) is not None:
                return data[key]
        return None
    return getattr(data, name, None)


def to_number(value: Any) -> Optional[float]:
    """Coerce a raw value to a finite float, or None when it is not a usable number"""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class LoanCalculatorInput:
    """Calculator request: amount in dollars, annual rate in percent, term in months"""

    loan_amount: float
    interest_rate: float
    loan_term_months: int
    loan_purpose: Optional[str] = None  # one of LOAN_PURPOSES
    security_type: Optional[str] = None  # one of SECURITY_TYPES
    ltv: Optional[float] = None  # loan-to-value ratio, informational only

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LoanCalculatorInput":
        """
        Build an input from a raw mapping such as a decoded JSON body.

        Raises:
            ValueError: If amount, rate or term is missing or not numeric
        """
        numbers = {}
        for name in ("loan_amount", "interest_rate", "loan_term_months"):
            number = to_number(lookup_field(data, name))
            if number is None:
                raise ValueError(f"Missing or non-numeric field: {name}")
            numbers[name] = number

        return cls(
            loan_amount=numbers["loan_amount"],
            interest_rate=numbers["interest_rate"],
            loan_term_months=int(numbers["loan_term_months"]),
            loan_purpose=lookup_field(data, "loan_purpose"),
            security_type=lookup_field(data, "security_type"),
            ltv=to_number(lookup_field(data, "ltv")),
        )


@dataclass(frozen=True)
class AmortizationEntry:
    """Single month of an amortization schedule"""

    month: int
    payment: float
    principal: float
    interest: float
    balance: float


@dataclass(frozen=True)
class LoanCalculatorResult:
    """Output of a loan calculation"""

    monthly_payment: float
    total_interest: float
    total_amount: float
    amortization_schedule: List[AmortizationEntry]
    effective_rate: float


@dataclass(frozen=True)
class BaseFees:
    """One-off fees charged at settlement"""

    establishment: float
    legal: float
    valuation: float

    @property
    def total(self) -> float:
        return self.establishment + self.legal + self.valuation


@dataclass(frozen=True)
class ComparisonRate:
    """A lender's advertised rate for side-by-side comparison"""

    lender: str
    rate: float
    fees: float
    comparison_rate: float
    is_aagt: bool


@dataclass(frozen=True)
class BankSavings:
    """Monthly payment comparison against the average bank comparison rate"""

    avg_bank_payment: float
    monthly_savings: float
    time_to_approval_days: int = 1
    settlement_days: int = 4


@dataclass(frozen=True)
class RateCard:
    """Indicative rates by loan purpose plus the lender comparison table"""

    purpose_rates: Dict[str, float]
    comparison_rates: List[ComparisonRate]
    standard_rate: float = 8.95


@dataclass(frozen=True)
class CustomRateQuote:
    """Indicative rate adjusted for loan size and security"""

    custom_rate: float
    standard_rate: float
    discount: float
    reasoning: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class LoanQuote:
    """Validated input together with its calculation result"""

    input: LoanCalculatorInput
    result: LoanCalculatorResult
