"""Pydantic schemas for API request/response validation"""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes to camelCase JSON, accepts either spelling on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoanInputRequest(BaseModel):
    """
    Calculator body, kept raw so validate_input owns every message.

    Values may arrive as numbers or form strings; anything unparseable is
    reported by the domain validator as a single 400 rather than a 422.
    """

    loan_amount: Optional[Any] = Field(
        None, validation_alias=AliasChoices("amount", "loanAmount", "loan_amount")
    )
    interest_rate: Optional[Any] = Field(
        None, validation_alias=AliasChoices("rate", "interestRate", "interest_rate")
    )
    loan_term_months: Optional[Any] = Field(
        None, validation_alias=AliasChoices("term", "loanTermMonths", "loan_term_months")
    )
    loan_purpose: Optional[Any] = Field(None, validation_alias=AliasChoices("loanPurpose", "loan_purpose"))
    security_type: Optional[Any] = Field(None, validation_alias=AliasChoices("securityType", "security_type"))
    ltv: Optional[Any] = None

    def to_mapping(self) -> Dict[str, Any]:
        return self.model_dump()


class CustomRateRequest(BaseModel):
    """Request body for POST /v1/rates/custom"""

    loan_purpose: Optional[str] = Field(None, validation_alias=AliasChoices("loanPurpose", "loan_purpose"))
    loan_amount: float = Field(
        ..., ge=0, validation_alias=AliasChoices("loanAmount", "loan_amount", "amount")
    )
    security_type: Optional[str] = Field(None, validation_alias=AliasChoices("securityType", "security_type"))


class AmortizationEntrySchema(CamelModel):
    """Single month in an amortization schedule"""

    month: int
    payment: float
    principal: float
    interest: float
    balance: float


class CalculationResponse(CamelModel):
    """Response for POST /v1/calculate-loan"""

    monthly_payment: float
    total_interest: float
    total_amount: float
    effective_rate: float
    amortization_schedule: Optional[List[AmortizationEntrySchema]] = None


class SavingsSchema(CamelModel):
    """AAGT payment versus the average bank comparison rate"""

    avg_bank_payment: float
    monthly_savings: float
    time_to_approval_days: int
    settlement_days: int


class QuoteDisplay(CamelModel):
    """Preformatted strings for the calculator results view"""

    loan_amount: str
    monthly_payment: str
    total_interest: str
    total_amount: str
    interest_rate: str
    effective_rate: str


class QuoteResponse(CamelModel):
    """Response for POST /v1/quote"""

    loan_amount: float
    interest_rate: float
    loan_term_months: int
    loan_purpose: str
    security_type: str
    monthly_payment: float
    total_interest: float
    total_amount: float
    effective_rate: float
    savings: SavingsSchema
    display: QuoteDisplay
    amortization_schedule: Optional[List[AmortizationEntrySchema]] = None


class ComparisonRateSchema(CamelModel):
    """Lender row in the comparison table"""

    lender: str
    rate: float
    fees: float
    comparison_rate: float
    is_aagt: bool = Field(..., alias="isAAGT")


class RatesResponse(CamelModel):
    """Response for GET /v1/rates"""

    rates: Dict[str, float]
    standard_rate: float
    comparison_rates: List[ComparisonRateSchema]


class CustomRateResponse(CamelModel):
    """Response for POST /v1/rates/custom"""

    custom_rate: float
    standard_rate: float
    discount: float
    reasoning: Dict[str, str]
