"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient

from aagt_gateway.api.main import create_app
from aagt_gateway.api.dependencies import get_settings
from aagt_gateway.config import Settings
from aagt_gateway.domain.models import LoanCalculatorInput


@pytest.fixture
def app_settings() -> Settings:
    """Settings isolated from the environment and any .env file"""
    return Settings(_env_file=None)


@pytest.fixture
def client(app_settings: Settings) -> TestClient:
    """Create FastAPI test client with test settings"""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: app_settings
    return TestClient(app)


@pytest.fixture
def sample_input() -> LoanCalculatorInput:
    """$500k business loan over 20 years secured by property"""
    return LoanCalculatorInput(
        loan_amount=500000,
        interest_rate=8.95,
        loan_term_months=240,
        loan_purpose="business",
        security_type="property",
    )


@pytest.fixture
def sample_body() -> dict:
    """Calculator request body as the website sends it"""
    return {
        "loanAmount": 500000,
        "interestRate": 8.95,
        "loanTermMonths": 240,
        "loanPurpose": "business",
        "securityType": "property",
    }
