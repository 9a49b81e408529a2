"""Dependency injection for FastAPI endpoints"""

import logging

from fastapi import Depends, HTTPException, Request

from aagt_gateway.config import Settings, settings
from aagt_gateway.domain.exceptions import RateCardError
from aagt_gateway.domain.models import RateCard
from aagt_gateway.domain.rates import DEFAULT_RATE_CARD
from aagt_gateway.infrastructure.rate_card_loader import load_rate_card
from aagt_gateway.infrastructure.observability.metrics import rate_card_failures_counter


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide application settings"""
    return settings


def get_rate_card(app_settings: Settings = Depends(get_settings)) -> RateCard:
    """Provide the configured rate card, falling back to built-in rates"""
    if not app_settings.rate_card_path:
        return DEFAULT_RATE_CARD

    try:
        return load_rate_card(app_settings.rate_card_path)
    except RateCardError as e:
        rate_card_failures_counter.inc()
        logging.error(f"Rate card unavailable: {e}")
        raise HTTPException(status_code=503, detail="Rate card unavailable")
