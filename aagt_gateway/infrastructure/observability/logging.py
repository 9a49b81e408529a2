"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from aagt_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_quote(
    request_id: str,
    endpoint: str,
    loan_amount: float,
    loan_term_months: int,
    monthly_payment: float,
    loan_purpose: Optional[str],
    duration_ms: float,
) -> None:
    """Log a completed calculation for funnel analysis"""
    logging.info(
        "Quote calculated",
        extra={
            "request_id": request_id,
            "endpoint": endpoint,
            "step": "quote_complete",
            "loan_amount": loan_amount,
            "loan_term_months": loan_term_months,
            "monthly_payment": round(monthly_payment, 2),
            "loan_purpose": loan_purpose or "unspecified",
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, endpoint: str, policy: str, errors: list) -> None:
    """Log input rejected by validation"""
    logging.warning(
        "Quote input rejected",
        extra={
            "request_id": request_id,
            "endpoint": endpoint,
            "step": "validation_failed",
            "policy": policy,
            "errors": errors,
        },
    )
