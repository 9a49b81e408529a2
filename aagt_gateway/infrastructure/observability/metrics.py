"""Prometheus metrics for quote volume, validation failures and latency"""

from typing import Any, Optional

from prometheus_client import Counter, Histogram

from aagt_gateway.domain.models import LOAN_PURPOSES

# Quote metrics
quote_counter = Counter(
    "aagt_quote_total",
    "Loan calculations served",
    ["endpoint", "loan_purpose"],  # calculate-loan | quote | rates-custom
)

validation_failure_counter = Counter(
    "aagt_validation_failures_total",
    "Calculator inputs rejected by validation",
    ["policy"],  # strict | permissive
)

quote_term_histogram = Histogram(
    "aagt_quote_term_months",
    "Requested loan terms",
    buckets=[12, 24, 36, 60, 120, 180, 240, 300],
)

rate_card_failures_counter = Counter(
    "aagt_rate_card_failures_total",
    "Rate card loads that failed",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def purpose_label(loan_purpose: Any) -> str:
    """Known purposes pass through; anything else collapses to one label value"""
    return loan_purpose if loan_purpose in LOAN_PURPOSES else "unspecified"


def record_quote(endpoint: str, loan_purpose: Any, loan_term_months: Optional[int] = None) -> None:
    """Record a served calculation"""
    quote_counter.labels(endpoint=endpoint, loan_purpose=purpose_label(loan_purpose)).inc()
    if loan_term_months is not None:
        quote_term_histogram.observe(loan_term_months)


def record_validation_failure(policy: str) -> None:
    """Record a rejected calculator input"""
    validation_failure_counter.labels(policy=policy).inc()
