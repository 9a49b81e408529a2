"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from aagt_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from aagt_gateway.api.v1 import calculate, quote, rates
from aagt_gateway.infrastructure.observability.logging import setup_logging
from aagt_gateway.config import settings

VERSION = "0.1.0"

# (router, tag) pairs mounted under /v1
V1_ROUTERS = (
    (calculate.router, "calculator"),
    (quote.router, "quotes"),
    (rates.router, "rates"),
)

setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.info(
        "Loan gateway starting",
        extra={
            "version": VERSION,
            "calculate_loan_policy": settings.calculate_loan_policy,
            "quote_policy": settings.quote_policy,
            "rate_card": settings.rate_card_path or "built-in",
        },
    )
    yield


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get the same single-message 400 as failed business rules"""
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{field}: {first.get('msg', 'Invalid request')}" if field else first.get("msg", "Invalid request")
    return JSONResponse(status_code=400, content={"detail": message})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="AAGT Loan Gateway",
        description="Loan repayment calculator and indicative rate service",
        version=VERSION,
        lifespan=lifespan,
    )

    # Last added runs first: request ID is set before metrics observe the call
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name, "version": VERSION}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    for router, tag in V1_ROUTERS:
        app.include_router(router, prefix="/v1", tags=[tag])

    return app


app = create_app()
