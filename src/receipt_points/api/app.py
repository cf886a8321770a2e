# SPDX-License-Identifier: MPL-2.0
"""
Main application module for the Receipt Points service.

This module initializes and configures the FastAPI application,
including the receipt routes, middleware and error handlers.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from receipt_points import __version__
from receipt_points.api.routes import router
from receipt_points.config import Settings
from receipt_points.core.exceptions import InvalidReceiptError, ReceiptNotFoundError
from receipt_points.core.processor import ReceiptProcessor

logger = logging.getLogger(__name__)


async def add_security_headers(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Add security headers to all responses."""
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-XSS-Protection"] = "1; mode=block"
    return response


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(f"Rejected receipt payload: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid JSON payload",
            "errors": [
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ],
        },
    )


async def invalid_receipt_handler(request: Request, exc: InvalidReceiptError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message},
    )


async def receipt_not_found_handler(request: Request, exc: ReceiptNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": exc.message},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.exception("Unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def create_app(
    settings: Optional[Settings] = None,
    processor: Optional[ReceiptProcessor] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Service configuration. Read from the environment if omitted.
        processor: Receipt processor to serve. A processor with a fresh,
            empty ledger is created if omitted.
    """
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="Receipt Points",
        description="Scores purchase receipts and serves their reward points",
        version=__version__,
    )
    app.state.processor = processor if processor is not None else ReceiptProcessor()

    # Add rate limiting
    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.middleware("http")(add_security_headers)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
        max_age=600,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InvalidReceiptError, invalid_receipt_handler)
    app.add_exception_handler(ReceiptNotFoundError, receipt_not_found_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(router)
    app.mount("/metrics", make_asgi_app())

    logger.info(f"Receipt Points API {__version__} configured")
    return app
