"""Middleware configuration."""

import time

from fastapi import FastAPI, Request

from place_weather.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each inbound request with its status and duration."""
        started = time.perf_counter()
        response = await call_next(request)
        log_with_context(
            logger,
            "info",
            f"{request.method} {request.url.path} -> {response.status_code}",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
            event_type="request_handled",
        )
        return response
