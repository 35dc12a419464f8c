"""Application lifespan management."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from place_weather import __version__
from place_weather.config import Settings
from place_weather.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log outbound provider requests."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=str(request.url),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log provider responses."""
    await response.aread()
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=str(response.request.url),
        event_type="http_response",
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared upstream client.

    ``http_timeout_seconds=None`` disables timeouts entirely.
    """
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        limits=httpx.Limits(
            max_keepalive_connections=5,
            max_connections=20,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        event_hooks=event_hooks,
    )


def log_startup_urls(settings: Settings) -> None:
    port = settings.api_port
    logger.info(f"Weather API server running on port {port}")
    logger.info(f"Health endpoint: http://localhost:{port}/health")
    logger.info(f"Weather data endpoint: http://localhost:{port}/retrieve-data?place=<city-name>")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: shared HTTP client and startup/shutdown logging."""
    settings: Settings = app.state.settings

    log_with_context(
        logger,
        "info",
        "Starting Place Weather application",
        version=__version__,
        event_type="app_startup",
    )

    client = create_http_client(settings)
    app.state.http_client = client
    log_with_context(
        logger,
        "info",
        "HTTP client initialized successfully",
        timeout_seconds=settings.http_timeout_seconds,
        event_type="http_client_ready",
    )

    log_startup_urls(settings)

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Place Weather application",
            event_type="app_shutdown",
        )
        await client.aclose()
        app.state.http_client = None
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )
