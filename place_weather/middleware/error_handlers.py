"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from place_weather.dependencies import get_app_settings
from place_weather.exceptions import ErrorCode, PlaceWeatherException
from place_weather.logging_config import get_logger, log_with_context
from place_weather.models import ErrorResponse

logger = get_logger(__name__)

SERVER_ERROR_MESSAGE = "Failed to retrieve weather data"


def _server_error_response(request: Request, error: str) -> JSONResponse:
    settings = get_app_settings(request)
    body = ErrorResponse(message=SERVER_ERROR_MESSAGE, error=error if settings.expose_error_details else None)
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


async def place_weather_exception_handler(request: Request, exc: PlaceWeatherException) -> JSONResponse:
    """Turn service exceptions into the JSON error envelope.

    Client errors (missing parameter, unknown place) are expected outcomes and
    logged at info level with their own message returned. Server errors are
    logged with full detail and answered with the generic message plus the raw
    error text.
    """
    if exc.status_code < 500:
        log_with_context(
            logger,
            "info",
            "Request rejected",
            error_code=exc.code.value,
            error_message=exc.message,
            status_code=exc.status_code,
            method=request.method,
            url=str(request.url),
            event_type="request_rejected",
        )
        body = ErrorResponse(message=exc.message)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))

    log_with_context(
        logger,
        "error",
        "Error fetching weather data",
        error_code=exc.code.value,
        error_message=exc.message,
        details=exc.details,
        cause=repr(exc.__cause__) if exc.__cause__ else None,
        method=request.method,
        url=str(request.url),
        event_type="upstream_error",
    )
    return _server_error_response(request, exc.message)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with the same envelope as upstream failures."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error_code=ErrorCode.INTERNAL_ERROR.value,
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    return _server_error_response(request, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(PlaceWeatherException, place_weather_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
