"""Custom exceptions for Place Weather with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error logging."""

    SERVICE_ERROR = "SERVICE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PLACE_NOT_FOUND = "PLACE_NOT_FOUND"

    # Upstream provider errors
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    GEOCODING_ERROR = "GEOCODING_ERROR"
    FORECAST_ERROR = "FORECAST_ERROR"


class PlaceWeatherException(Exception):
    """Base exception for service errors with HTTP status code support.

    All custom exceptions inherit from this class so a single handler can
    turn them into the JSON error envelope.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SERVICE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize service exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context, logged server-side only
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class MissingParameterException(PlaceWeatherException):
    """A required query parameter was not supplied."""

    def __init__(self, parameter: str):
        super().__init__(
            f"Missing required parameter: {parameter}",
            code=ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details={"parameter": parameter},
        )


class PlaceNotFoundException(PlaceWeatherException):
    """The geocoding provider returned no match for a place."""

    def __init__(self, place: str):
        super().__init__(
            f"Could not find coordinates for: {place}",
            code=ErrorCode.PLACE_NOT_FOUND,
            status_code=404,
            details={"place": place},
        )


class UpstreamException(PlaceWeatherException):
    """An upstream provider call failed or returned an unusable body."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UPSTREAM_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class GeocodingException(UpstreamException):
    """Geocoding request failed."""

    def __init__(self, message: str = "Failed to geocode place name", details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.GEOCODING_ERROR, details=details)


class ForecastException(UpstreamException):
    """Forecast request failed."""

    def __init__(self, message: str = "Failed to fetch weather data", details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.FORECAST_ERROR, details=details)
