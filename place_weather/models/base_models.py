"""Pydantic models for response envelopes."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from place_weather.models.weather import CamelModel, Coordinates, WeatherData


class HealthResponse(CamelModel):
    """Liveness response."""

    status: Literal["ok"] = "ok"
    message: str = "Service is running"
    timestamp: datetime = Field(..., description="Current server time (UTC)")


class RetrieveDataResponse(CamelModel):
    """Successful /retrieve-data response."""

    status: Literal["success"] = "success"
    place: str = Field(..., description="Place name as supplied by the caller")
    coordinates: Coordinates
    weather_data: WeatherData


class ErrorResponse(CamelModel):
    """Error envelope. ``error`` carries the raw error text on 500 responses."""

    status: Literal["error"] = "error"
    message: str
    error: str | None = None
