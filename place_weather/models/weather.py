"""Pydantic models for geocoding and weather data."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Coordinates(CamelModel):
    """Top geocoding match for a place."""

    latitude: float
    longitude: float
    name: str
    country: str | None = None


class ForecastPoint(CamelModel):
    """Base for per-point forecast records.

    Numeric time labels (``timeformat=unixtime`` payloads) are kept as strings.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)


class CurrentWeather(ForecastPoint):
    """First hourly data point of a forecast."""

    temperature: float | None
    weather_code: int | None = None
    precipitation: float | None = None
    time: str | None = None


class HourlyWeather(ForecastPoint):
    """One entry of the hourly forecast."""

    time: str
    temperature: float | None = None
    weather_code: int | None = None
    precipitation: float | None = None


class DailyWeather(ForecastPoint):
    """One entry of the daily forecast."""

    date: str
    max_temperature: float | None = None
    min_temperature: float | None = None
    weather_code: int | None = None


class WeatherData(CamelModel):
    """Simplified forecast returned to API callers."""

    current: CurrentWeather | None = None
    hourly: list[HourlyWeather] = Field(default_factory=list)
    daily: list[DailyWeather] = Field(default_factory=list)
