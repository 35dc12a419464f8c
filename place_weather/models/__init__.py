"""Place Weather models"""

from place_weather.models.base_models import ErrorResponse, HealthResponse, RetrieveDataResponse
from place_weather.models.weather import Coordinates, CurrentWeather, DailyWeather, HourlyWeather, WeatherData

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "RetrieveDataResponse",
    "Coordinates",
    "CurrentWeather",
    "DailyWeather",
    "HourlyWeather",
    "WeatherData",
]
