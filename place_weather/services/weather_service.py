"""Weather service for the Open-Meteo forecast API."""

import httpx

from place_weather.config import Settings, get_settings
from place_weather.exceptions import ForecastException
from place_weather.models.weather import WeatherData
from place_weather.services.forecast_shaper import shape_current, shape_daily, shape_hourly

HOURLY_FIELDS = "temperature_2m,precipitation,weathercode"
DAILY_FIELDS = "weathercode,temperature_2m_max,temperature_2m_min"


async def fetch_forecast(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    settings: Settings | None = None,
) -> WeatherData:
    """Fetch the hourly and daily forecast for a coordinate pair.

    The provider picks the timezone from the coordinates (``timezone=auto``).

    Args:
        client: Shared HTTP client for making requests
        latitude: Latitude as returned by geocoding (not range-checked)
        longitude: Longitude as returned by geocoding (not range-checked)
        settings: Settings instance (defaults to singleton)

    Returns:
        WeatherData with current, hourly and daily views

    Raises:
        ForecastException: If the request fails or the body cannot be shaped
    """
    if settings is None:
        settings = get_settings()

    params: dict[str, str | float] = {
        "latitude": latitude,
        "longitude": longitude,
        "hourly": HOURLY_FIELDS,
        "daily": DAILY_FIELDS,
        "timezone": "auto",
    }

    try:
        response = await client.get(settings.forecast_url, params=params)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Forecast payload is not a JSON object: {type(data).__name__}")

        return WeatherData(
            current=shape_current(data),
            hourly=shape_hourly(data),
            daily=shape_daily(data),
        )

    except httpx.HTTPStatusError as e:
        raise ForecastException(
            details={
                "error_type": "http_status_error",
                "status_code": e.response.status_code,
                "api_response": e.response.text,
            },
        ) from e
    except httpx.HTTPError as e:
        raise ForecastException(
            details={"error_type": "network_error", "error": str(e)},
        ) from e
    except Exception as e:
        raise ForecastException(
            details={"error_type": "parsing_error", "error": str(e)},
        ) from e
