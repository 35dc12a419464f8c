"""Geocoding service for the Open-Meteo geocoding API."""

from typing import Any

import httpx

from place_weather.config import Settings, get_settings
from place_weather.exceptions import GeocodingException
from place_weather.logging_config import get_logger, log_with_context
from place_weather.models.weather import Coordinates

GEOCODING_LANGUAGE = "en"

logger = get_logger(__name__)


def _first_match(data: Any) -> Coordinates | None:
    if not isinstance(data, dict):
        raise ValueError(f"Geocoding payload is not a JSON object: {type(data).__name__}")
    results = data.get("results")
    if not results:
        return None

    top = results[0]
    return Coordinates(
        latitude=top["latitude"],
        longitude=top["longitude"],
        name=top["name"],
        country=top.get("country"),
    )


async def resolve_place(client: httpx.AsyncClient, place: str, settings: Settings | None = None) -> Coordinates | None:
    """Resolve a free-text place name to the provider's top match.

    Only the first result is used. An empty or missing result list is a normal
    outcome and returns None.

    Args:
        client: Shared HTTP client for making requests
        place: Place name, non-empty (checked by the caller)
        settings: Settings instance (defaults to singleton)

    Returns:
        Coordinates of the first match, or None when nothing matched

    Raises:
        GeocodingException: If the request fails or the body is not usable JSON
    """
    if settings is None:
        settings = get_settings()

    params: dict[str, str | int] = {
        "name": place,
        "count": 1,
        "language": GEOCODING_LANGUAGE,
        "format": "json",
    }

    try:
        response = await client.get(settings.geocoding_search_url, params=params)
        response.raise_for_status()
        data = response.json()
        coordinates = _first_match(data)

    except httpx.HTTPStatusError as e:
        raise GeocodingException(
            details={
                "error_type": "http_status_error",
                "status_code": e.response.status_code,
                "api_response": e.response.text,
            },
        ) from e
    except httpx.HTTPError as e:
        raise GeocodingException(
            details={"error_type": "network_error", "error": str(e)},
        ) from e
    except Exception as e:
        raise GeocodingException(
            details={"error_type": "parsing_error", "error": str(e)},
        ) from e

    if coordinates is None:
        log_with_context(logger, "info", "No geocoding match", place=place, event_type="geocoding_no_match")
    return coordinates
