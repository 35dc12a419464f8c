"""Place weather routes."""

import httpx
from fastapi import APIRouter, Depends, Query

from place_weather.config import Settings
from place_weather.dependencies import get_app_settings, get_http_client
from place_weather.exceptions import MissingParameterException, PlaceNotFoundException
from place_weather.logging_config import get_logger, log_with_context
from place_weather.models import ErrorResponse, RetrieveDataResponse
from place_weather.services import geocoding_service, weather_service

router = APIRouter()

logger = get_logger(__name__)


@router.get(
    "/retrieve-data",
    response_model=RetrieveDataResponse,
    summary="Get the forecast for a place",
    description="""
    Resolves a place name with the Open-Meteo geocoding API, then fetches the
    hourly and daily forecast for the top match.

    Only the first geocoding result is used.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "place": "Paris",
                        "coordinates": {"latitude": 48.8566, "longitude": 2.3522, "name": "Paris", "country": "France"},
                        "weatherData": {
                            "current": {"temperature": 12.4, "weatherCode": 3, "precipitation": 0.0, "time": "2024-05-01T00:00"},
                            "hourly": [{"time": "2024-05-01T00:00", "temperature": 12.4, "weatherCode": 3, "precipitation": 0.0}],
                            "daily": [{"date": "2024-05-01", "maxTemperature": 18.1, "minTemperature": 9.7, "weatherCode": 61}],
                        },
                    }
                }
            },
        },
        400: {"model": ErrorResponse, "description": "Missing place parameter"},
        404: {"model": ErrorResponse, "description": "No geocoding match for the place"},
        500: {"model": ErrorResponse, "description": "Upstream provider or internal error"},
    },
)
async def retrieve_data(
    place: str | None = Query(default=None, description="Place name, e.g. a city"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
):
    """Geocode ``place`` and return its forecast.

    Raises:
        MissingParameterException: ``place`` is missing or empty (400)
        PlaceNotFoundException: geocoding returned no match (404)
        UpstreamException: either provider call failed (500)
    """
    if not place:
        raise MissingParameterException("place")

    coordinates = await geocoding_service.resolve_place(client, place, settings)
    if coordinates is None:
        raise PlaceNotFoundException(place)

    weather_data = await weather_service.fetch_forecast(client, coordinates.latitude, coordinates.longitude, settings)

    log_with_context(
        logger,
        "info",
        "Weather data retrieved",
        place=place,
        latitude=coordinates.latitude,
        longitude=coordinates.longitude,
        hourly_points=len(weather_data.hourly),
        daily_points=len(weather_data.daily),
        event_type="weather_retrieved",
    )

    return RetrieveDataResponse(place=place, coordinates=coordinates, weather_data=weather_data)
