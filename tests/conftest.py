"""Pytest configuration and shared fixtures."""

import asyncio
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from place_weather.config import Settings
from place_weather.core.app_factory import create_app
from place_weather.dependencies import get_http_client

GEOCODING_BASE_URL = "https://geocoding.test/v1"
FORECAST_BASE_URL = "https://forecast.test/v1"


class StubUpstream:
    """Stand-in for both Open-Meteo APIs behind an ``httpx.MockTransport``.

    ``geocoding`` and ``forecast`` may be a JSON-serialisable body, an
    ``httpx.Response``, or an exception to raise. Every request is recorded.
    """

    def __init__(self, geocoding: Any = None, forecast: Any = None):
        self.geocoding = geocoding if geocoding is not None else {"results": []}
        self.forecast = forecast if forecast is not None else {}
        self.requests: list[httpx.Request] = []
        self.client = httpx.AsyncClient(transport=httpx.MockTransport(self.handle))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "geocoding.test":
            reply = self.geocoding
        elif request.url.host == "forecast.test":
            reply = self.forecast
        else:
            return httpx.Response(404, json={"error": True, "reason": "unknown host"})

        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=reply)

    def requests_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at the stub upstream hosts."""
    return Settings(
        api_host="127.0.0.1",
        api_port=9000,
        geocoding_base_url=GEOCODING_BASE_URL,
        forecast_base_url=FORECAST_BASE_URL,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def paris_geocoding_response():
    """Geocoding API response with Paris first and a second, ignored match."""
    return {
        "results": [
            {"id": 2988507, "latitude": 48.8566, "longitude": 2.3522, "name": "Paris", "country": "France"},
            {"id": 4717560, "latitude": 33.6609, "longitude": -95.5555, "name": "Paris", "country": "United States"},
        ],
        "generationtime_ms": 0.5,
    }


@pytest.fixture
def forecast_response():
    """Forecast API response with one hourly and one daily point."""
    return {
        "latitude": 48.86,
        "longitude": 2.3399997,
        "timezone": "Europe/Paris",
        "hourly_units": {"time": "iso8601", "temperature_2m": "°C"},
        "hourly": {
            "time": ["2024-05-01T00:00"],
            "temperature_2m": [12.4],
            "precipitation": [0.0],
            "weathercode": [3],
        },
        "daily": {
            "time": ["2024-05-01"],
            "weathercode": [61],
            "temperature_2m_max": [18.1],
            "temperature_2m_min": [9.7],
        },
    }


@pytest.fixture
def upstream(paris_geocoding_response, forecast_response):
    """Stub upstream answering Paris with a one-point forecast."""
    stub = StubUpstream(geocoding=paris_geocoding_response, forecast=forecast_response)
    yield stub
    asyncio.run(stub.client.aclose())
    assert stub.client.is_closed


@pytest.fixture
def app(test_settings, upstream):
    """App wired to the stub upstream."""
    application = create_app(test_settings)
    application.dependency_overrides[get_http_client] = lambda: upstream.client
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def test_client(app):
    """FastAPI test client with lifespan context."""
    with TestClient(app) as client:
        yield client
