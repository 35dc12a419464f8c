"""Unit tests for configuration."""

import pytest
from pydantic import ValidationError

from place_weather import config
from place_weather.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PLACE_WEATHER_* variables from the host out of these tests."""
    for name in [
        "PLACE_WEATHER_API_HOST",
        "PLACE_WEATHER_API_PORT",
        "PLACE_WEATHER_GEOCODING_BASE_URL",
        "PLACE_WEATHER_FORECAST_BASE_URL",
        "PLACE_WEATHER_HTTP_TIMEOUT_SECONDS",
        "PLACE_WEATHER_EXPOSE_ERROR_DETAILS",
        "PLACE_WEATHER_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults():
    """Test Settings has usable defaults without any environment."""
    settings = Settings(_env_file=None)

    assert settings.api_port == 9000
    assert settings.geocoding_search_url == "https://geocoding-api.open-meteo.com/v1/search"
    assert settings.forecast_url == "https://api.open-meteo.com/v1/forecast"
    assert settings.http_timeout_seconds is None
    assert settings.expose_error_details is True
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PLACE_WEATHER_API_PORT", "8123")
    monkeypatch.setenv("PLACE_WEATHER_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("PLACE_WEATHER_EXPOSE_ERROR_DETAILS", "false")

    settings = Settings(_env_file=None)

    assert settings.api_port == 8123
    assert settings.http_timeout_seconds == 2.5
    assert settings.expose_error_details is False


def test_base_url_trailing_slash_stripped():
    settings = Settings(_env_file=None, forecast_base_url="http://localhost:8080/v1/")

    assert settings.forecast_url == "http://localhost:8080/v1/forecast"


def test_base_url_requires_scheme():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, geocoding_base_url="geocoding-api.open-meteo.com")


@pytest.mark.parametrize("port", [0, 70000])
def test_port_out_of_range(port):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, api_port=port)


def test_log_level_normalised():
    assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"


def test_log_level_invalid():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="LOUD")


def test_blank_api_host_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, api_host="   ")


def test_get_settings_singleton(monkeypatch):
    """Test get_settings caches one instance."""
    monkeypatch.setattr(config, "_settings_instance", None)

    assert get_settings() is get_settings()


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, http_timeout_seconds=0)
