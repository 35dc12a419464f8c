from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # place-weather/

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default so the service starts without any environment.
    Values can be overridden with ``PLACE_WEATHER_*`` environment variables or
    a ``.env`` file in the project root.
    """

    # API server settings
    api_host: str = Field(default="0.0.0.0", min_length=1, description="API server host")
    api_port: int = Field(ge=1, le=65535, default=9000, description="API server port")

    # Upstream providers
    geocoding_base_url: str = Field(
        default="https://geocoding-api.open-meteo.com/v1",
        pattern=r"^https?://",
        description="Base URL of the Open-Meteo geocoding API",
    )
    forecast_base_url: str = Field(
        default="https://api.open-meteo.com/v1",
        pattern=r"^https?://",
        description="Base URL of the Open-Meteo forecast API",
    )
    http_timeout_seconds: Annotated[float, Field(gt=0)] | None = Field(
        default=None,
        description="Timeout for upstream calls in seconds (None waits indefinitely)",
    )

    # Error responses
    expose_error_details: bool = Field(
        default=True,
        description="Include the raw error text in 500 responses",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for JSON log files")

    model_config = SettingsConfigDict(
        env_prefix="PLACE_WEATHER_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("geocoding_base_url", "forecast_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise base URLs so endpoint paths can be appended."""
        return v.rstrip("/")

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @property
    def geocoding_search_url(self) -> str:
        return f"{self.geocoding_base_url}/search"

    @property
    def forecast_url(self) -> str:
        return f"{self.forecast_base_url}/forecast"


# Singleton settings instance
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Avoids re-reading the environment and .env file on every call.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
