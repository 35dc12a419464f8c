"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from place_weather.config import get_settings
from place_weather.core.app_factory import create_app
from place_weather.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)

app = create_app(settings)


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
