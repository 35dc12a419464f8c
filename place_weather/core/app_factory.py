"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from place_weather import __version__
from place_weather.config import Settings, get_settings
from place_weather.core.lifespan import lifespan
from place_weather.core.middleware import setup_middleware
from place_weather.middleware.error_handlers import register_error_handlers
from place_weather.routers import health_router, weather_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings instance (defaults to singleton)

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Place Weather API",
        description="""
        Forecasts by place name, backed by Open-Meteo.

        ## Endpoints
        - `/health` - Liveness check
        - `/retrieve-data?place=<city-name>` - Geocode a place and return its
          current, hourly and daily forecast
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.http_client = None

    setup_middleware(app)

    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(weather_router.router, tags=["weather"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "Place Weather API", "docs": "/docs"}

    return app
