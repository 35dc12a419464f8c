"""Health endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from place_weather.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check.

    Always returns 200 with the current server time; it touches no upstream
    provider and no application state.
    """
    return HealthResponse(timestamp=datetime.now(UTC))
