"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.schemas import HealthResponse
from app.services.track_store import track_store

router = APIRouter()


@router.get("/", response_model=HealthResponse)
@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Annotated[Settings, Depends(get_settings)]):
    """Health check endpoint.

    The service has no external dependencies, so it is healthy whenever it
    answers. Reports how many tracks are currently loaded.

    Returns:
        HealthResponse: Service health status with endpoint listing
    """
    endpoints = {
        "tracks": [
            "POST /api/v1/tracks - Add SRT track from text",
            "POST /api/v1/tracks/upload - Add SRT track from file upload",
            "GET /api/v1/tracks - List tracks",
            "GET /api/v1/tracks/{index} - Get track with entries",
        ],
        "alignment": [
            "GET /api/v1/rows - Aligned table of stored tracks",
            "POST /api/v1/align - Align tracks without storing them",
        ],
        "health": [
            "GET /api/v1/health - Service health check",
        ],
    }

    return HealthResponse(
        service=settings.app_name,
        status="running",
        version=settings.app_version,
        authentication="enabled" if settings.api_key else "disabled",
        track_count=len(track_store.tracks),
        endpoints=endpoints,
    )
