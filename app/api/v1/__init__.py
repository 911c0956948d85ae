"""API v1 package initialization."""

from fastapi import APIRouter

from app.api.v1 import alignment, health, tracks

# Create v1 router
api_router = APIRouter()

# Include sub-routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(tracks.router, prefix="/tracks", tags=["tracks"])
api_router.include_router(alignment.router, tags=["alignment"])

__all__ = ["api_router"]
