"""Pydantic schemas for health API."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    service: str
    status: str
    version: str
    authentication: str
    track_count: int
    endpoints: dict[str, list[str]]
