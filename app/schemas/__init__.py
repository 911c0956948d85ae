"""Pydantic schemas for API request/response validation."""

from app.schemas.health import HealthResponse
from app.schemas.tracks import (
    AlignedRowResponse,
    AlignmentResponse,
    AlignRequest,
    AlignResponse,
    CaptionEntryResponse,
    ParseDiagnosticResponse,
    TrackCreateRequest,
    TrackListResponse,
    TrackResponse,
    TrackSummaryResponse,
)

__all__ = [
    "HealthResponse",
    "TrackCreateRequest",
    "AlignRequest",
    "CaptionEntryResponse",
    "ParseDiagnosticResponse",
    "TrackSummaryResponse",
    "TrackResponse",
    "TrackListResponse",
    "AlignedRowResponse",
    "AlignmentResponse",
    "AlignResponse",
]
