"""Aligned table endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.tracks import check_track_request
from app.core.config import Settings, get_settings
from app.schemas import AlignmentResponse, AlignRequest, AlignResponse, TrackSummaryResponse
from app.services.aligner import compute_aligned_rows
from app.services.srt_parser import parse_track
from app.services.track_store import track_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/rows",
    response_model=AlignmentResponse,
    summary="Get aligned table",
    description="Returns all stored tracks merged into time-ordered rows",
)
async def get_aligned_rows():
    """Return the aligned table of the stored tracks.

    Each row holds at most one caption per track. ``columns`` lists the track
    names in the same order as the caption slots of every row.
    """
    tracks, rows = track_store.snapshot()
    return AlignmentResponse.from_rows(tracks, rows)


@router.post(
    "/align",
    response_model=AlignResponse,
    status_code=status.HTTP_200_OK,
    summary="Align subtitle tracks",
    description="Parses and aligns the given tracks without storing them",
)
async def align_tracks(
    request: AlignRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Parse and align tracks in a single stateless call.

    Args:
        request: Tracks to align, in column order

    Returns:
        Track summaries with parse diagnostics and the aligned table

    Raises:
        HTTPException: 400 (too many tracks or text that is not valid UTF-8),
            413 (content too large), 500 (unexpected error)
    """
    if len(request.tracks) > settings.max_tracks:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many tracks ({len(request.tracks)}, max: {settings.max_tracks})",
        )
    for item in request.tracks:
        check_track_request(item, settings)

    try:
        tracks = [parse_track(item.name, item.content) for item in request.tracks]
        rows = compute_aligned_rows(tracks)
    except Exception as e:
        logger.exception("Failed to align %d tracks", len(request.tracks))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unexpected error: {str(e)}",
        )
    logger.info("Aligned %d tracks into %d rows", len(tracks), len(rows))

    table = AlignmentResponse.from_rows(tracks, rows)
    return AlignResponse(
        columns=table.columns,
        rows=table.rows,
        tracks=[TrackSummaryResponse.from_track(idx, track) for idx, track in enumerate(tracks)],
    )
