"""Subtitle track endpoints."""

import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from app.core.config import Settings, get_settings
from app.schemas import (
    TrackCreateRequest,
    TrackListResponse,
    TrackResponse,
    TrackSummaryResponse,
)
from app.services.track_store import TrackLimitError, TrackNotFoundError, track_store

router = APIRouter()
logger = logging.getLogger(__name__)


def check_content_size(size: int, settings: Settings) -> None:
    """Reject subtitle content larger than the configured limit.

    Raises:
        HTTPException: 413 if the content is too large
    """
    if size > settings.max_content_size:
        logger.warning(
            "Subtitle content too large: %d bytes (max: %d bytes)",
            size,
            settings.max_content_size,
        )
        raise HTTPException(
            status_code=413,
            detail=(
                f"Subtitle content ({size:,} bytes) exceeds maximum allowed "
                f"({settings.max_content_size:,} bytes)"
            ),
        )


def check_track_request(request: TrackCreateRequest, settings: Settings) -> None:
    """Reject a JSON track whose text cannot be stored or is too large.

    JSON strings may carry lone surrogate escapes (``"\\ud800"``) that are not
    encodable as UTF-8 and could not be sent back in a response.

    Raises:
        HTTPException: 400 if name or content is not valid UTF-8 text,
            413 if the content is too large
    """
    try:
        request.name.encode("utf-8")
        size = len(request.content.encode("utf-8"))
    except UnicodeEncodeError as e:
        logger.warning("Rejected track %r: %s", request.name, e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Track name and content must be valid UTF-8 text",
        )
    check_content_size(size, settings)


def _add_track(name: str, content: str) -> TrackResponse:
    try:
        index, track = track_store.add_track(name, content)
    except TrackLimitError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.exception("Failed to add track %r", name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unexpected error: {str(e)}",
        )
    return TrackResponse.from_track(index, track)


@router.post(
    "",
    response_model=TrackResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add subtitle track",
    description="Parses SRT content into a new track and realigns all tracks",
)
async def add_track(
    request: TrackCreateRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Add a track from raw SRT text.

    Malformed SRT does not fail the request: the track is truncated at the
    first unreadable block and the problem is returned in ``diagnostics``.

    Args:
        request: Track name and raw SRT content

    Returns:
        The new track with its entries and parse diagnostics

    Raises:
        HTTPException: 400 (not valid UTF-8 text), 409 (track limit reached),
            413 (content too large), 500 (unexpected error)
    """
    check_track_request(request, settings)
    return _add_track(request.name, request.content)


@router.post(
    "/upload",
    response_model=TrackResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload subtitle file",
    description="Adds an uploaded SRT file as a new track named after the file",
)
async def upload_track(
    settings: Annotated[Settings, Depends(get_settings)],
    file: UploadFile = File(..., description="SRT subtitle file"),
    name: str | None = Form(None, description="Optional track name (defaults to file name)"),
):
    """Add a track from an uploaded subtitle file.

    Raises:
        HTTPException: 400 (not UTF-8 text), 409 (track limit reached),
            413 (file too large), 500 (unexpected error)
    """
    data = await file.read()
    check_content_size(len(data), settings)

    try:
        content = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.warning("Could not decode upload %r: %s", file.filename, e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Subtitle file must be UTF-8 encoded text",
        )

    track_name = name or Path(file.filename or "").name or "untitled"
    return _add_track(track_name, content)


@router.get("", response_model=TrackListResponse, summary="List subtitle tracks")
async def list_tracks():
    """List all tracks in column order."""
    return TrackListResponse(
        tracks=[
            TrackSummaryResponse.from_track(idx, track)
            for idx, track in enumerate(track_store.tracks)
        ]
    )


@router.get("/{index}", response_model=TrackResponse, summary="Get subtitle track")
async def get_track(index: int):
    """Return one track with its entries.

    Raises:
        HTTPException: 404 if no track exists at the index
    """
    try:
        track = track_store.get_track(index)
    except TrackNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TrackResponse.from_track(index, track)
