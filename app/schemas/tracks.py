"""Pydantic schemas for track and alignment API."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from app.models.srt import AlignedRow, CaptionEntry, ParseDiagnostic, Track
from app.services.srt_parser import pretty_time


class TrackCreateRequest(BaseModel):
    """Request model for adding a track from raw SRT text."""

    name: str = Field(..., description="Display label for the track (e.g. file name)", min_length=1)
    content: str = Field(..., description="Raw SRT subtitle file content")


class AlignRequest(BaseModel):
    """Request model for stateless alignment of several tracks."""

    tracks: list[TrackCreateRequest] = Field(
        ..., description="Tracks to align, in column order"
    )


class CaptionEntryResponse(BaseModel):
    """A parsed subtitle cue."""

    index: int | None = Field(None, description="Cue number as written in the file")
    start_time: int = Field(..., description="Start time in milliseconds")
    end_time: int = Field(..., description="End time in milliseconds")
    caption: str = Field(..., description="Caption text, lines joined with newlines")

    @classmethod
    def from_entry(cls, entry: CaptionEntry) -> "CaptionEntryResponse":
        return cls(
            index=entry.index,
            start_time=entry.start_time,
            end_time=entry.end_time,
            caption=entry.caption,
        )


class ParseDiagnosticResponse(BaseModel):
    """A structural parse problem that truncated a track."""

    line_number: int = Field(..., description="1-based line number of the offending line")
    line: str | None = Field(None, description="Offending line content (None at end of input)")
    message: str

    @classmethod
    def from_diagnostic(cls, diagnostic: ParseDiagnostic) -> "ParseDiagnosticResponse":
        return cls(
            line_number=diagnostic.line_number,
            line=diagnostic.line,
            message=diagnostic.message,
        )


class TrackSummaryResponse(BaseModel):
    """Track metadata without its entries."""

    index: int = Field(..., description="Column index of the track")
    name: str
    entry_count: int = Field(..., description="Number of successfully parsed entries")
    truncated: bool = Field(..., description="Whether parsing stopped on malformed input")
    diagnostics: list[ParseDiagnosticResponse] = Field(default_factory=list)

    @classmethod
    def from_track(cls, index: int, track: Track) -> "TrackSummaryResponse":
        return cls(
            index=index,
            name=track.name,
            entry_count=len(track.entries),
            truncated=track.truncated,
            diagnostics=[ParseDiagnosticResponse.from_diagnostic(d) for d in track.diagnostics],
        )


class TrackResponse(TrackSummaryResponse):
    """Track metadata with its parsed entries."""

    entries: list[CaptionEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_track(cls, index: int, track: Track) -> "TrackResponse":
        summary = TrackSummaryResponse.from_track(index, track)
        return cls(
            **summary.model_dump(),
            entries=[CaptionEntryResponse.from_entry(entry) for entry in track.entries],
        )


class TrackListResponse(BaseModel):
    """Response model for listing tracks."""

    tracks: list[TrackSummaryResponse]


class AlignedRowResponse(BaseModel):
    """One row of the aligned table."""

    time: int = Field(..., description="Earliest start time of the row's entries in milliseconds")
    pretty_time: str = Field(..., description="Row time formatted as HH:MM:SS")
    captions: list[str] = Field(..., description="One caption per track, empty when absent")

    @classmethod
    def from_row(cls, row: AlignedRow) -> "AlignedRowResponse":
        return cls(time=row.time, pretty_time=pretty_time(row.time), captions=list(row.captions))


class AlignmentResponse(BaseModel):
    """The aligned table: one column per track, rows ordered by time."""

    columns: list[str] = Field(..., description="Track names in column order")
    rows: list[AlignedRowResponse]

    @classmethod
    def from_rows(
        cls, tracks: Sequence[Track], rows: Sequence[AlignedRow]
    ) -> "AlignmentResponse":
        return cls(
            columns=[track.name for track in tracks],
            rows=[AlignedRowResponse.from_row(row) for row in rows],
        )


class AlignResponse(AlignmentResponse):
    """Response model for stateless alignment."""

    tracks: list[TrackSummaryResponse]
