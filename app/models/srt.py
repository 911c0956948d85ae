"""Subtitle track and aligned row models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CaptionEntry:
    """Represents a single timed subtitle cue."""

    start_time: int
    end_time: int
    caption: str = ""
    index: int | None = None

    def __post_init__(self) -> None:
        if self.start_time < 0:
            raise ValueError("Caption start time must be non-negative")
        if self.end_time < self.start_time:
            raise ValueError("Caption end time must not precede start time")

    def __repr__(self) -> str:
        return f"CaptionEntry(index={self.index}, time={self.start_time} --> {self.end_time})"


@dataclass(frozen=True)
class ParseDiagnostic:
    """A structural problem that stopped parsing of a track."""

    line_number: int
    line: str | None
    message: str


@dataclass(frozen=True)
class Track:
    """A named, ordered sequence of caption entries."""

    name: str
    entries: tuple[CaptionEntry, ...] = ()
    diagnostics: tuple[ParseDiagnostic, ...] = ()

    @property
    def truncated(self) -> bool:
        """Whether parsing stopped early on malformed input."""
        return bool(self.diagnostics)


@dataclass(frozen=True)
class AlignedRow:
    """One row of the merged table, holding at most one caption per track."""

    time: int
    captions: tuple[str, ...]
