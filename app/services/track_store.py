"""In-memory store for the ordered list of subtitle tracks."""

import logging
import threading

from app.core.config import Settings, get_settings
from app.models.srt import AlignedRow, Track
from app.services.aligner import compute_aligned_rows
from app.services.srt_parser import parse_track

logger = logging.getLogger(__name__)


class TrackLimitError(Exception):
    """Raised when adding a track would exceed the configured track limit."""

    pass


class TrackNotFoundError(Exception):
    """Raised when a track index does not exist."""

    pass


class TrackStore:
    """Process-wide ordered list of tracks with the aligned table derived from it.

    Tracks and rows are published together as immutable tuples. Writers
    build a new snapshot under the lock and swap it in; readers never block.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize an empty store.

        Args:
            settings: Optional Settings instance (uses get_settings() if not provided)
        """
        if settings is None:
            settings = get_settings()

        self.max_tracks = settings.max_tracks
        self._lock = threading.Lock()
        self._snapshot: tuple[tuple[Track, ...], tuple[AlignedRow, ...]] = ((), ())

    @property
    def tracks(self) -> tuple[Track, ...]:
        return self._snapshot[0]

    @property
    def rows(self) -> tuple[AlignedRow, ...]:
        return self._snapshot[1]

    def snapshot(self) -> tuple[tuple[Track, ...], tuple[AlignedRow, ...]]:
        """Return tracks and their aligned rows from the same generation."""
        return self._snapshot

    def get_track(self, index: int) -> Track:
        """Return the track at the given position.

        Raises:
            TrackNotFoundError: If no track exists at that index
        """
        tracks = self.tracks
        if not 0 <= index < len(tracks):
            raise TrackNotFoundError(f"Track {index} not found")
        return tracks[index]

    def append(self, track: Track) -> int:
        """Append an already parsed track and realign all tracks.

        Args:
            track: Track to add as the last column

        Returns:
            Column index of the appended track

        Raises:
            TrackLimitError: If the store already holds max_tracks tracks
        """
        with self._lock:
            tracks = self._snapshot[0]
            if len(tracks) >= self.max_tracks:
                raise TrackLimitError(f"Maximum number of tracks reached ({self.max_tracks})")
            tracks = tracks + (track,)
            rows = tuple(compute_aligned_rows(tracks))
            self._snapshot = (tracks, rows)

        logger.info(
            "Added track %r as column %d (%d aligned rows)",
            track.name,
            len(tracks) - 1,
            len(rows),
        )
        return len(tracks) - 1

    def add_track(self, name: str, content: str) -> tuple[int, Track]:
        """Parse content into a new track, append it and realign all tracks.

        Parsing runs outside the lock; only the append is serialized.

        Args:
            name: Display label for the track
            content: Raw SRT file content

        Returns:
            Column index and the newly added Track (possibly truncated, see
            its diagnostics)

        Raises:
            TrackLimitError: If the store already holds max_tracks tracks
        """
        track = parse_track(name, content)
        return self.append(track), track


# Global track store instance
track_store = TrackStore()
