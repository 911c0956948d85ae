"""Multi-track caption alignment.

Merges the entries of several tracks into time-ordered rows with a greedy,
single-pass sweep over all entries sorted by start time. The open row is
closed when the incoming entry either comes from a track already present in
the row, or starts strictly after the earliest end time in the row.
"""

from collections.abc import Iterable, Iterator, Sequence

from app.models.srt import AlignedRow, CaptionEntry, Track

TrackEntry = tuple[int, CaptionEntry]


def entries_by_time(tracks: Sequence[Track]) -> list[TrackEntry]:
    """Flatten tracks into (track index, entry) pairs ordered by start time.

    The sort is stable, so entries with equal start times keep track order
    and then file order.
    """
    all_entries = [(idx, entry) for idx, track in enumerate(tracks) for entry in track.entries]
    return sorted(all_entries, key=lambda item: item[1].start_time)


def make_entry_row(group: dict[int, CaptionEntry], track_count: int) -> AlignedRow:
    """Build an aligned row with one caption slot per track."""
    captions = tuple(
        group[idx].caption if idx in group else "" for idx in range(track_count)
    )
    return AlignedRow(
        time=min(entry.start_time for entry in group.values()),
        captions=captions,
    )


def synchronized_rows(
    ordered_entries: Iterable[TrackEntry], track_count: int
) -> Iterator[AlignedRow]:
    """Group time-ordered entries into aligned rows.

    Args:
        ordered_entries: (track index, entry) pairs sorted by start time
        track_count: Number of caption slots in each row

    Yields:
        AlignedRow objects in non-decreasing time order
    """
    current: dict[int, CaptionEntry] = {}

    for track_index, entry in ordered_entries:
        if current:
            group_min_end = min(item.end_time for item in current.values())
            if track_index in current or entry.start_time > group_min_end:
                yield make_entry_row(current, track_count)
                current = {}

        current[track_index] = entry

    if current:
        yield make_entry_row(current, track_count)


def compute_aligned_rows(tracks: Sequence[Track]) -> list[AlignedRow]:
    """Align all tracks into a single time-ordered table.

    Args:
        tracks: Tracks in column order

    Returns:
        Aligned rows; empty when there are no tracks or no entries
    """
    return list(synchronized_rows(entries_by_time(tracks), len(tracks)))
