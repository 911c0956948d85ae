"""SRT subtitle parser.

Parses SRT content in a single forward pass over trimmed lines. Parsing is
fail-fast: the first block with an unreadable entry number or timing line
stops the track, and everything parsed up to that point is kept. The problem
is recorded as a ParseDiagnostic and logged instead of being raised.
"""

from collections.abc import Iterable, Iterator
import logging
import re

from pysubs2.time import make_time, ms_to_times

from app.models.srt import CaptionEntry, ParseDiagnostic, Track

logger = logging.getLogger(__name__)

_INDEX_PATTERN = re.compile(r"\d+", re.ASCII)
_TIMING_PATTERN = re.compile(
    r"(\d\d):(\d\d):(\d\d),(\d+)\s-->\s(\d\d):(\d\d):(\d\d),(\d+)",
    re.ASCII,
)


class SRTFormatError(Exception):
    """Raised internally when a subtitle block cannot be read."""

    def __init__(self, message: str, line_number: int, line: str | None = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    def to_diagnostic(self) -> ParseDiagnostic:
        return ParseDiagnostic(line_number=self.line_number, line=self.line, message=self.message)


def timestamp_to_ms(hours: int, minutes: int, seconds: int, milliseconds: int) -> int:
    """Convert SRT timestamp components to milliseconds."""
    return make_time(h=hours, m=minutes, s=seconds, ms=milliseconds)


def pretty_time(ms: int) -> str:
    """Format milliseconds as zero-padded HH:MM:SS.

    Hours are not wrapped at 24 and milliseconds are dropped.
    """
    hours, minutes, seconds, _ = ms_to_times(ms)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def split_lines(content: str) -> list[str]:
    """Split raw SRT content into trimmed lines."""
    if content.startswith("\ufeff"):
        content = content[1:]
    return [line.strip() for line in content.split("\n")]


def _parse_entry(lines: Iterator[tuple[int, str]]) -> CaptionEntry | None:
    """Read one subtitle block from the line cursor.

    Returns None when the cursor is exhausted before the block starts.

    Raises:
        SRTFormatError: If the entry number or timing line is malformed
    """
    item = next(lines, None)
    if item is None:
        return None
    line_number, line = item
    if not _INDEX_PATTERN.fullmatch(line):
        raise SRTFormatError("Could not read entry number", line_number, line)
    index = int(line)

    item = next(lines, None)
    if item is None:
        raise SRTFormatError("Unexpected end of input when parsing time", line_number + 1)
    line_number, line = item
    match = _TIMING_PATTERN.fullmatch(line)
    if match is None:
        raise SRTFormatError("Invalid time format", line_number, line)

    groups = [int(value) for value in match.groups()]
    start_time = timestamp_to_ms(*groups[:4])
    end_time = timestamp_to_ms(*groups[4:])
    if end_time < start_time:
        raise SRTFormatError("Invalid time range: end precedes start", line_number, line)

    captions: list[str] = []
    for _, line in lines:
        if line == "":
            break
        captions.append(line)

    return CaptionEntry(
        start_time=start_time, end_time=end_time, caption="\n".join(captions), index=index
    )


def parse_entries(
    lines: Iterable[str], diagnostics: list[ParseDiagnostic] | None = None
) -> Iterator[CaptionEntry]:
    """Lazily parse caption entries from trimmed SRT lines.

    Args:
        lines: Trimmed lines of one subtitle file
        diagnostics: Optional list that receives the diagnostic if parsing stops early

    Yields:
        CaptionEntry objects in file order
    """
    cursor = enumerate(lines, start=1)
    while True:
        try:
            entry = _parse_entry(cursor)
        except SRTFormatError as e:
            logger.warning("%s at line %d: %r", e.message, e.line_number, e.line)
            if diagnostics is not None:
                diagnostics.append(e.to_diagnostic())
            return
        if entry is None:
            return
        yield entry


def parse_srt(content: str) -> list[CaptionEntry]:
    """Parse SRT content into a list of caption entries.

    Args:
        content: Raw SRT file content as string

    Returns:
        Entries parsed before the end of input or the first malformed block
    """
    return list(parse_entries(split_lines(content)))


def parse_track(name: str, content: str) -> Track:
    """Parse SRT content into a named track.

    Malformed input truncates the track; the diagnostic is kept on the
    returned Track.

    Args:
        name: Display label for the track (usually the file name)
        content: Raw SRT file content as string

    Returns:
        Track with the parsed entries and any parse diagnostics
    """
    diagnostics: list[ParseDiagnostic] = []
    entries = tuple(parse_entries(split_lines(content), diagnostics))
    if diagnostics:
        logger.warning(
            "Track %r truncated after %d entries: %s", name, len(entries), diagnostics[0].message
        )
    logger.info("Parsed track %r: %d entries", name, len(entries))
    return Track(name=name, entries=entries, diagnostics=tuple(diagnostics))
