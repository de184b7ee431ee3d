"""Data models for the script timing engine.

WHY: Scanning, caption synthesis, and timestamp recalculation all talk about
the same few things: a line of the script, the time marker on it, a finished
caption cue, and the reading-speed model. Small dataclasses keep those
contracts explicit and cheap to construct in tests.

HOW: ScannedLine and TimeMarker are produced fresh by the scanner on every
call. CaptionEntry is produced by the subtitle synthesizer. PacingModel holds
the tuning constants and validates them on construction.

RULES:
- Nothing here is cached or persisted; models are re-derived from the
  script text on every call.
- Times are in seconds. Marker values are whole seconds as written.
- PacingModel is frozen so one instance can be shared between callers.
- Python 3.9.6 compatible (no slots=True, no match/case, no X | Y unions).
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class TimeMarker:
    """An inline ``(MM:SS)`` marker found on a script line.

    Attributes:
        line_index: Zero-based index of the line carrying the marker.
        minutes: Minute value as written (two digits, 0-99).
        seconds: Second value as written (two digits, not range-checked).
        span: (start, end) offsets of the matched substring within the line.
    """
    line_index: int
    minutes: int
    seconds: int
    span: Tuple[int, int] = (0, 0)

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds


@dataclass
class ScannedLine:
    """One line of a script, tagged with its time marker (if any)."""
    index: int
    text: str
    marker: Optional[TimeMarker] = None

    @property
    def has_marker(self) -> bool:
        return self.marker is not None


@dataclass
class CaptionEntry:
    """A single timed subtitle cue.

    Attributes:
        sequence_number: 1-based position in the track.
        start_seconds: Cue start time in seconds.
        end_seconds: Cue end time in seconds (never before start_seconds).
        text: Caption text, newline-joined fragments, may be empty.
    """
    sequence_number: int
    start_seconds: float
    end_seconds: float
    text: str

    @property
    def duration(self) -> float:
        return self.end_seconds - self.start_seconds


@dataclass(frozen=True)
class PacingModel:
    """Reading-speed heuristics used to estimate spoken time.

    WHY: Scripts edited by hand lose their timing. Without audio the only
    signal left is text length, so elapsed time is estimated from a fixed
    characters-per-second rate.

    Attributes:
        chars_per_second: Spoken delivery rate used by the recalculator.
        trailing_min_seconds: Minimum duration of the last caption cue.
        trailing_chars_per_second: Divisor that scales the last cue's
            duration with its text length.

    Raises:
        ValueError: If any value is not strictly positive.
    """
    chars_per_second: float = 4.5
    trailing_min_seconds: int = 3
    trailing_chars_per_second: float = 10

    def __post_init__(self) -> None:
        for field_name in ("chars_per_second", "trailing_min_seconds", "trailing_chars_per_second"):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(
                    "PacingModel.{} must be positive, got {!r}".format(field_name, value)
                )
