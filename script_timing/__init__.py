"""Script timing engine for markdown video scripts with inline time markers.

WHY: Generated video scripts carry "(MM:SS)" markers that say when each block
is spoken. Two things need those markers: exporting a subtitle track, and
retiming the script after a human edits it. Both are pure text
transformations, kept here free of any UI, file, or network code so any
front end (CLI, HTTP API, tests) can call them.

HOW: Four stateless pieces:
  - markers: scan lines for the first marker, render a clock as a marker
  - sanitize: reduce a markdown line to caption-safe text
  - subtitles: group lines under markers into cues and render SRT
  - recalc: rewrite every marker from a characters-per-second estimate

RULES:
- Every function takes the script string in and returns a new value out.
- No global mutable state; tuning lives in an explicit PacingModel.
- Nothing here raises for any text input.
"""

from .markers import MARKER_RE, count_markers, find_marker, format_marker, scan_lines
from .models import CaptionEntry, PacingModel, ScannedLine, TimeMarker
from .presets import (
    CHARS_PER_SECOND,
    DEFAULT_PACING,
    MAX_MARKER_MINUTES,
    TRAILING_CHARS_PER_SECOND,
    TRAILING_MIN_SECONDS,
)
from .recalc import recalculate_timestamps
from .sanitize import is_heading, sanitize_line
from .subtitles import (
    build_caption_entries,
    render_srt,
    seconds_to_srt_time,
    synthesize_subtitles,
)

__all__ = [
    "MARKER_RE",
    "CHARS_PER_SECOND",
    "DEFAULT_PACING",
    "MAX_MARKER_MINUTES",
    "TRAILING_CHARS_PER_SECOND",
    "TRAILING_MIN_SECONDS",
    "CaptionEntry",
    "PacingModel",
    "ScannedLine",
    "TimeMarker",
    "build_caption_entries",
    "count_markers",
    "find_marker",
    "format_marker",
    "is_heading",
    "recalculate_timestamps",
    "render_srt",
    "sanitize_line",
    "scan_lines",
    "seconds_to_srt_time",
    "synthesize_subtitles",
]
