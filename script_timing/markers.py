"""Time marker scanning: locate ``(MM:SS)`` markers in script text.

WHY: Both caption synthesis and timestamp recalculation start from the same
question: which lines carry a time marker, and what value does it hold? If
the read path and the rewrite path matched markers differently, a
recalculated script could export different cues than the user sees.

HOW: MARKER_RE is the single compiled pattern used everywhere a marker is
found, removed, or replaced. scan_lines() walks the script lazily and tags
each line with the first marker it carries. format_marker() renders a
running clock back into marker form.

RULES:
- Marker shape: optional "(", two digits, ":", two digits, optional ")".
- The digit runs must stand alone: "(100:00)" and "12:345" are plain text.
- Only the first match on a line counts.
- Never raises; a line without a marker is a normal outcome.
- Written markers are always parenthesised: "(MM:SS)".
"""

import math
import re
from typing import Iterator, Optional

from .models import ScannedLine, TimeMarker
from .presets import MAX_MARKER_MINUTES

MARKER_RE = re.compile(r"\(?(?<!\d)(\d{2}):(\d{2})(?!\d)\)?")


def find_marker(line: str, line_index: int = 0) -> Optional[TimeMarker]:
    """Return the first time marker on a line, or None."""
    match = MARKER_RE.search(line)
    if match is None:
        return None
    return TimeMarker(
        line_index=line_index,
        minutes=int(match.group(1)),
        seconds=int(match.group(2)),
        span=match.span(),
    )


def scan_lines(text: str) -> Iterator[ScannedLine]:
    """Yield every line of the script in order, tagged with its marker.

    Lines are split on "\\n" only, so joining the yielded texts back with
    "\\n" reproduces the input exactly.

    Args:
        text: The full script.

    Yields:
        ScannedLine for each line; marker is None for plain content lines.
    """
    for index, line in enumerate(text.split("\n")):
        yield ScannedLine(index=index, text=line, marker=find_marker(line, index))


def count_markers(text: str) -> int:
    """Number of lines carrying a time marker."""
    return sum(1 for line in scan_lines(text) if line.has_marker)


def format_marker(seconds: float) -> Optional[str]:
    """Render a clock value as a "(MM:SS)" marker.

    The value is floored to whole seconds. Returns None when the minute
    part no longer fits in two digits, since such a marker could not be
    scanned back.
    """
    total = int(math.floor(seconds))
    minutes, secs = divmod(total, 60)
    if minutes > MAX_MARKER_MINUTES:
        return None
    return "({:02d}:{:02d})".format(minutes, secs)
