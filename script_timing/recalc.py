"""Timestamp recalculation: rebuild every marker from a reading-speed model.

WHY: After a user edits a script, the markers it carries no longer match the
text. Rather than ask the user to retime every block by hand, the markers
are recomputed from how long the text before them takes to read aloud.

HOW: One forward pass with a running clock starting at zero. A marker line
gets its marker replaced with the current clock. Any other non-blank,
non-heading line advances the clock by len(line) / chars_per_second.

RULES:
- Only the matched marker substring changes; every other character of the
  script is left as is. Line count and order are preserved.
- A marker line's own text never advances the clock.
- Blank lines and lines starting with "#" never advance the clock.
- Fractional seconds accumulate; flooring happens only when a marker is
  written.
- A clock past 99:59 cannot be written as a marker; that marker is left
  unchanged.
- Manually set timestamps are always overwritten.
"""

import logging
from typing import List

from .markers import format_marker, scan_lines
from .models import PacingModel
from .presets import DEFAULT_PACING

logger = logging.getLogger(__name__)


def _advances_clock(line: str) -> bool:
    return bool(line.strip()) and not line.startswith("#")


def recalculate_timestamps(text: str, pacing: PacingModel = DEFAULT_PACING) -> str:
    """Return a copy of the script with every time marker recomputed.

    Args:
        text: The full script, typically after manual editing.
        pacing: Supplies the characters-per-second rate.

    Returns:
        The script with markers rewritten as "(MM:SS)". A script without
        markers comes back unchanged.
    """
    clock = 0.0
    output = []  # type: List[str]

    for line in scan_lines(text):
        marker = line.marker
        if marker is None:
            if _advances_clock(line.text):
                clock += len(line.text) / pacing.chars_per_second
            output.append(line.text)
            continue

        replacement = format_marker(clock)
        if replacement is None:
            logger.warning(
                "Estimated time %.0fs on line %d does not fit a (MM:SS) marker; "
                "leaving it unchanged", clock, line.index + 1,
            )
            output.append(line.text)
            continue

        start, end = marker.span
        output.append(line.text[:start] + replacement + line.text[end:])

    logger.debug("Recalculated markers over %.1fs of estimated speech", clock)
    return "\n".join(output)
