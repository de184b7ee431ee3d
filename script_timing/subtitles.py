"""Subtitle synthesis: turn a marked-up script into an SRT track.

WHY: A finished script already says when each block should be spoken: the
time marker opening the block. Exporting subtitles is a matter of grouping
the spoken lines under their markers and writing the standard numbered-cue
format that video editors and YouTube accept.

HOW: The pipeline has two stages:
  1. build_caption_entries() - walks the scanned lines, opens a new entry at
     every marker and appends sanitized content lines to the open entry.
     End times come from the next entry's start; the last entry gets a
     synthesized duration from the pacing model.
  2. render_srt() - writes index, "HH:MM:SS,mmm --> HH:MM:SS,mmm" range,
     caption text, and a blank separator line per entry.

RULES:
- One entry per marker, in textual order, numbered from 1.
- Lines before the first marker belong to no entry and are ignored.
- Last entry: end = start + max(trailing_min_seconds,
  floor(len(text) / trailing_chars_per_second)).
- end_seconds >= start_seconds always. An out-of-order marker in a hand
  edited script clamps the previous entry to zero length.
- No markers means an empty track ("").
"""

import logging
import math
from typing import List, Tuple

from .markers import scan_lines
from .models import CaptionEntry, PacingModel
from .presets import DEFAULT_PACING
from .sanitize import sanitize_line

logger = logging.getLogger(__name__)


def _collect_blocks(text: str) -> List[Tuple[int, List[str]]]:
    """Group sanitized fragments under the marker that opens each block."""
    blocks = []  # type: List[Tuple[int, List[str]]]
    for line in scan_lines(text):
        if line.marker is not None:
            blocks.append((line.marker.total_seconds, []))
        elif not blocks:
            continue

        cleaned = sanitize_line(line.text)
        if cleaned:
            blocks[-1][1].append(cleaned)
    return blocks


def build_caption_entries(text: str, pacing: PacingModel = DEFAULT_PACING) -> List[CaptionEntry]:
    """Build ordered caption entries from a script.

    Args:
        text: The full script with inline time markers.
        pacing: Supplies the trailing-cue duration heuristic.

    Returns:
        One CaptionEntry per marker, in the order the markers appear.
    """
    blocks = _collect_blocks(text)
    entries = []  # type: List[CaptionEntry]

    for i, (start, fragments) in enumerate(blocks):
        caption = "\n".join(fragments).strip()

        if i + 1 < len(blocks):
            end = blocks[i + 1][0]
            if end < start:
                logger.warning(
                    "Marker at %ds is earlier than the previous one at %ds; "
                    "cue %d clamped to zero length", end, start, i + 1,
                )
                end = start
        else:
            scaled = int(math.floor(len(caption) / pacing.trailing_chars_per_second))
            end = start + max(pacing.trailing_min_seconds, scaled)

        entries.append(CaptionEntry(
            sequence_number=i + 1,
            start_seconds=start,
            end_seconds=end,
            text=caption,
        ))

    logger.debug("Built %d caption entries", len(entries))
    return entries


def seconds_to_srt_time(seconds: float) -> str:
    """Convert seconds to SRT timestamp format: HH:MM:SS,mmm"""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    millis = int((seconds % 1) * 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, secs, millis)


def render_srt(entries: List[CaptionEntry]) -> str:
    """Serialize caption entries to SRT.

    Every block ends with a blank separator line, including the last one.
    """
    blocks = []
    for entry in entries:
        blocks.append("{}\n{} --> {}\n{}\n\n".format(
            entry.sequence_number,
            seconds_to_srt_time(entry.start_seconds),
            seconds_to_srt_time(entry.end_seconds),
            entry.text,
        ))
    return "".join(blocks)


def synthesize_subtitles(text: str, pacing: PacingModel = DEFAULT_PACING) -> str:
    """Produce a complete SRT track from a marked-up script."""
    return render_srt(build_caption_entries(text, pacing))
