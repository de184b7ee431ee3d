"""File export: run formatters and save their outputs under dated names.

WHY: The front end's download dialog saves the script as
``AI_StoryLab_Script_<date>.txt`` and/or ``.srt``. The same naming and the
same "never overwrite earlier exports" behaviour are needed by the CLI, so
they live here rather than in either front end.

HOW: export_basename() builds the dated stem. run_formatters() looks up
each requested key in FORMATTERS and collects the outputs. save_outputs()
writes them, resolving a conflict-free path for each file.

RULES:
- Basename: {prefix}_{YYYY-MM-DD}
- Unknown formatter keys raise ValueError listing the available keys
- Conflict: insert -2, -3, ... before the extension
- String content is written as UTF-8 with line endings kept as given
"""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from typing import List, Optional

from script_timing import PacingModel
from storylab.config import EXPORT_PREFIX
from storylab.formatters import FORMATTERS
from storylab.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def export_basename(
    today: Optional[datetime.date] = None,
    prefix: str = EXPORT_PREFIX,
) -> str:
    """Return the dated stem for exported files."""
    if today is None:
        today = datetime.date.today()
    return "{}_{}".format(prefix, today.isoformat())


def run_formatters(
    script: str,
    format_keys: List[str],
    pacing: Optional[PacingModel] = None,
) -> List[FormatterOutput]:
    """Run the requested formatters over a script.

    Args:
        script: The full script text.
        format_keys: Keys from FORMATTERS, in the order outputs should appear.
        pacing: Optional pacing override for formatters that use one.

    Returns:
        All outputs, in formatter order.

    Raises:
        ValueError: If a key is not registered.
    """
    outputs: List[FormatterOutput] = []
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            raise ValueError(
                "Unknown format '{}'. Available formats: {}".format(key, available)
            )
        formatter = FORMATTERS[key](pacing=pacing)
        outputs.extend(formatter.format(script))
    return outputs


def resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users export the same script several times while revising it.
    Overwriting a previous export would lose work.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter
    and insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. AI_StoryLab_Script_2026-10-19.srt)
    - Conflict: AI_StoryLab_Script_2026-10-19-2.srt
    - Counter starts at 2 and increments

    Args:
        stem: Export basename (without extension).
        suffix: Formatter's suffix (e.g. ".srt").
        output_dir: Directory to save the output file.

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # ".srt" -> ("", ".srt"); "-notes.txt" -> ("-notes", ".txt")
    dot_idx = suffix.rfind(".")
    if dot_idx >= 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk and return its path."""
    path = resolve_output_path(stem, output.suffix, output_dir)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(output.content)
    logger.info("Saved %s (%s)", path, output.media_type)
    return path


def save_outputs(
    outputs: List[FormatterOutput],
    stem: str,
    output_dir: Path,
) -> List[Path]:
    """Save every output; returns the written paths in order."""
    return [save_output(output, stem, output_dir) for output in outputs]
