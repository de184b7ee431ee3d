"""SRT caption export built from the script's time markers.

WHY: Editors and YouTube uploads need a subtitle track that follows the
script's timing. All SRT output goes through the engine's subtitle
synthesizer so the CLI, the API, and tests produce identical tracks.

HOW: Calls script_timing.synthesize_subtitles() with the formatter's pacing
model (the configured one unless the caller passes its own).

RULES:
- Registered as "srt_captions" in the FORMATTERS dict.
- Media type: "application/x-subrip". Suffix: ".srt".
- A script without markers yields one output with empty content.
- Python 3.9.6 compatible - no slots=True, no match/case.
"""

from __future__ import annotations

from typing import List, Optional

from script_timing import PacingModel, synthesize_subtitles
from storylab.config import load_pacing
from storylab.formatters.base import BaseFormatter, FormatterOutput


class SRTCaptionFormatter(BaseFormatter):
    """Formatter that produces an SRT subtitle track."""

    name = "SRT Captions"

    def __init__(self, pacing: Optional[PacingModel] = None) -> None:
        super().__init__(pacing if pacing is not None else load_pacing())

    def format(self, script: str) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".srt",
                content=synthesize_subtitles(script, self.pacing),
                media_type="application/x-subrip",
            )
        ]
