"""Plain text export of the script itself.

WHY: The most common download is the script as written, markers and
markdown included, for reading or pasting into a teleprompter.

RULES:
- Content is the script verbatim, no normalization
- Output suffix: ".txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from storylab.formatters.base import BaseFormatter, FormatterOutput


class ScriptTextFormatter(BaseFormatter):
    """Formatter that exports the script unchanged."""

    name = "Script Text"

    def format(self, script: str) -> list[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".txt",
                content=script,
                media_type="text/plain",
            )
        ]
