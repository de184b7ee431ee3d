"""Abstract base formatter and output container.

WHY: A finished script can be exported in several shapes (the script itself,
a subtitle track). The CLI and the HTTP API should not care which; they
look a formatter up by key and save whatever it returns.

HOW: BaseFormatter is an ABC with a class-level ``name`` and an abstract
``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST set ``name`` (human-readable, class attribute) and
  implement ``format()``
- ``name`` is readable from the class, so listing formats never builds
  pacing or other per-instance state
- ``format()`` returns a list so a formatter may produce several files
- ``suffix`` includes the extension, e.g. ``".srt"``
- The caller is responsible for prepending the export basename
- Formatters never modify the script they are given
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from script_timing import PacingModel


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the export basename,
                e.g. ``".srt"`` -> ``"AI_StoryLab_Script_2026-10-19.srt"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"text/plain"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all export formatters.

    To add a new export format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Set name and implement format()
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    name: str = ""
    """Human-readable format name, e.g. 'SRT Captions'."""

    def __init__(self, pacing: PacingModel | None = None) -> None:
        self.pacing = pacing

    @abstractmethod
    def format(self, script: str) -> list[FormatterOutput]:
        """Convert the script into one or more output files.

        Args:
            script: The full script text with inline time markers.

        Returns:
            List of FormatterOutput objects.
        """
