"""Export formatter registry.

WHY: The CLI and the HTTP API need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["srt_captions"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API paths)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storylab.formatters.script_text import ScriptTextFormatter
from storylab.formatters.srt_captions import SRTCaptionFormatter

if TYPE_CHECKING:
    from storylab.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "script_text": ScriptTextFormatter,
    "srt_captions": SRTCaptionFormatter,
}
