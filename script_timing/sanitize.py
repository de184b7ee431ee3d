"""Caption text cleanup: strip markdown decoration from script lines.

WHY: Generated scripts are markdown with headings, bold emphasis, and
bracketed camera cues like **[B-roll: city skyline]**. None of that belongs
in a subtitle. Each content line has to be reduced to what is actually
spoken.

HOW: sanitize_line() removes, in order: the first time marker, heading
lines, bold delimiters, and bracketed stage directions, then trims.

RULES:
- Heading lines (1-6 "#" then whitespace) contribute no caption text.
- "**" delimiters are removed, the enclosed text is kept.
- Any "[...]" span is removed entirely, brackets included.
- An empty result means the fragment is dropped by the caller.
"""

import re

from .markers import MARKER_RE

HEADING_RE = re.compile(r"^#{1,6}(\s|$)")
BOLD_RE = re.compile(r"\*\*")
STAGE_DIRECTION_RE = re.compile(r"\[[^\]]*\]")


def is_heading(line: str) -> bool:
    """True if the line is a markdown heading."""
    return bool(HEADING_RE.match(line.strip()))


def sanitize_line(line: str) -> str:
    """Return the caption-safe part of a script line, or "" if none remains.

    >>> sanitize_line("(00:00) **[Intro]** Hi there")
    'Hi there'
    """
    text = MARKER_RE.sub("", line, count=1)
    if is_heading(text):
        return ""
    text = BOLD_RE.sub("", text)
    text = STAGE_DIRECTION_RE.sub("", text)
    return text.strip()
