"""Shared test fixtures for the script timing test suite.

WHY: Several test modules need the same realistic generated script: a title
heading, a preamble before the first marker, section headings, bold and
bracketed camera cues. Centralizing it keeps the expected cue values in one
place.

HOW: SAMPLE_SCRIPT is a module constant; fixtures hand out the script and
its expected SRT track. An autouse fixture clears STORYLAB_* variables so a
developer's .env cannot change the pacing under test.

RULES:
- SAMPLE_SRT is the exact expected output for SAMPLE_SCRIPT under the
  default pacing (4.5 chars/s, 3 s floor, length / 10).
"""

import pytest

SAMPLE_SCRIPT = "\n".join([
    "# Episode 12: The Quiet Harbor",
    "",
    "Intro paragraph before any marker.",
    "",
    "## Opening",
    "(00:00) **[Drone shot over the harbor]** Every town has a story.",
    "It starts at the water.",
    "",
    "## Part 1",
    "(00:30) **Fishermen** leave before dawn.",
    "[Cut to: close-up of nets]",
    "They have done this for generations.",
])

# Cue 2 text is 65 chars -> floor(65 / 10) = 6 s
SAMPLE_SRT = (
    "1\n"
    "00:00:00,000 --> 00:00:30,000\n"
    "Every town has a story.\n"
    "It starts at the water.\n"
    "\n"
    "2\n"
    "00:00:30,000 --> 00:00:36,000\n"
    "Fishermen leave before dawn.\n"
    "They have done this for generations.\n"
    "\n"
)

# "Intro paragraph before any marker." = 34 chars -> 7.56 s
# "It starts at the water." = 23 chars -> +5.11 s = 12.67 s
SAMPLE_RECALCULATED = (
    SAMPLE_SCRIPT
    .replace("(00:00)", "(00:07)")
    .replace("(00:30)", "(00:12)")
)


@pytest.fixture(autouse=True)
def _clean_storylab_env(monkeypatch):
    for name in (
        "STORYLAB_CHARS_PER_SECOND",
        "STORYLAB_TRAILING_MIN_SECONDS",
        "STORYLAB_TRAILING_CHARS_PER_SECOND",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_script():
    """A generated script with headings, preamble, and two markers."""
    return SAMPLE_SCRIPT


@pytest.fixture
def sample_srt():
    """Expected SRT track for sample_script under default pacing."""
    return SAMPLE_SRT


@pytest.fixture
def sample_recalculated():
    """Expected recalculate_timestamps() output for sample_script."""
    return SAMPLE_RECALCULATED
