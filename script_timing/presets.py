"""Pacing constants and marker limits.

WHY: The reading speed and the trailing-cue heuristic are tuning values with
no derivation behind them. Naming them in one place lets callers override
them (via PacingModel or the application config) instead of hunting for
magic numbers in the algorithms.

RULES:
- These are reference values; never mutate them at runtime.
- DEFAULT_PACING is shared and frozen; build a new PacingModel to override.
"""

from .models import PacingModel

# Spoken delivery rate, characters per second
CHARS_PER_SECOND = 4.5

# Last caption cue: max(TRAILING_MIN_SECONDS, floor(len(text) / TRAILING_CHARS_PER_SECOND))
TRAILING_MIN_SECONDS = 3
TRAILING_CHARS_PER_SECOND = 10

# Markers carry exactly two minute digits
MAX_MARKER_MINUTES = 99

DEFAULT_PACING = PacingModel(
    chars_per_second=CHARS_PER_SECOND,
    trailing_min_seconds=TRAILING_MIN_SECONDS,
    trailing_chars_per_second=TRAILING_CHARS_PER_SECOND,
)
