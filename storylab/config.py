"""Configuration constants and .env loading.

WHY: The pacing numbers behind timestamp recalculation are guesses, and
different narrators read at different speeds. Export naming and the default
export formats are likewise per-deployment choices. Centralizing them here
makes them easy to find and override without touching the engine.

HOW: python-dotenv loads the .env file on import. Module-level defaults read
environment variables once; load_pacing() re-reads them at call time so a
changed environment (or a test's monkeypatch) takes effect immediately.

RULES:
- All defaults can be overridden via STORYLAB_* environment variables
- Pacing values must be positive numbers; load_pacing() raises ValueError
  with the variable name otherwise
- Never reach into script_timing.presets to mutate its constants; build a
  new PacingModel instead
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from script_timing import (
    CHARS_PER_SECOND,
    TRAILING_CHARS_PER_SECOND,
    TRAILING_MIN_SECONDS,
    PacingModel,
)

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Export defaults
# ---------------------------------------------------------------------------

EXPORT_PREFIX = os.getenv("STORYLAB_EXPORT_PREFIX", "AI_StoryLab_Script")
"""Download filenames are {EXPORT_PREFIX}_{YYYY-MM-DD}{suffix}."""

DEFAULT_FORMATS: list[str] = [
    key.strip()
    for key in os.getenv("STORYLAB_DEFAULT_FORMATS", "script_text").split(",")
    if key.strip()
]
"""Formatter keys exported when the caller does not choose."""

LOG_LEVEL = os.getenv("STORYLAB_LOG_LEVEL", "WARNING").upper()

# ---------------------------------------------------------------------------
# Pacing
# ---------------------------------------------------------------------------


def _env_number(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError("{} must be a number, got {!r}".format(name, raw))
    if value <= 0:
        raise ValueError("{} must be positive, got {!r}".format(name, raw))
    return value


def load_pacing(chars_per_second: float | None = None) -> PacingModel:
    """Build the pacing model from the environment.

    WHY: Recalculation and subtitle export must agree on the same pacing
    for one deployment, while still letting a single request or CLI run
    override the reading speed.

    HOW: Reads STORYLAB_CHARS_PER_SECOND, STORYLAB_TRAILING_MIN_SECONDS and
    STORYLAB_TRAILING_CHARS_PER_SECOND, falling back to the engine's
    reference values. An explicit chars_per_second wins over the env.

    RULES:
    - Raises ValueError for non-numeric or non-positive values
    - Returns a fresh PacingModel on every call
    """
    if chars_per_second is None:
        chars_per_second = _env_number("STORYLAB_CHARS_PER_SECOND", CHARS_PER_SECOND)
    trailing_min = _env_number("STORYLAB_TRAILING_MIN_SECONDS", TRAILING_MIN_SECONDS)
    trailing_cps = _env_number("STORYLAB_TRAILING_CHARS_PER_SECOND", TRAILING_CHARS_PER_SECOND)

    return PacingModel(
        chars_per_second=chars_per_second,
        trailing_min_seconds=int(trailing_min),
        trailing_chars_per_second=trailing_cps,
    )
