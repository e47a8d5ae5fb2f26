"""Configuration constants and .env loading.

WHY: Reading rate limits, the default rate and the preference file
location are needed by the engine, the preference store and the CLI.
Keeping them here as plain module-level values makes them easy to find
and override.

HOW: python-dotenv loads the .env file on import. Values that make sense
to override come from environment variables with hardcoded fallbacks.

RULES:
- Rates are words per minute, always clamped to [MIN_WPM, MAX_WPM]
- SPEEDREAD_DEFAULT_WPM overrides the default rate (clamped as well)
- SPEEDREAD_PREFERENCES_PATH overrides where the rate preference lives
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Reading rate
# ---------------------------------------------------------------------------

MIN_WPM = 50
MAX_WPM = 1000

WPM_STEP = 50
"""Rate change applied by the host's faster/slower controls."""

FALLBACK_WPM = 300


def clamp_wpm(value, default: int | None = None) -> int:
    """Clamp a words-per-minute value into [MIN_WPM, MAX_WPM].

    WHY: Rates arrive from CLI flags, environment variables and JSON
    preference files. None of those sources should be able to put the
    engine into a nonsensical state, and none of them should crash it.

    RULES:
    - Floats are rounded to the nearest integer
    - Values that cannot be read as a number return ``default``
      (DEFAULT_WPM when not given)
    - Never raises
    """
    if default is None:
        default = DEFAULT_WPM
    try:
        wpm = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return default
    return max(MIN_WPM, min(MAX_WPM, wpm))


DEFAULT_WPM = clamp_wpm(os.getenv("SPEEDREAD_DEFAULT_WPM", FALLBACK_WPM), FALLBACK_WPM)

# ---------------------------------------------------------------------------
# Host-side defaults
# ---------------------------------------------------------------------------

PREFERENCES_PATH = Path(
    os.getenv("SPEEDREAD_PREFERENCES_PATH", str(Path.home() / ".speedread.json"))
).expanduser()

SKIP_SMALL = 1
SKIP_LARGE = 10
