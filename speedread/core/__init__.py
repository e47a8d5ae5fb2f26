"""Presentation engine: word units, timing policy and the playback scheduler.

WHY: This is the only part of the package with real algorithmic content.
Everything else (renderers, text sources, preferences, CLI) is glue that
feeds text in and draws words out.

HOW: units.py defines WordUnit, timing.py holds the tokenizer with the
ORP and delay rules, engine.py holds RSVPEngine, the timer-driven state
machine that plays a sequence of units.

RULES:
- No file I/O, rendering or persistence in this package
- timing.py is pure; all mutable state lives in RSVPEngine
"""

from speedread.core.engine import PlaybackState, RSVPEngine
from speedread.core.timing import orp_offset, tokenize, word_delay
from speedread.core.units import WordUnit

__all__ = [
    "PlaybackState",
    "RSVPEngine",
    "WordUnit",
    "orp_offset",
    "tokenize",
    "word_delay",
]
