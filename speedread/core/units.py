"""Word unit dataclass shared by the tokenizer, the engine and renderers.

WHY: Renderers need the literal word and where to put the fixation
mark; the scheduler needs how long to keep it on screen. One small
record carries all of it.

RULES:
- text is the maximal non-whitespace run exactly as found in the source
- orp_offset is zero-based: 0 <= orp_offset < len(text), or 0 for ""
- index is the 0-based position in its sequence and never changes
- Units are frozen; a rate change rebuilds them with a new delay_ms
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WordUnit:
    """One word as presented by the engine."""

    text: str
    orp_offset: int
    delay_ms: float
    index: int

    @property
    def delay_s(self) -> float:
        """Display time in seconds, as timer loops expect it."""
        return self.delay_ms / 1000.0
