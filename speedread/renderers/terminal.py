"""Terminal renderer that keeps the fixation character in a fixed column.

WHY: In RSVP the eye must not move. If every word were printed flush
left, the fixation character would jump around from word to word.
Padding each word so its ORP character lands in the same column keeps
the eye parked in one spot.

HOW: Left-pad with ``focus_column - len(before)`` spaces, then print
before/focus/after. With color enabled the focus character is wrapped
in ANSI bold red, matching the red fixation mark of the web overlay.

RULES:
- The focus character always starts at ``focus_column`` (0-based) unless
  the part before it is longer than the column, in which case no padding
- Color codes are only emitted when ``color=True``
"""

from __future__ import annotations

from speedread.core.units import WordUnit
from speedread.renderers.base import BaseRenderer, split_at_orp

ANSI_FOCUS = "\033[1;31m"
ANSI_RESET = "\033[0m"

DEFAULT_FOCUS_COLUMN = 10


class TerminalRenderer(BaseRenderer):
    """Renders a word as one padded, optionally colored, terminal line."""

    def __init__(self, focus_column: int = DEFAULT_FOCUS_COLUMN, color: bool = True) -> None:
        self.focus_column = max(focus_column, 0)
        self.color = color

    @property
    def name(self) -> str:
        return "Terminal"

    def render(self, unit: WordUnit) -> str:
        before, focus, after = split_at_orp(unit)
        padding = " " * max(self.focus_column - len(before), 0)
        if self.color and focus:
            focus = ANSI_FOCUS + focus + ANSI_RESET
        return padding + before + focus + after
