"""Abstract base renderer and the ORP split helper.

WHY: The engine hands out bare WordUnit objects. Every display (a
terminal line, an HTML fragment for a web overlay) has to cut the word
around its fixation character and decorate the three parts. This base
class gives the CLI and the reading session one interface for all of
them.

HOW: BaseRenderer is an ABC with a ``name`` property and a ``render()``
method. split_at_orp() does the slicing that every renderer shares.

RULES:
- Renderers never mutate the unit they are given
- ``render()`` returns a string with no trailing newline
- An ORP offset past the end of the text yields an empty focus part
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

from speedread.core.units import WordUnit


def split_at_orp(unit: WordUnit) -> Tuple[str, str, str]:
    """Split a unit's text into (before, focus, after) around its ORP.

    >>> split_at_orp(WordUnit("jumps.", 2, 360.0, 3))
    ('ju', 'm', 'ps.')
    """
    text = unit.text
    orp = max(unit.orp_offset, 0)
    return text[:orp], text[orp:orp + 1], text[orp + 1:]


def format_progress(current: int, total: int) -> str:
    """Progress label shown under the word, e.g. ``"12 / 250"``."""
    return "{} / {}".format(current, total)


class BaseRenderer(ABC):
    """Abstract base for all word renderers.

    To add a new renderer:
    1. Create a new file in renderers/
    2. Subclass BaseRenderer
    3. Implement render() and name
    4. Register in RENDERERS dict in renderers/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable renderer name, e.g. 'Terminal'."""

    @abstractmethod
    def render(self, unit: WordUnit) -> str:
        """Build the display string for one word unit."""
