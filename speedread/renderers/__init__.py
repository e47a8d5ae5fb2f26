"""Renderer registry.

HOW: RENDERERS maps string keys to renderer *classes* (not instances).
Callers instantiate as needed: ``renderer = RENDERERS["terminal"]()``.

RULES:
- Keys are snake_case identifiers (used by the CLI ``--renderer`` flag)
- Every renderer listed here must be constructible without arguments
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from speedread.renderers.html import HtmlRenderer
from speedread.renderers.terminal import TerminalRenderer

if TYPE_CHECKING:
    from speedread.renderers.base import BaseRenderer

RENDERERS: dict[str, type[BaseRenderer]] = {
    "terminal": TerminalRenderer,
    "html": HtmlRenderer,
}
