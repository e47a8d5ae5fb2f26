"""HTML fragment renderer for browser overlays.

WHY: A web host (extension overlay, local web page) only needs three
spans per word; styling the fixation character red is left to its CSS.

RULES:
- Class names: sr-word-before, sr-word-orp, sr-word-after
- All three parts are HTML-escaped; the spans are always present
"""

from __future__ import annotations

import html

from speedread.core.units import WordUnit
from speedread.renderers.base import BaseRenderer, split_at_orp


class HtmlRenderer(BaseRenderer):
    """Renders a word as three adjacent spans."""

    @property
    def name(self) -> str:
        return "HTML"

    def render(self, unit: WordUnit) -> str:
        before, focus, after = split_at_orp(unit)
        return (
            '<span class="sr-word-before">{}</span>'
            '<span class="sr-word-orp">{}</span>'
            '<span class="sr-word-after">{}</span>'
        ).format(html.escape(before), html.escape(focus), html.escape(after))
