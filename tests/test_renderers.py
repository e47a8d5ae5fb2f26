"""Unit tests for the renderer registry and renderers.

WHY: A renderer that slices the word one character off puts the red
fixation mark on the wrong letter, which defeats the whole technique.
"""

import pytest

from speedread.core.timing import tokenize
from speedread.core.units import WordUnit
from speedread.renderers import RENDERERS
from speedread.renderers.base import BaseRenderer, format_progress, split_at_orp
from speedread.renderers.html import HtmlRenderer
from speedread.renderers.terminal import ANSI_FOCUS, ANSI_RESET, TerminalRenderer


def _unit(text, orp):
    return WordUnit(text=text, orp_offset=orp, delay_ms=200.0, index=0)


class TestSplitAtOrp:
    """split_at_orp cuts around the fixation character."""

    @pytest.mark.parametrize("text, orp, expected", [
        ("a", 0, ("", "a", "")),
        ("The", 1, ("T", "h", "e")),
        ("jumps.", 2, ("ju", "m", "ps.")),
        ("", 0, ("", "", "")),
    ])
    def test_split(self, text, orp, expected):
        assert split_at_orp(_unit(text, orp)) == expected

    def test_parts_rebuild_the_word(self):
        for unit in tokenize("Incomprehensibilities abound, friend.", 300):
            assert "".join(split_at_orp(unit)) == unit.text


class TestHtmlRenderer:
    """Three spans, escaped."""

    def test_markup(self):
        html = HtmlRenderer().render(_unit("jumps.", 2))
        assert html == (
            '<span class="sr-word-before">ju</span>'
            '<span class="sr-word-orp">m</span>'
            '<span class="sr-word-after">ps.</span>'
        )

    def test_escapes_text(self):
        html = HtmlRenderer().render(_unit("<b>&", 1))
        assert "<b>" not in html
        assert "&lt;" in html
        assert "&amp;" in html


class TestTerminalRenderer:
    """Focus character lands in a fixed column."""

    def test_focus_column_is_stable(self):
        renderer = TerminalRenderer(focus_column=6, color=False)
        for unit in tokenize("a The jumps. extraordinarily", 300):
            line = renderer.render(unit)
            assert line[6] == unit.text[unit.orp_offset]

    def test_color_wraps_focus(self):
        line = TerminalRenderer(focus_column=0, color=True).render(_unit("The", 1))
        assert line == "T" + ANSI_FOCUS + "h" + ANSI_RESET + "e"

    def test_no_padding_when_prefix_longer_than_column(self):
        line = TerminalRenderer(focus_column=1, color=False).render(_unit("extraordinary", 3))
        assert line == "extraordinary"


class TestRegistry:
    """RENDERERS maps keys to constructible renderer classes."""

    def test_keys(self):
        assert set(RENDERERS) == {"terminal", "html"}

    @pytest.mark.parametrize("key", sorted(RENDERERS))
    def test_constructible(self, key):
        renderer = RENDERERS[key]()
        assert isinstance(renderer, BaseRenderer)
        assert renderer.name
        assert isinstance(renderer.render(_unit("word", 1)), str)


def test_format_progress():
    assert format_progress(12, 250) == "12 / 250"
