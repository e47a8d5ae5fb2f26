"""Unit tests for the tokenizer, ORP rule and delay rule.

WHY: Timing is what makes RSVP readable. A wrong ORP bucket moves the
fixation mark; a wrong multiplier makes sentences run into each other.

HOW: Table-driven checks against the documented buckets and tiers, plus
the worked "The quick fox jumps." example.
"""

import pytest

from speedread.config import MAX_WPM, MIN_WPM
from speedread.core.timing import (
    length_multiplier,
    orp_offset,
    punctuation_multiplier,
    split_words,
    tokenize,
    word_delay,
)


class TestSplitWords:
    """Tokens are maximal non-whitespace runs."""

    @pytest.mark.parametrize("text, expected", [
        ("", []),
        ("   ", []),
        ("\n\t  \r\n", []),
        ("one", ["one"]),
        ("  one   two\tthree\nfour  ", ["one", "two", "three", "four"]),
        ("end. (quoted) \"x\"", ["end.", "(quoted)", "\"x\""]),
    ])
    def test_split(self, text, expected):
        assert split_words(text) == expected

    def test_punctuation_is_not_stripped(self):
        units = tokenize("Hello, world!", 300)
        assert [u.text for u in units] == ["Hello,", "world!"]


class TestOrpOffset:
    """Fixation index by trimmed length bucket."""

    @pytest.mark.parametrize("length, expected", [
        (0, 0), (1, 0), (2, 0), (3, 1), (5, 1), (6, 2),
        (9, 2), (10, 3), (13, 3), (14, 4), (50, 4),
    ])
    def test_buckets(self, length, expected):
        assert orp_offset("x" * length) == expected

    def test_measures_trimmed_length(self):
        assert orp_offset("  ab  ") == 0
        assert orp_offset("\tabc\n") == 1

    @pytest.mark.parametrize("length", range(1, 40))
    def test_offset_within_word(self, length):
        assert 0 <= orp_offset("y" * length) < length


class TestWordDelay:
    """Base time times one length tier times one punctuation class."""

    def test_base_delay(self):
        assert word_delay("fox", 300) == pytest.approx(200.0)
        assert word_delay("fox", 60) == pytest.approx(1000.0)

    @pytest.mark.parametrize("length, expected", [
        (8, 1.0), (9, 1.2), (12, 1.2), (13, 1.4), (30, 1.4),
    ])
    def test_length_tiers(self, length, expected):
        assert length_multiplier("w" * length) == expected

    def test_longest_tier_wins(self):
        # 13 letters must get 1.4, not 1.2 and not 1.2 * 1.4
        assert word_delay("a" * 13, 300) == pytest.approx(200.0 * 1.4)

    @pytest.mark.parametrize("word, expected", [
        ("end.", 1.8), ("what?", 1.8), ("wow!", 1.8),
        ("then,", 1.3), ("list;", 1.3), ("note:", 1.3), ("so\u2014", 1.3),
        ("said\"", 1.1), ("aside)", 1.1), ("set}", 1.1), ("array]", 1.1),
        ("plain", 1.0), ("(open", 1.0), ("mid.dle", 1.0), ("", 1.0),
    ])
    def test_punctuation_classes(self, word, expected):
        assert punctuation_multiplier(word) == expected

    def test_only_last_character_counts(self):
        assert punctuation_multiplier("end.)") == 1.1
        assert punctuation_multiplier("Mr.,") == 1.3

    def test_tiers_combine_with_punctuation(self):
        assert word_delay("extraordinarily.", 300) == pytest.approx(200.0 * 1.4 * 1.8)
        assert word_delay("wonderful,", 300) == pytest.approx(200.0 * 1.2 * 1.3)

    def test_monotonically_decreasing_in_rate(self):
        for word in ("a", "jumps.", "incomprehensibilities,"):
            delays = [word_delay(word, wpm) for wpm in range(MIN_WPM, MAX_WPM + 1, 25)]
            assert all(a > b for a, b in zip(delays, delays[1:]))

    def test_rate_is_clamped(self):
        assert word_delay("fox", 10) == word_delay("fox", MIN_WPM)
        assert word_delay("fox", 5000) == word_delay("fox", MAX_WPM)


class TestTokenize:
    """tokenize builds indexed, annotated units."""

    def test_worked_example(self):
        units = tokenize("The quick fox jumps.", 300)
        assert len(units) == 4
        assert units[0].text == "The"
        assert units[0].orp_offset == 1
        assert units[3].text == "jumps."
        assert units[3].orp_offset == 2
        assert units[3].delay_ms == pytest.approx(360.0)

    def test_indexes_are_positions(self):
        units = tokenize("a b c d e", 300)
        assert [u.index for u in units] == [0, 1, 2, 3, 4]

    def test_count_matches_runs(self):
        text = " alpha\n\nbeta  gamma\tdelta "
        assert len(tokenize(text, 300)) == 4

    @pytest.mark.parametrize("text", ["", " ", "\n\n\t"])
    def test_empty_input(self, text):
        assert tokenize(text, 300) == []

    def test_delay_seconds(self):
        unit = tokenize("jumps.", 300)[0]
        assert unit.delay_s == pytest.approx(0.36)
