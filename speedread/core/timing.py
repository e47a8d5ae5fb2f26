"""Tokenizer with the fixation-point (ORP) and per-word delay rules.

WHY: A flat words-per-minute rate feels rushed on long words and at the
end of sentences. Readers keep up much better when long words and
clause/sentence boundaries stay on screen a little longer, and when each
word is anchored at its Optimal Recognition Point (slightly left of
center) instead of its first letter.

HOW: tokenize() splits on whitespace runs and builds one WordUnit per
token. orp_offset() is a fixed lookup by length bucket. word_delay()
multiplies the base per-word time (60000 / wpm) by one length tier and
one punctuation class.

RULES:
- A token is exactly a maximal non-whitespace run; nothing is stripped
- Measurements use the whitespace-trimmed word, ``text`` is never altered
- Length tiers are checked largest threshold first; only one applies
- Only the last character selects a punctuation class; only one applies
- Rates are clamped to [MIN_WPM, MAX_WPM] before computing delays
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from speedread.config import clamp_wpm
from speedread.core.units import WordUnit

MS_PER_MINUTE = 60_000

# (maximum trimmed length, ORP offset). Anything longer uses ORP_MAX_OFFSET.
ORP_BUCKETS: Sequence[Tuple[int, int]] = (
    (2, 0),
    (5, 1),
    (9, 2),
    (13, 3),
)
ORP_MAX_OFFSET = 4

# (length strictly greater than, multiplier), largest threshold first.
LENGTH_TIERS: Sequence[Tuple[int, float]] = (
    (12, 1.4),
    (8, 1.2),
)

# (trailing characters, multiplier), checked in order.
PUNCTUATION_CLASSES: Sequence[Tuple[str, float]] = (
    (".?!", 1.8),          # end of sentence
    (",;:\u2014", 1.3),     # clause break or em dash
    ("\")}]", 1.1),        # closing quote or bracket
)


def orp_offset(word: str) -> int:
    """Return the zero-based fixation index for ``word``.

    | trimmed length | offset |
    |----------------|--------|
    | 0-2            | 0      |
    | 3-5            | 1      |
    | 6-9            | 2      |
    | 10-13          | 3      |
    | 14+            | 4      |
    """
    length = len(word.strip())
    for max_length, offset in ORP_BUCKETS:
        if length <= max_length:
            return offset
    return ORP_MAX_OFFSET


def length_multiplier(word: str) -> float:
    length = len(word.strip())
    for threshold, multiplier in LENGTH_TIERS:
        if length > threshold:
            return multiplier
    return 1.0


def punctuation_multiplier(word: str) -> float:
    trimmed = word.strip()
    if not trimmed:
        return 1.0
    last = trimmed[-1]
    for chars, multiplier in PUNCTUATION_CLASSES:
        if last in chars:
            return multiplier
    return 1.0


def word_delay(word: str, rate_wpm: int) -> float:
    """Milliseconds ``word`` should stay on screen at ``rate_wpm``.

    Example: "jumps." at 300 wpm is 200 ms base, no length tier, and
    x1.8 for the full stop, so 360 ms.
    """
    base = MS_PER_MINUTE / clamp_wpm(rate_wpm)
    return base * length_multiplier(word) * punctuation_multiplier(word)


def split_words(text: str) -> List[str]:
    """Split ``text`` on any run of whitespace, dropping empty fragments."""
    if not text:
        return []
    return text.split()


def tokenize(text: str, rate_wpm: int) -> List[WordUnit]:
    """Turn raw text into an ordered list of annotated word units.

    Args:
        text: Any string; newlines, tabs and repeated spaces are all
              treated as separators.
        rate_wpm: Reading rate used for each unit's delay.

    Returns:
        One WordUnit per token, indexed from 0. Empty or all-whitespace
        input returns an empty list.
    """
    return [
        WordUnit(
            text=word,
            orp_offset=orp_offset(word),
            delay_ms=word_delay(word, rate_wpm),
            index=i,
        )
        for i, word in enumerate(split_words(text))
    ]
