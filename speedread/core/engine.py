"""RSVP playback engine: a timer-driven state machine over word units.

WHY: Playback has to honor play/pause/stop/seek/skip and rate changes at
any moment, while a wake-up for the current word may already be pending.
A wake-up that fires after the user paused or jumped must do nothing:
no duplicate word, no double advance.

HOW: RSVPEngine owns the sequence, the cursor and at most one pending
timer handle obtained from a timer loop (anything with
``call_later(seconds, callback)`` returning a handle with ``cancel()``;
an asyncio event loop is the default). Each scheduled wake-up carries the
generation number it was scheduled under. Every transition that
invalidates the pending wait cancels the handle and bumps the generation,
so a wake-up that still fires sees a stale generation and returns.

RULES:
- States: IDLE, PLAYING, EXHAUSTED (cursor == len, reached by playing)
- play() is a no-op while PLAYING; otherwise it ticks immediately
- A tick emits word + progress for the cursor and schedules the next
  wake-up, or emits complete exactly once when the cursor is past the end
- pause()/stop() emit nothing; stop() also rewinds the cursor to 0
- seek_to()/skip() clamp into [0, len - 1] (0 when empty), emit word +
  progress, keep ``playing`` as it was and restart the wait when playing
- set_rate() recomputes every delay; it never touches cursor or timers
- No control method raises for out-of-range input
- Not thread-safe: call everything from the loop's thread
"""

from __future__ import annotations

import asyncio
import enum
import logging
import math
from dataclasses import replace
from typing import Any, Callable, List, Optional, Tuple

from speedread.config import DEFAULT_WPM, clamp_wpm
from speedread.core.timing import tokenize, word_delay
from speedread.core.units import WordUnit

logger = logging.getLogger(__name__)

WordCallback = Callable[[WordUnit], Any]
ProgressCallback = Callable[[int, int], Any]
CompleteCallback = Callable[[], Any]


class PlaybackState(str, enum.Enum):
    """Observable playback state of an RSVPEngine."""

    IDLE = "idle"
    PLAYING = "playing"
    EXHAUSTED = "exhausted"


class RSVPEngine:
    """Presents a tokenized text one word at a time.

    Args:
        rate_wpm: Initial reading rate; clamped to [MIN_WPM, MAX_WPM].
                  Defaults to DEFAULT_WPM.
        loop: Timer loop used for wake-ups. When omitted, the running
              asyncio loop is looked up the first time a wake-up is
              scheduled.
    """

    def __init__(self, rate_wpm: Optional[int] = None, loop: Any = None) -> None:
        self._rate_wpm = clamp_wpm(DEFAULT_WPM if rate_wpm is None else rate_wpm)
        self._loop = loop
        self._words: List[WordUnit] = []
        self._cursor = 0
        self._playing = False
        self._exhausted = False
        self._timer: Any = None
        self._generation = 0
        self._on_word: Optional[WordCallback] = None
        self._on_progress: Optional[ProgressCallback] = None
        self._on_complete: Optional[CompleteCallback] = None

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def rate_wpm(self) -> int:
        return self._rate_wpm

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def words(self) -> Tuple[WordUnit, ...]:
        """Snapshot of the current sequence."""
        return tuple(self._words)

    @property
    def state(self) -> PlaybackState:
        if self._playing:
            return PlaybackState.PLAYING
        if self._exhausted:
            return PlaybackState.EXHAUSTED
        return PlaybackState.IDLE

    def get_current_word(self) -> Optional[WordUnit]:
        """The unit at the cursor, or None when past the end."""
        if self._cursor >= len(self._words):
            return None
        return self._words[self._cursor]

    def get_word_count(self) -> int:
        return len(self._words)

    def get_progress(self) -> float:
        """Percentage of the sequence already passed (0.0 when empty)."""
        if not self._words:
            return 0.0
        return self._cursor / len(self._words) * 100

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def on_word(self, callback: Optional[WordCallback]) -> None:
        """Subscribe to word notifications, replacing any previous callback."""
        self._on_word = callback

    def on_progress(self, callback: Optional[ProgressCallback]) -> None:
        """Subscribe to ``(current_index, total)`` progress notifications."""
        self._on_progress = callback

    def on_complete(self, callback: Optional[CompleteCallback]) -> None:
        """Subscribe to the end-of-sequence notification."""
        self._on_complete = callback

    # ------------------------------------------------------------------
    # Text and rate
    # ------------------------------------------------------------------

    def tokenize(self, text: str) -> List[WordUnit]:
        """Replace the sequence with ``text`` split into word units.

        Rewinds the cursor to 0 and leaves the engine IDLE; playback of
        the previous text, if any, is cancelled.
        """
        self._invalidate_wait()
        self._playing = False
        self._exhausted = False
        self._words = tokenize(text, self._rate_wpm)
        self._cursor = 0
        logger.debug("Tokenized %d words at %d wpm", len(self._words), self._rate_wpm)
        return list(self._words)

    def set_rate(self, wpm: int) -> int:
        """Change the reading rate and recompute every unit's delay.

        The wait already in flight keeps its duration; the new delays
        apply from the next tick on. Returns the clamped rate.
        """
        self._rate_wpm = clamp_wpm(wpm, self._rate_wpm)
        self._words = [
            replace(unit, delay_ms=word_delay(unit.text, self._rate_wpm))
            for unit in self._words
        ]
        logger.debug("Rate set to %d wpm", self._rate_wpm)
        return self._rate_wpm

    # ------------------------------------------------------------------
    # Playback controls
    # ------------------------------------------------------------------

    def play(self) -> None:
        if self._playing:
            return
        if self._cursor < len(self._words):
            # Fail before any notification if there is no loop to wait on.
            self._timer_loop()
        self._playing = True
        self._exhausted = False
        logger.debug("Play from word %d of %d", self._cursor, len(self._words))
        self._tick()

    def pause(self) -> None:
        if not self._playing:
            return
        self._invalidate_wait()
        self._playing = False
        logger.debug("Paused at word %d", self._cursor)

    def stop(self) -> None:
        """Pause and rewind to the first word, without notifying."""
        self.pause()
        self._cursor = 0
        self._exhausted = False
        logger.debug("Stopped")

    def seek_to(self, index: int) -> int:
        """Jump to ``index`` (clamped) and show that word immediately.

        Returns the cursor actually selected.
        """
        self._cursor = self._clamp_index(index)
        self._exhausted = False
        self._invalidate_wait()
        generation = self._generation
        self._display_current()
        if self._playing and self._words and generation == self._generation:
            self._schedule(self._words[self._cursor])
        return self._cursor

    def skip(self, delta: int) -> int:
        try:
            step = float(delta)
        except (TypeError, ValueError, OverflowError):
            step = 0.0
        return self.seek_to(self._cursor + step)

    def _clamp_index(self, index) -> int:
        """Clamp any requested index into [0, len - 1] (0 when empty).

        Infinities clamp to the ends; NaN or a non-number keeps the cursor.
        """
        last = max(len(self._words) - 1, 0)
        try:
            target = float(index)
        except (TypeError, ValueError, OverflowError):
            return min(self._cursor, last)
        if math.isnan(target):
            return min(self._cursor, last)
        return int(max(0.0, min(target, float(last))))

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _tick(self) -> None:
        if self._cursor >= len(self._words):
            self._cursor = len(self._words)
            self._playing = False
            self._exhausted = True
            self._timer = None
            logger.debug("Reached end of %d words", len(self._words))
            if self._on_complete is not None:
                self._on_complete()
            return

        generation = self._generation
        self._display_current()
        # An observer may have paused or jumped during the notification.
        if self._playing and generation == self._generation:
            self._schedule(self._words[self._cursor])

    def _schedule(self, word: WordUnit) -> None:
        generation = self._generation
        self._timer = self._timer_loop().call_later(word.delay_s, self._wake, generation)

    def _wake(self, generation: int) -> None:
        if generation != self._generation or not self._playing:
            return
        self._timer = None
        self._cursor += 1
        self._tick()

    def _invalidate_wait(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _display_current(self) -> None:
        word = self.get_current_word()
        if word is not None and self._on_word is not None:
            self._on_word(word)
        if self._on_progress is not None:
            self._on_progress(self._cursor, len(self._words))

    def _timer_loop(self) -> Any:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop
