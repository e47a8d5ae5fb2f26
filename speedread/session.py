"""Reading session: wires an engine to a renderer, an output and preferences.

WHY: The engine exposes raw controls and notifications. A host needs the
controls a reader actually presses (play/pause toggle, faster, slower,
back, forward, restart, close) and somewhere for the words to go. This
module is that host layer for the CLI, and the place tests exercise the
host behaviour without a terminal.

HOW: ReadingSession subscribes to the engine's word/progress/complete
notifications, writes each rendered word to an output stream, and keeps
an asyncio future that resolves when the engine reports completion.

RULES:
- toggle() pauses while playing; otherwise it plays, rewinding to the
  first word when the text has been read to the end
- faster()/slower() step by WPM_STEP and persist through the preference
  store when one is given
- restart() and close() both stop (pause and rewind) without output
- A word already on screen is not drawn again when play resumes on it
- wait_complete() must be awaited on the same loop the engine uses
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional, TextIO

from speedread.config import SKIP_SMALL, WPM_STEP
from speedread.core.engine import PlaybackState, RSVPEngine
from speedread.core.units import WordUnit
from speedread.preferences import PreferenceStore
from speedread.renderers.base import BaseRenderer, format_progress

logger = logging.getLogger(__name__)

CLEAR_LINE = "\r\033[K"


class ReadingSession:
    """Host-side controller around one RSVPEngine.

    Args:
        engine: The engine to drive; its observers are taken over.
        renderer: Turns word units into display strings.
        output: Stream that receives rendered words (stdout by default).
        preferences: Optional store that rate changes are saved to.
        inplace: Redraw a single line instead of printing one line per word.
    """

    def __init__(
        self,
        engine: RSVPEngine,
        renderer: BaseRenderer,
        output: Optional[TextIO] = None,
        preferences: Optional[PreferenceStore] = None,
        inplace: bool = False,
    ) -> None:
        self.engine = engine
        self.renderer = renderer
        self.output = output if output is not None else sys.stdout
        self.preferences = preferences
        self.inplace = inplace
        self.words_shown = 0
        self._last_index: Optional[int] = None
        self.progress_label = format_progress(0, engine.get_word_count())
        self._done: Optional[asyncio.Future] = None

        engine.on_word(self._show_word)
        engine.on_progress(self._show_progress)
        engine.on_complete(self._finished)

    # ------------------------------------------------------------------
    # Engine notifications
    # ------------------------------------------------------------------

    def _show_word(self, unit: WordUnit) -> None:
        # Resuming or seeking re-announces the word already on screen.
        if unit.index == self._last_index:
            return
        self._last_index = unit.index
        self.words_shown += 1
        line = self.renderer.render(unit)
        if self.inplace:
            self.output.write(CLEAR_LINE + line)
        else:
            self.output.write(line + "\n")
        self.output.flush()

    def _show_progress(self, current: int, total: int) -> None:
        self.progress_label = format_progress(current, total)

    def _finished(self) -> None:
        self._last_index = None
        self.progress_label = format_progress(
            self.engine.get_word_count(), self.engine.get_word_count()
        )
        if self.inplace:
            self.output.write("\n")
            self.output.flush()
        logger.info("Finished reading %d words", self.engine.get_word_count())
        if self._done is not None and not self._done.done():
            self._done.set_result(None)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def toggle(self) -> None:
        if self.engine.is_playing:
            self.engine.pause()
            return
        if self.engine.state is PlaybackState.EXHAUSTED or self.engine.get_current_word() is None:
            self.engine.seek_to(0)
        self.engine.play()

    def faster(self) -> int:
        return self._change_rate(WPM_STEP)

    def slower(self) -> int:
        return self._change_rate(-WPM_STEP)

    def _change_rate(self, delta: int) -> int:
        wpm = self.engine.set_rate(self.engine.rate_wpm + delta)
        if self.preferences is not None:
            self.preferences.save_wpm(wpm)
        return wpm

    def back(self, count: int = SKIP_SMALL) -> int:
        return self.engine.skip(-count)

    def forward(self, count: int = SKIP_SMALL) -> int:
        return self.engine.skip(count)

    def restart(self) -> None:
        self.engine.stop()
        self._last_index = None

    def close(self) -> None:
        self.engine.stop()
        if self._done is not None and not self._done.done():
            self._done.cancel()

    def _arm(self) -> asyncio.Future:
        if self._done is None or self._done.done():
            self._done = asyncio.get_running_loop().create_future()
        return self._done

    async def wait_complete(self) -> None:
        """Wait until the engine reports the end of the text.

        Returns at once if the last run already completed; raises
        CancelledError if the session is closed first.
        """
        done = self._done if self._done is not None else self._arm()
        await done

    async def read(self, start: int = 0) -> None:
        """Play from ``start`` and return once the text has been read."""
        done = self._arm()
        if start:
            self.engine.seek_to(start)
        self.engine.play()
        await done
