"""Shared test fixtures for the speedread test suite.

WHY: Engine and session tests need deterministic time. Real asyncio
timers would make the suite slow and flaky, so tests drive the engine
through a fake timer loop whose clock only moves when told to.

HOW: FakeLoop implements the one method the engine uses,
``call_later(seconds, callback, *args)``, and keeps pending handles in a
list. advance() fires every handle that falls due, in time order.
Recorder collects word/progress/complete notifications.

RULES:
- FakeLoop(cancel_works=False) returns handles whose cancel() does
  nothing, to prove stale wake-ups are ignored on their own
- Times are seconds, matching asyncio's call_later
"""

from typing import Any, Callable, List, Tuple

import pytest

from speedread.core.engine import RSVPEngine


class FakeHandle:
    def __init__(self, when: float, callback: Callable, args: Tuple, cancel_works: bool) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False
        self._cancel_works = cancel_works

    def cancel(self) -> None:
        if self._cancel_works:
            self.cancelled = True


class FakeLoop:
    def __init__(self, cancel_works: bool = True) -> None:
        self.now = 0.0
        self.handles: List[FakeHandle] = []
        self.cancel_works = cancel_works

    def call_later(self, delay: float, callback: Callable, *args: Any) -> FakeHandle:
        handle = FakeHandle(self.now + delay, callback, args, self.cancel_works)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> List[FakeHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due handles in time order."""
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= target + 1e-9]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.now = max(self.now, handle.when)
            handle.fired = True
            handle.callback(*handle.args)
        self.now = target

    def run_until_idle(self, limit: int = 10_000) -> None:
        """Fire pending handles until none are left."""
        for _ in range(limit):
            pending = self.pending
            if not pending:
                return
            self.advance(min(h.when for h in pending) - self.now)
        raise AssertionError("timer loop did not go idle")


class Recorder:
    """Collects engine notifications in order."""

    def __init__(self, engine: RSVPEngine) -> None:
        self.events: List[Tuple[Any, ...]] = []
        engine.on_word(lambda unit: self.events.append(("word", unit.index, unit.text)))
        engine.on_progress(lambda current, total: self.events.append(("progress", current, total)))
        engine.on_complete(lambda: self.events.append(("complete",)))

    def of(self, kind: str) -> List[Tuple[Any, ...]]:
        return [e for e in self.events if e[0] == kind]

    @property
    def word_indexes(self) -> List[int]:
        return [e[1] for e in self.of("word")]

    def clear(self) -> None:
        self.events.clear()


SAMPLE_TEXT = "The quick fox jumps."
TEN_WORDS = "one two three four five six seven eight nine ten"


@pytest.fixture
def loop():
    return FakeLoop()


@pytest.fixture
def leaky_loop():
    return FakeLoop(cancel_works=False)


@pytest.fixture
def engine(loop):
    return RSVPEngine(rate_wpm=300, loop=loop)


@pytest.fixture
def recorder(engine):
    return Recorder(engine)
