"""Command-line interface for the SpeedRead RSVP reader.

WHY: The quickest way to speed read a text file is straight from the
terminal. The CLI wires together the text source, the stored rate
preference, the engine and a renderer behind a single command.

HOW: Uses argparse to accept an optional input file and playback
options, resolves the reading rate (explicit --wpm, else the stored
preference), then runs the reading session on an asyncio loop via
asyncio.run(). Words go to stdout; status messages go to stderr.

RULES:
- Positional argument: input text file; "-" or a pipe reads stdin;
  nothing at all on a TTY reads the built-in sample text
- --wpm overrides the stored preference; --save-wpm persists it
- --start jumps to a word index before playing (clamped like seek_to)
- Status output goes to stderr (not stdout)
- Exit codes: 0 success, 1 bad input, 130 interrupted
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from speedread import __version__
from speedread.config import MAX_WPM, MIN_WPM
from speedread.core.engine import RSVPEngine
from speedread.preferences import PreferenceStore
from speedread.renderers import RENDERERS
from speedread.renderers.terminal import TerminalRenderer
from speedread.session import ReadingSession
from speedread.sources import resolve_text

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speedread",
        description="Read a text one word at a time (RSVP), anchored on each "
                    "word's optimal recognition point.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Text file to read. Use '-' for standard input.",
    )

    parser.add_argument(
        "--wpm",
        type=int,
        default=None,
        help="Reading rate in words per minute ({}-{}). "
             "Default: the saved preference.".format(MIN_WPM, MAX_WPM),
    )

    parser.add_argument(
        "--save-wpm",
        action="store_true",
        help="Remember the --wpm value for future sessions.",
    )

    parser.add_argument(
        "--start",
        type=int,
        default=0,
        help="Word index to start reading from (default: %(default)s).",
    )

    parser.add_argument(
        "--renderer",
        choices=sorted(RENDERERS.keys()),
        default="terminal",
        help="How each word is drawn (default: %(default)s).",
    )

    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Highlight the focus letter with ANSI colors (default: %(default)s).",
    )

    parser.add_argument(
        "--preferences",
        default=None,
        help="Path to the preferences JSON file.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log engine transitions to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def _make_renderer(args: argparse.Namespace):
    if args.renderer == "terminal":
        return TerminalRenderer(color=args.color)
    return RENDERERS[args.renderer]()


async def _read(session: ReadingSession, start: int) -> None:
    try:
        await session.read(start=start)
    finally:
        session.close()


def run(args: argparse.Namespace) -> int:
    """Run one reading session for parsed arguments; returns the exit code."""
    try:
        text = resolve_text(args.input_file)
    except (FileNotFoundError, ValueError) as exc:
        _status("Error: {}".format(exc))
        return 1

    preferences = PreferenceStore(args.preferences)
    if args.save_wpm and args.wpm is None:
        _status("Warning: --save-wpm has no effect without --wpm; keeping the saved rate")
    if args.wpm is not None:
        wpm = args.wpm
        if args.save_wpm:
            wpm = preferences.save_wpm(wpm)
    else:
        wpm = preferences.load_wpm()

    engine = RSVPEngine(rate_wpm=wpm)
    engine.tokenize(text)
    _status("Reading {} words at {} wpm".format(engine.get_word_count(), engine.rate_wpm))

    session = ReadingSession(
        engine,
        _make_renderer(args),
        output=sys.stdout,
        inplace=args.renderer == "terminal" and sys.stdout.isatty(),
    )
    try:
        asyncio.run(_read(session, args.start))
    except KeyboardInterrupt:
        _status("\nStopped at word {} of {}".format(engine.cursor, engine.get_word_count()))
        return 130

    _status("Done: {} words shown ({})".format(session.words_shown, session.progress_label))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``python -m speedread`` and the ``speedread`` script.

    argv=None means use sys.argv; an explicit list is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
