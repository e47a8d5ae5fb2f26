"""Text sources for the reader: files, standard input and a fallback text.

WHY: The engine only accepts a string. Somebody has to produce that
string; for the CLI that is a UTF-8 file, piped standard input, or a
built-in sample when nothing else is available.

HOW: load_text() reads a file, read_stdin() drains standard input,
resolve_text() picks between them the way the CLI needs.

RULES:
- Files must be UTF-8 encoded
- A file or stream with no non-whitespace content is an error (ValueError)
- Missing files raise FileNotFoundError; nothing is cleaned or extracted
- DEFAULT_TEXT is used only when no path is given and stdin is a TTY
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

DEFAULT_TEXT = (
    "Welcome to SpeedRead. Words appear one at a time, anchored on the "
    "letter your eye should rest on. Keep your gaze on the red letter "
    "and let the words come to you. Longer words, and the ends of "
    "sentences, stay on screen a little longer."
)


def load_text(path: str | Path) -> str:
    """Load reading material from a text file.

    Args:
        path: Path to a UTF-8 text file.

    Returns:
        The file content, unmodified.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file contains only whitespace.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError("Text file not found: {}".format(path))
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        raise ValueError("Text file has no words to read: {}".format(path))
    return text


def read_stdin(stream: Optional[TextIO] = None) -> str:
    """Read everything from ``stream`` (standard input by default)."""
    stream = stream if stream is not None else sys.stdin
    text = stream.read()
    if not text.strip():
        raise ValueError("Standard input has no words to read")
    return text


def resolve_text(path: Optional[str], stream: Optional[TextIO] = None) -> str:
    """Pick the text to read: explicit file, piped input, or DEFAULT_TEXT."""
    if path and path != "-":
        return load_text(path)
    stream = stream if stream is not None else sys.stdin
    if path == "-" or not stream.isatty():
        return read_stdin(stream)
    return DEFAULT_TEXT
