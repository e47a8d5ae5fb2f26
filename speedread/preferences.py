"""Persisted reading-rate preference.

WHY: Readers settle on a rate and expect it back next session. The
engine deliberately knows nothing about persistence, so the host keeps
the rate in a small JSON file and hands it to the engine on startup.

HOW: PreferenceStore reads and writes ``{"wpm": <int>}`` in a JSON file.
Loaded documents are validated with jsonschema before use.

RULES:
- A missing, unreadable or invalid file means "no preference": load_wpm()
  returns DEFAULT_WPM and logs a warning (missing is not a warning)
- Stored rates are always clamped to [MIN_WPM, MAX_WPM]
- Unknown keys already in the file are preserved on save
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema

from speedread.config import DEFAULT_WPM, PREFERENCES_PATH, clamp_wpm

logger = logging.getLogger(__name__)

PREFERENCES_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "wpm": {"type": "number"},
    },
}


class PreferenceStore:
    """JSON-file backed store for the reading rate."""

    def __init__(self, path: Optional[str | Path] = None) -> None:
        self.path = Path(path) if path is not None else PREFERENCES_PATH

    def _read(self) -> Dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            jsonschema.validate(instance=data, schema=PREFERENCES_SCHEMA)
        except (OSError, ValueError, jsonschema.ValidationError) as exc:
            logger.warning("Ignoring invalid preferences file %s: %s", self.path, exc)
            return {}
        return data

    def load_wpm(self) -> int:
        data = self._read()
        if "wpm" not in data:
            return DEFAULT_WPM
        return clamp_wpm(data["wpm"])

    def save_wpm(self, wpm: int) -> int:
        """Clamp and persist ``wpm``; returns the stored value."""
        data = self._read()
        data["wpm"] = clamp_wpm(wpm)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.info("Saved reading rate %d wpm to %s", data["wpm"], self.path)
        return data["wpm"]

    def change_wpm(self, delta: int) -> int:
        return self.save_wpm(self.load_wpm() + delta)
