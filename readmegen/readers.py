"""Defensive file readers that turn every failure into an absent value."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .logging import get_logger

_LOGGER = get_logger("readers")


def read_text(path: Path | str) -> str:
    """Return the file contents, or an empty string when it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.debug("Could not read %s: %s", path, exc)
        return ""


def read_json(path: Path | str) -> Optional[Dict[str, Any]]:
    """Return the parsed JSON object stored at ``path``.

    ``None`` is returned when the file is missing, unreadable, malformed or
    holds something other than an object. Callers cannot tell these cases
    apart.
    """
    text = read_text(path)
    if not text:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        _LOGGER.debug("Ignoring malformed JSON in %s: %s", path, exc)
        return None
    if isinstance(data, dict):
        return data
    _LOGGER.debug("Ignoring %s: top-level value is not an object", path)
    return None


__all__ = ["read_json", "read_text"]
