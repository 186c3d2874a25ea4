"""
Summary: Pure text normalization applied to raw command output.
Why: Keep truncation and payload parsing testable without spawning processes.
"""

from __future__ import annotations

import json
from typing import Any, Final

UNKNOWN: Final[str] = "Unknown"
CONTINUATION_MARKER: Final[str] = ".."
LANGUAGE_FIELD: Final[str] = "language"

_LINE_TERMINATORS: Final[dict[int, None]] = {ord("\n"): None, ord("\r"): None}


def strip_line_terminators(text: str) -> str:
    """Remove every ``\\n`` and ``\\r`` from ``text``, not only trailing ones."""

    return text.translate(_LINE_TERMINATORS)


def truncate(text: str, limit: int, marker: str = CONTINUATION_MARKER) -> str:
    """Cut ``text`` to ``limit`` characters plus ``marker`` when it is longer.

    Text that already fits is returned unchanged.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if len(text) > limit:
        return text[:limit] + marker
    return text


def extract_language(payload: str, default: str = UNKNOWN) -> str:
    """Pull the first non-empty ``language`` string out of a linguist JSON payload.

    ``github-linguist --json FILE`` nests the field under the file path key,
    so the search walks nested objects and arrays. Empty, malformed, or
    field-less payloads yield ``default``.
    """
    if not payload.strip():
        return default
    try:
        data = json.loads(payload)
    except ValueError:
        return default
    found = _find_field(data, LANGUAGE_FIELD)
    return found if found else default


def _find_field(node: Any, key: str) -> str | None:
    if isinstance(node, dict):
        value = node.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        children = node.values()
    elif isinstance(node, list):
        children = node
    else:
        return None

    for child in children:
        found = _find_field(child, key)
        if found:
            return found
    return None


__all__ = [
    "CONTINUATION_MARKER",
    "LANGUAGE_FIELD",
    "UNKNOWN",
    "extract_language",
    "strip_line_terminators",
    "truncate",
]
