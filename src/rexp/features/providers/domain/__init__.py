"""
Summary: Domain helpers for provider output normalization.
Why: Offer a stable import path for pure parsing utilities.
"""

from __future__ import annotations

from .normalize import (
    CONTINUATION_MARKER,
    UNKNOWN,
    extract_language,
    strip_line_terminators,
    truncate,
)

__all__ = [
    "CONTINUATION_MARKER",
    "UNKNOWN",
    "extract_language",
    "strip_line_terminators",
    "truncate",
]
