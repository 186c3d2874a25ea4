"""
Summary: Built-in display modules rendering one column of a listing row.
Why: Provide the default row layout that user scripts extend or replace.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from rexp.shared import Entry

from .icons import file_icon

DisplayModule = Callable[[Entry], str]

_SIZE_UNITS: Final[tuple[str, ...]] = ("KB", "MB", "GB", "TB")


def icon(entry: Entry) -> str:
    return file_icon(entry.name, is_dir=entry.is_dir)


def name(entry: Entry) -> str:
    return entry.name


def creation_date(entry: Entry) -> str:
    """Render like ``Mon Oct  5 14:03:09 2026`` (day padded to two columns)."""

    created = entry.created
    return f"{created:%a %b} {created.day:>2} {created:%H:%M:%S %Y}"


def size(entry: Entry) -> str:
    """Human-readable size using whole units; directories render empty."""

    if entry.is_dir:
        return ""
    if entry.size < 1024:
        return f"{entry.size:>3}  B"

    scaled = entry.size // 1024
    for unit in _SIZE_UNITS[:-1]:
        if scaled < 1024:
            return f"{scaled:>3} {unit}"
        scaled //= 1024
    return f"{scaled:>3} {_SIZE_UNITS[-1]}"


def _spacer(width: int) -> DisplayModule:
    padding = " " * width

    def spacer(_entry: Entry) -> str:
        return padding

    spacer.__name__ = f"spacer_{width}"
    return spacer


small_spacer: Final[DisplayModule] = _spacer(2)
medium_spacer: Final[DisplayModule] = _spacer(4)
large_spacer: Final[DisplayModule] = _spacer(8)


def default_display_modules(use_nerd_fonts: bool) -> list[DisplayModule]:
    """Row layout used until a script registers its own modules."""

    modules: list[DisplayModule] = []
    if use_nerd_fonts:
        modules.append(icon)
    modules.extend([name, small_spacer, creation_date, size, small_spacer])
    return modules


__all__ = [
    "DisplayModule",
    "creation_date",
    "default_display_modules",
    "icon",
    "large_spacer",
    "medium_spacer",
    "name",
    "size",
    "small_spacer",
]
