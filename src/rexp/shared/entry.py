"""
Summary: Filesystem entry snapshot handed to providers and display modules.
Why: Give every per-row callable one read-only record instead of raw stat calls.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class EntryLike(Protocol):
    """Anything that exposes the filesystem path of a listed item."""

    @property
    def path(self) -> os.PathLike[str] | str:
        ...


@dataclass(frozen=True, slots=True)
class Entry:
    """A file or directory as seen by the listing that produced it.

    ``created`` is timezone-aware UTC.
    """

    path: Path
    name: str
    is_dir: bool
    created: datetime
    size: int

    @classmethod
    def from_path(cls, path: os.PathLike[str] | str) -> "Entry":
        """Build an entry from ``os.stat`` of ``path`` (symlinks are followed)."""

        resolved = Path(path)
        stat = resolved.stat()
        # st_birthtime only exists on macOS/BSD and recent Windows builds.
        created_ts = getattr(stat, "st_birthtime", None) or stat.st_ctime
        return cls(
            path=resolved,
            name=resolved.name or str(resolved),
            is_dir=resolved.is_dir(),
            created=datetime.fromtimestamp(created_ts, tz=UTC),
            size=stat.st_size,
        )


def entry_path(entry: EntryLike) -> Path:
    """Return ``entry.path`` as a ``Path``."""

    return Path(os.fspath(entry.path))


__all__ = ["Entry", "EntryLike", "entry_path"]
