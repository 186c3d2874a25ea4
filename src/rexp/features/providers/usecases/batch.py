"""Concurrent metadata collection for a whole listing.

Where: src/rexp/features/providers/usecases/batch.py
What: Fan provider queries for independent entries out over a thread pool.
Why: One slow git call should not serialize the refresh of every row.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import StrEnum

from rexp.platform.logging import logger
from rexp.shared import EntryLike

from .git_provider import GitMetadataProvider


DEFAULT_MAX_WORKERS = 8


class ProviderColumn(StrEnum):
    """Provider-backed columns a host can request."""

    SUMMARY = "summary"
    LANGUAGE = "language"
    MODIFIED = "modified"
    AUTHOR = "author"

    @property
    def heading(self) -> str:
        return _HEADINGS[self]


_HEADINGS: dict[ProviderColumn, str] = {
    ProviderColumn.SUMMARY: "Last commit",
    ProviderColumn.LANGUAGE: "Language",
    ProviderColumn.MODIFIED: "Modified",
    ProviderColumn.AUTHOR: "Author",
}


def column_query(
    provider: GitMetadataProvider, column: ProviderColumn
) -> Callable[[EntryLike], str]:
    """Return the provider operation backing ``column``."""

    return {
        ProviderColumn.SUMMARY: provider.commit_summary,
        ProviderColumn.LANGUAGE: provider.primary_language,
        ProviderColumn.MODIFIED: provider.last_modified_relative,
        ProviderColumn.AUTHOR: provider.last_author,
    }[column]


@dataclass(frozen=True, slots=True)
class EntryMetadata:
    """Provider values gathered for one entry."""

    entry: EntryLike
    values: dict[ProviderColumn, str] = field(default_factory=dict)

    def get(self, column: ProviderColumn) -> str:
        return self.values.get(column, "")


def collect_metadata(
    provider: GitMetadataProvider,
    entries: Sequence[EntryLike],
    columns: Sequence[ProviderColumn],
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
    executor_factory: Callable[[int], ThreadPoolExecutor] | None = None,
) -> list[EntryMetadata]:
    """Query ``columns`` for every entry, returning results in entry order.

    Raises:
        ProviderNotConfiguredError: If the provider has no settings yet.
        ValueError: If ``max_workers`` is below one.
    """
    _ = provider.settings
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")
    if not entries or not columns:
        return [EntryMetadata(entry=entry) for entry in entries]

    queries = [(column, column_query(provider, column)) for column in columns]

    def _collect(entry: EntryLike) -> EntryMetadata:
        return EntryMetadata(
            entry=entry,
            values={column: query(entry) for column, query in queries},
        )

    workers = min(max_workers, len(entries))
    started = time.monotonic()
    executor = (
        executor_factory(workers)
        if executor_factory
        else ThreadPoolExecutor(max_workers=workers, thread_name_prefix="rexp-provider")
    )
    with executor:
        results = list(executor.map(_collect, entries))

    logger.debug(
        "Collected %d column(s) for %d entries",
        len(columns),
        len(entries),
        extra={
            "provider_event": "listing.complete",
            "entries": len(entries),
            "duration_seconds": time.monotonic() - started,
        },
    )
    return results


__all__ = [
    "DEFAULT_MAX_WORKERS",
    "EntryMetadata",
    "ProviderColumn",
    "collect_metadata",
    "column_query",
]
