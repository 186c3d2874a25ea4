"""Where: src/rexp/ui/cli/commands/listing.py
What: Build the entry list for a path and gather its provider metadata.
Why: Keep filesystem traversal and provider wiring out of the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import final

from rexp.features.display import DisplayRegistry
from rexp.features.providers import (
    EntryMetadata,
    GitMetadataProvider,
    ProviderColumn,
    collect_metadata,
)
from rexp.features.theme import Theme, flavor_theme
from rexp.platform.logging import logger
from rexp.platform.process import ProcessBridge
from rexp.shared import Entry
from rexp.ui.cli.args.options import InfoArgs


@dataclass(frozen=True, slots=True)
class ListingRow:
    """Rendered row: built-in cells plus provider values."""

    entry: Entry
    cells: list[str]
    metadata: EntryMetadata


@dataclass(frozen=True, slots=True)
class Listing:
    """Everything the renderer needs for one invocation."""

    root: Path
    columns: tuple[ProviderColumn, ...]
    rows: list[ListingRow]
    theme: Theme


def list_entries(path: Path, *, show_hidden: bool = False) -> list[Entry]:
    """Entries of a directory (directories first, then by name) or the file itself."""

    if not path.is_dir():
        return [Entry.from_path(path)]

    entries: list[Entry] = []
    for child in path.iterdir():
        if not show_hidden and child.name.startswith("."):
            continue
        try:
            entries.append(Entry.from_path(child))
        except OSError as exc:
            logger.warning("Skipping %s: %s", child, exc)
    entries.sort(key=lambda entry: (not entry.is_dir, entry.name.lower()))
    return entries


@final
class ListingCommand:
    """Collect a ``Listing`` for ``rexp-info`` arguments."""

    def __init__(self, args: InfoArgs, provider: GitMetadataProvider | None = None) -> None:
        self._args: InfoArgs = args
        settings = args.settings
        self._provider: GitMetadataProvider = provider or GitMetadataProvider(
            settings.provider_settings,
            runner=ProcessBridge(timeout_seconds=settings.process_timeout_seconds),
        )
        theme = flavor_theme(settings.theme_flavor)
        self._registry: DisplayRegistry = DisplayRegistry(
            use_nerd_fonts=settings.nerd_fonts, theme=theme
        )

    @property
    def registry(self) -> DisplayRegistry:
        return self._registry

    def execute(self) -> Listing:
        args = self._args
        entries = list_entries(args.path, show_hidden=args.show_hidden)
        metadata = collect_metadata(
            self._provider,
            entries,
            args.columns,
            max_workers=args.settings.max_workers,
        )
        rows = [
            ListingRow(entry=entry, cells=self._registry.render_row(entry), metadata=meta)
            for entry, meta in zip(entries, metadata, strict=True)
        ]
        theme = self._registry.theme or flavor_theme(args.settings.theme_flavor)
        return Listing(root=args.path, columns=args.columns, rows=rows, theme=theme)


__all__ = ["Listing", "ListingCommand", "ListingRow", "list_entries"]
