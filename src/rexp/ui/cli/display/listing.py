"""Utilities for rendering a listing as a Rich table."""

from __future__ import annotations

from rich.color import Color
from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.table import Table
from rich.text import Text

from rexp.features.theme import Rgb, Theme
from rexp.ui.cli.commands.listing import Listing


def _color(rgb: Rgb) -> Color:
    return Color.from_rgb(rgb.r, rgb.g, rgb.b)


def build_table(listing: Listing) -> Table:
    """Build a table whose first column is the built-in row layout.

    Args:
        listing: Collected rows and provider columns.

    Returns:
        Table: Table styled with the listing theme.
    """
    theme: Theme = listing.theme
    base = Style(color=_color(theme.fg), bgcolor=_color(theme.bg))
    header = Style(color=_color(theme.selected.fg), bgcolor=_color(theme.selected.bg), bold=True)
    directory = Style(color=_color(theme.highlight), bgcolor=_color(theme.bg))

    table = Table(title=Text(str(listing.root)), style=base, header_style=header, box=None)
    table.add_column("Entry", no_wrap=True)
    for column in listing.columns:
        table.add_column(column.heading, overflow="ellipsis")

    for row in listing.rows:
        values = [Text(row.metadata.get(column)) for column in listing.columns]
        table.add_row(
            Text("".join(row.cells)),
            *values,
            style=directory if row.entry.is_dir else base,
        )
    return table


def render_listing(console: Console, listing: Listing) -> None:
    """Print ``listing`` to ``console``."""

    if not listing.rows:
        console.print(f"[dim]{escape(str(listing.root))} is empty[/dim]")
        return
    console.print(build_table(listing))


__all__ = ["build_table", "render_listing"]
