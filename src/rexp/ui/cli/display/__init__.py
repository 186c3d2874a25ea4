"""Rich rendering helpers for the CLI."""

from rexp.ui.cli.display.listing import build_table, render_listing

__all__ = ["build_table", "render_listing"]
