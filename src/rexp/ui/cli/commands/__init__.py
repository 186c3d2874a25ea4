"""CLI command implementations."""

from rexp.ui.cli.commands.listing import Listing, ListingCommand, ListingRow, list_entries

__all__ = ["Listing", "ListingCommand", "ListingRow", "list_entries"]
