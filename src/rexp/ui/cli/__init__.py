"""Command line interface for rexp."""
