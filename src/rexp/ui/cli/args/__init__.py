"""Command line argument handling package."""

from rexp.ui.cli.args.options import InfoArgs
from rexp.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "InfoArgs"]
