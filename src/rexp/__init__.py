"""rexp: metadata providers, process bridge, and themes for a terminal file explorer."""

__version__ = "0.1.0"
