"""Shared value objects used across features."""

from __future__ import annotations

from .entry import Entry, EntryLike, entry_path
from .errors import (
    ConfigError,
    DisplayModuleError,
    InvalidSettingsError,
    ProviderAlreadyConfiguredError,
    ProviderNotConfiguredError,
    RexpError,
    ThemeError,
)

__all__ = [
    "ConfigError",
    "DisplayModuleError",
    "Entry",
    "EntryLike",
    "InvalidSettingsError",
    "ProviderAlreadyConfiguredError",
    "ProviderNotConfiguredError",
    "RexpError",
    "ThemeError",
    "entry_path",
]
