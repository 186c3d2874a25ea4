"""Metadata provider feature exports.

Where: src/rexp/features/providers/__init__.py
What: Re-export the provider contract, settings, and listing collector.
Why: Hosts import one path regardless of the internal domain/usecase split.
"""

from __future__ import annotations

from .domain import CONTINUATION_MARKER, UNKNOWN, extract_language, strip_line_terminators, truncate
from .usecases import (
    CommandRunnerPort,
    EntryMetadata,
    GitMetadataProvider,
    ProviderColumn,
    ProviderQuery,
    ProviderSettings,
    collect_metadata,
    create_provider,
)

__all__ = [
    "CONTINUATION_MARKER",
    "CommandRunnerPort",
    "EntryMetadata",
    "GitMetadataProvider",
    "ProviderColumn",
    "ProviderQuery",
    "ProviderSettings",
    "UNKNOWN",
    "collect_metadata",
    "create_provider",
    "extract_language",
    "strip_line_terminators",
    "truncate",
]
