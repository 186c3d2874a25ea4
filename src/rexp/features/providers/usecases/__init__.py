"""Provider use cases: the git metadata provider and listing-wide collection."""

from __future__ import annotations

from .batch import DEFAULT_MAX_WORKERS, EntryMetadata, ProviderColumn, collect_metadata, column_query
from .git_provider import (
    GitMetadataProvider,
    ProviderQuery,
    ProviderSettings,
    create_provider,
)
from .ports import CommandRunnerPort

__all__ = [
    "CommandRunnerPort",
    "DEFAULT_MAX_WORKERS",
    "EntryMetadata",
    "GitMetadataProvider",
    "ProviderColumn",
    "ProviderQuery",
    "ProviderSettings",
    "collect_metadata",
    "column_query",
    "create_provider",
]
