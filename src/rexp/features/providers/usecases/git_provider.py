"""Where: src/rexp/features/providers/usecases/git_provider.py
What: Version-control metadata provider queried once per listed entry.
Why: Translate an entry into display facts (summary, language, age, author).
Assumptions: - Settings are bound once before the first query; later reads need no lock.
Trade-offs: - Failures collapse to empty strings or "Unknown" for display, while the
  ``query_*`` variants keep the underlying ``ProcessResult`` for callers that care.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from rexp.platform.logging import logger
from rexp.platform.process import ProcessBridge, ProcessOutcome, ProcessResult
from rexp.shared import (
    EntryLike,
    InvalidSettingsError,
    ProviderAlreadyConfiguredError,
    ProviderNotConfiguredError,
    entry_path,
)

from ..domain.normalize import UNKNOWN, extract_language, strip_line_terminators, truncate
from .ports import CommandRunnerPort


GIT_EXECUTABLE: Final[str] = "git"
LINGUIST_EXECUTABLE: Final[str] = "github-linguist"


@dataclass(frozen=True, slots=True)
class ProviderSettings:
    """Immutable provider configuration."""

    limit: int

    def __post_init__(self) -> None:
        if not isinstance(self.limit, int) or isinstance(self.limit, bool):
            raise InvalidSettingsError(f"limit must be an integer, got {self.limit!r}")
        if self.limit < 0:
            raise InvalidSettingsError(f"limit must be >= 0, got {self.limit}")


@dataclass(frozen=True, slots=True)
class ProviderQuery:
    """Display value together with the process result it was derived from."""

    value: str
    result: ProcessResult

    @property
    def ok(self) -> bool:
        return self.result.outcome is ProcessOutcome.OUTPUT


class GitMetadataProvider:
    """Derive per-entry facts from ``git log`` and ``github-linguist``."""

    def __init__(
        self,
        settings: ProviderSettings | None = None,
        *,
        runner: CommandRunnerPort | None = None,
        git_executable: str = GIT_EXECUTABLE,
        linguist_executable: str = LINGUIST_EXECUTABLE,
    ) -> None:
        self._settings: ProviderSettings | None = settings
        self._runner: CommandRunnerPort = runner if runner is not None else ProcessBridge()
        self._git: str = git_executable
        self._linguist: str = linguist_executable
        self._configure_lock: Final[threading.Lock] = threading.Lock()

    def configure(self, limit: int) -> ProviderSettings:
        """Bind the truncation limit for the provider's lifetime.

        Raises:
            ProviderAlreadyConfiguredError: If settings were already bound.
            InvalidSettingsError: If ``limit`` is negative or not an integer.
        """
        with self._configure_lock:
            if self._settings is not None:
                raise ProviderAlreadyConfiguredError(
                    f"provider already configured with limit={self._settings.limit}"
                )
            self._settings = ProviderSettings(limit=limit)
        logger.debug("Metadata provider configured with limit=%d", limit)
        return self._settings

    @property
    def is_configured(self) -> bool:
        return self._settings is not None

    @property
    def settings(self) -> ProviderSettings:
        settings = self._settings
        if settings is None:
            raise ProviderNotConfiguredError("configure() must be called before querying")
        return settings

    # Display operations --------------------------------------------------

    def commit_summary(self, entry: EntryLike) -> str:
        """Subject of the latest commit touching the entry, cut to the limit."""
        return self.query_commit_summary(entry).value

    def primary_language(self, entry: EntryLike) -> str:
        """Language detected by linguist, or ``"Unknown"``."""
        return self.query_primary_language(entry).value

    def last_modified_relative(self, entry: EntryLike) -> str:
        """Relative age of the latest commit touching the entry ("3 days ago")."""
        return self.query_last_modified_relative(entry).value

    def last_author(self, entry: EntryLike) -> str:
        """Author name of the latest commit touching the entry."""
        return self.query_last_author(entry).value

    # Detailed operations -------------------------------------------------

    def query_commit_summary(self, entry: EntryLike) -> ProviderQuery:
        limit = self.settings.limit
        result = self._git_log(entry, "--pretty=format:%s")
        summary = strip_line_terminators(result.text)
        return ProviderQuery(value=truncate(summary, limit), result=result)

    def query_primary_language(self, entry: EntryLike) -> ProviderQuery:
        _ = self.settings
        cwd, target = _locate(entry_path(entry))
        result = self._runner.execute([self._linguist, "--json", target], cwd=cwd)
        language = extract_language(result.text)
        if language == UNKNOWN and result.outcome is ProcessOutcome.OUTPUT:
            logger.debug(
                "No language field in linguist output for %s",
                target,
                extra={
                    "provider_event": "provider.language.unparsable",
                    "entry_path": str(entry_path(entry)),
                },
            )
        return ProviderQuery(value=language, result=result)

    def query_last_modified_relative(self, entry: EntryLike) -> ProviderQuery:
        _ = self.settings
        result = self._git_log(entry, "--format=%cd", "--date=relative")
        return ProviderQuery(value=strip_line_terminators(result.text), result=result)

    def query_last_author(self, entry: EntryLike) -> ProviderQuery:
        _ = self.settings
        result = self._git_log(entry, "--format=%an")
        return ProviderQuery(value=strip_line_terminators(result.text), result=result)

    def _git_log(self, entry: EntryLike, *options: str) -> ProcessResult:
        cwd, target = _locate(entry_path(entry))
        argv = [self._git, "--literal-pathspecs", "log", "-1", *options, "--", target]
        return self._runner.execute(argv, cwd=cwd)


def _locate(path: Path) -> tuple[Path | None, str]:
    """Pick the working directory and pathspec used to query ``path``.

    Commands run inside the entry's directory so git discovers the enclosing
    repository even when the host's own cwd lies elsewhere.
    """
    absolute = path.absolute()
    if absolute.is_dir():
        return absolute, "."
    if absolute.parent.is_dir():
        return absolute.parent, absolute.name
    return None, str(path)


def create_provider(
    limit: int,
    *,
    timeout_seconds: float | None = None,
    runner: CommandRunnerPort | None = None,
) -> GitMetadataProvider:
    """Build a configured provider backed by a fresh ``ProcessBridge``."""

    if runner is None:
        runner = (
            ProcessBridge(timeout_seconds=timeout_seconds)
            if timeout_seconds is not None
            else ProcessBridge()
        )
    provider = GitMetadataProvider(runner=runner)
    _ = provider.configure(limit)
    return provider


__all__ = [
    "GIT_EXECUTABLE",
    "GitMetadataProvider",
    "LINGUIST_EXECUTABLE",
    "ProviderQuery",
    "ProviderSettings",
    "create_provider",
]
