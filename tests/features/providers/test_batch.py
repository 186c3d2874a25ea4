"""Tests for listing-wide metadata collection."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

import pytest

from rexp.features.providers import (
    GitMetadataProvider,
    ProviderColumn,
    collect_metadata,
)
from rexp.platform.process import ProcessOutcome, ProcessResult, to_argv
from rexp.shared import ProviderNotConfiguredError


class _PathEntry:
    def __init__(self, path: Path) -> None:
        self.path = path


class _EchoNameRunner:
    """Answers every query with the queried pathspec so results are traceable."""

    def __init__(self) -> None:
        self.threads: set[str] = set()

    def execute(self, command: Any, *, cwd: Path | None = None) -> ProcessResult:
        self.threads.add(threading.current_thread().name)
        argv = to_argv(command)
        target = argv[-1]
        stdout = f'{{"language": "{target}"}}' if "--json" in argv else f"{target}\n"
        return ProcessResult(args=argv, outcome=ProcessOutcome.OUTPUT, stdout=stdout, exit_code=0)


def _entries(tmp_path: Path, count: int) -> list[_PathEntry]:
    entries: list[_PathEntry] = []
    for index in range(count):
        path = tmp_path / f"file{index:02d}.txt"
        path.write_text("")
        entries.append(_PathEntry(path))
    return entries


def test_collect_preserves_entry_order(tmp_path: Path) -> None:
    runner = _EchoNameRunner()
    provider = GitMetadataProvider(runner=runner)
    _ = provider.configure(100)
    entries = _entries(tmp_path, 12)

    results = collect_metadata(
        provider,
        entries,
        [ProviderColumn.AUTHOR, ProviderColumn.LANGUAGE],
        max_workers=4,
    )

    assert [result.entry for result in results] == entries
    for index, result in enumerate(results):
        name = f"file{index:02d}.txt"
        assert result.get(ProviderColumn.AUTHOR) == name
        assert result.get(ProviderColumn.LANGUAGE) == name
        assert result.get(ProviderColumn.SUMMARY) == ""
    assert all(thread.startswith("rexp-provider") for thread in runner.threads)


def test_collect_applies_truncation(tmp_path: Path) -> None:
    provider = GitMetadataProvider(runner=_EchoNameRunner())
    _ = provider.configure(4)

    (result,) = collect_metadata(provider, _entries(tmp_path, 1), [ProviderColumn.SUMMARY])

    assert result.get(ProviderColumn.SUMMARY) == "file.."


def test_collect_requires_configuration(tmp_path: Path) -> None:
    provider = GitMetadataProvider(runner=_EchoNameRunner())

    with pytest.raises(ProviderNotConfiguredError):
        _ = collect_metadata(provider, _entries(tmp_path, 2), [ProviderColumn.AUTHOR])


def test_collect_rejects_zero_workers(tmp_path: Path) -> None:
    provider = GitMetadataProvider(runner=_EchoNameRunner())
    _ = provider.configure(4)

    with pytest.raises(ValueError):
        _ = collect_metadata(provider, _entries(tmp_path, 1), [ProviderColumn.AUTHOR], max_workers=0)


def test_collect_without_columns_runs_nothing(fake_runner: Any, tmp_path: Path) -> None:
    provider = GitMetadataProvider(runner=fake_runner)
    _ = provider.configure(4)
    entries = _entries(tmp_path, 3)

    results = collect_metadata(provider, entries, [])

    assert [result.values for result in results] == [{}, {}, {}]
    assert fake_runner.calls == []


def test_collect_uses_executor_factory(tmp_path: Path) -> None:
    provider = GitMetadataProvider(runner=_EchoNameRunner())
    _ = provider.configure(50)
    requested: list[int] = []

    def factory(workers: int) -> ThreadPoolExecutor:
        requested.append(workers)
        return ThreadPoolExecutor(max_workers=workers)

    _ = collect_metadata(
        provider,
        _entries(tmp_path, 3),
        [ProviderColumn.MODIFIED],
        max_workers=8,
        executor_factory=factory,
    )

    assert requested == [3]
