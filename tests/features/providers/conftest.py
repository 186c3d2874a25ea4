"""Shared fakes for provider tests."""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from rexp.platform.process import ProcessOutcome, ProcessResult, to_argv


def make_result(
    stdout: str = "",
    *,
    outcome: ProcessOutcome | None = None,
    exit_code: int | None = 0,
) -> ProcessResult:
    """Build a ``ProcessResult`` the way the bridge would classify it."""

    if outcome is None:
        outcome = ProcessOutcome.OUTPUT if stdout else ProcessOutcome.EMPTY
    return ProcessResult(args=("fake",), outcome=outcome, stdout=stdout, exit_code=exit_code)


def query_kind(argv: Sequence[str]) -> str:
    """Classify a provider command by the fact it asks for."""

    if "--json" in argv:
        return "language"
    if "--format=%an" in argv:
        return "author"
    if "--format=%cd" in argv:
        return "modified"
    if "--pretty=format:%s" in argv:
        return "summary"
    raise AssertionError(f"unexpected command: {argv}")


class FakeRunner:
    """Command runner returning canned results keyed by query kind."""

    def __init__(self, responses: dict[str, ProcessResult] | None = None) -> None:
        self.responses: dict[str, ProcessResult] = responses or {}
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []
        self._lock = threading.Lock()

    def execute(self, command: str | Sequence[str], *, cwd: Path | None = None) -> ProcessResult:
        argv = to_argv(command)
        with self._lock:
            self.calls.append((argv, cwd))
        return self.responses.get(query_kind(argv), make_result())


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def result_factory() -> Callable[..., ProcessResult]:
    return make_result
