"""Where: src/rexp/platform/process/bridge.py
What: Synchronous runner for read-only external query commands.
Why: Give providers one best-effort seam for git and linguist invocations.
Assumptions: - Arguments originate from the host's own directory traversal and are
  passed verbatim as an argument vector; no shell is involved.
Trade-offs: - ``run`` does not inspect the exit status. Callers needing the
  distinction use ``execute`` and read ``ProcessResult.outcome``.
"""

from __future__ import annotations

import os
import shlex
import subprocess
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

from rexp.platform.logging import logger


DEFAULT_TIMEOUT_SECONDS: Final[float] = 5.0


class ProcessOutcome(StrEnum):
    """How a single invocation ended."""

    OUTPUT = "output"
    EMPTY = "empty"
    SPAWN_FAILURE = "spawn_failure"
    NON_ZERO_EXIT = "non_zero_exit"
    TIMEOUT = "timeout"


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Captured result of one external command."""

    args: tuple[str, ...]
    outcome: ProcessOutcome
    stdout: str = ""
    stderr: str = ""
    exit_code: int | None = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """True when the command started and exited with status zero."""
        return self.outcome in (ProcessOutcome.OUTPUT, ProcessOutcome.EMPTY)

    @property
    def text(self) -> str:
        """Best-effort stdout, regardless of exit status."""
        return self.stdout

    @property
    def command_line(self) -> str:
        return shlex.join(self.args)


def to_argv(command: str | Sequence[str]) -> tuple[str, ...]:
    """Normalize a command string or argument sequence into an argv tuple.

    Raises:
        ValueError: If the command is empty.
    """
    if isinstance(command, str):
        argv = tuple(shlex.split(command))
    else:
        argv = tuple(str(arg) for arg in command)
    if not argv:
        raise ValueError("command must not be empty")
    return argv


class ProcessBridge:
    """Run one external command at a time and capture its standard output."""

    def __init__(
        self,
        *,
        timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._timeout: float | None = timeout_seconds
        # Overrides are layered on the inherited environment.
        self._env: dict[str, str] | None = {**os.environ, **env} if env else None

    @property
    def timeout_seconds(self) -> float | None:
        return self._timeout

    def run(self, command: str | Sequence[str], *, cwd: Path | None = None) -> str:
        """Return the command's stdout, or an empty string when nothing was produced."""

        return self.execute(command, cwd=cwd).text

    def execute(self, command: str | Sequence[str], *, cwd: Path | None = None) -> ProcessResult:
        """Run ``command`` to completion and classify the result."""

        argv = to_argv(command)
        started = time.monotonic()

        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                env=self._env,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug(
                "Command timed out: %s",
                shlex.join(argv),
                extra={
                    "provider_event": "process.timeout",
                    "command": argv[0],
                    "timeout_seconds": self._timeout,
                    "entry_path": str(cwd) if cwd else None,
                },
            )
            return ProcessResult(
                args=argv,
                outcome=ProcessOutcome.TIMEOUT,
                duration_ms=_elapsed_ms(started),
            )
        except OSError as exc:
            logger.debug(
                "Cannot start command %s: %s",
                shlex.join(argv),
                exc,
                extra={
                    "provider_event": "process.spawn_failure",
                    "command": argv[0],
                    "error_message": exc.strerror or str(exc),
                },
            )
            return ProcessResult(
                args=argv,
                outcome=ProcessOutcome.SPAWN_FAILURE,
                stderr=str(exc),
                duration_ms=_elapsed_ms(started),
            )

        stdout = completed.stdout or ""
        if completed.returncode != 0:
            outcome = ProcessOutcome.NON_ZERO_EXIT
            logger.debug(
                "Command exited with status %d: %s",
                completed.returncode,
                shlex.join(argv),
                extra={
                    "provider_event": "process.non_zero_exit",
                    "command": argv[0],
                    "exit_code": completed.returncode,
                    "entry_path": str(cwd) if cwd else None,
                },
            )
        elif stdout:
            outcome = ProcessOutcome.OUTPUT
        else:
            outcome = ProcessOutcome.EMPTY

        return ProcessResult(
            args=argv,
            outcome=outcome,
            stdout=stdout,
            stderr=completed.stderr or "",
            exit_code=completed.returncode,
            duration_ms=_elapsed_ms(started),
        )


def _elapsed_ms(started: float) -> float:
    return (time.monotonic() - started) * 1000.0


DEFAULT_BRIDGE = ProcessBridge()


def run(command: str | Sequence[str], *, cwd: Path | None = None) -> str:
    """Run ``command`` on the shared bridge and return its stdout."""

    return DEFAULT_BRIDGE.run(command, cwd=cwd)


__all__ = [
    "DEFAULT_BRIDGE",
    "DEFAULT_TIMEOUT_SECONDS",
    "ProcessBridge",
    "ProcessOutcome",
    "ProcessResult",
    "run",
    "to_argv",
]
