"""
Summary: Ports defining provider use case dependencies.
Why: Decouple providers from the concrete process bridge so tests stay hermetic.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from rexp.platform.process import ProcessResult


@runtime_checkable
class CommandRunnerPort(Protocol):
    """Port for running a read-only external command."""

    def execute(self, command: str | Sequence[str], *, cwd: Path | None = None) -> ProcessResult:
        """Run ``command`` to completion and return the captured result."""
        ...


__all__ = ["CommandRunnerPort"]
