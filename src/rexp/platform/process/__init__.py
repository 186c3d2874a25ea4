"""External command execution used by metadata providers."""

from __future__ import annotations

from .bridge import (
    DEFAULT_BRIDGE,
    DEFAULT_TIMEOUT_SECONDS,
    ProcessBridge,
    ProcessOutcome,
    ProcessResult,
    run,
    to_argv,
)

__all__ = [
    "DEFAULT_BRIDGE",
    "DEFAULT_TIMEOUT_SECONDS",
    "ProcessBridge",
    "ProcessOutcome",
    "ProcessResult",
    "run",
    "to_argv",
]
