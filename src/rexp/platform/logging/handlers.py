"""Where: src/rexp/platform/logging/handlers.py
What: Rich console handler that renders structured provider events.
Why: Keep hot-path log calls terse while the console shows readable summaries.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ProviderRichHandler(RichHandler):
    """Rich handler with compact rendering for process and listing events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "process.spawn_failure": ("⛔", "red"),
        "process.non_zero_exit": ("↪️", "yellow"),
        "process.timeout": ("⏱️", "red"),
        "provider.language.unparsable": ("ℹ️", "yellow"),
        "listing.complete": ("✅", "green"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments."""

        pure_path: PurePath = (
            PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
        )
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]

        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(parts[-self._PATH_SEGMENT_LIMIT:])
        else:
            display = str(pure_path) or "."

        text = Text()
        for char in display:
            color = "magenta" if char in {separator, "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_event(self, record: logging.LogRecord) -> Text | None:
        """Render records carrying a ``provider_event`` extra."""

        event = getattr(record, "provider_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        command = getattr(record, "command", None)
        entry_path = getattr(record, "entry_path", None)

        if event == "process.spawn_failure":
            _ = body.append(f"Cannot start {command}")
            error = getattr(record, "error_message", None)
            if error:
                _ = body.append(f" ({error})")
        elif event == "process.non_zero_exit":
            exit_code = getattr(record, "exit_code", None)
            _ = body.append(f"{command} exited with status {exit_code}")
        elif event == "process.timeout":
            timeout = getattr(record, "timeout_seconds", None)
            _ = body.append(f"{command} timed out")
            if isinstance(timeout, (int, float)):
                _ = body.append(f" after {timeout:.1f}s")
        elif event == "provider.language.unparsable":
            _ = body.append("No language detected")
        elif event == "listing.complete":
            metrics: list[str] = []
            entries = getattr(record, "entries", None)
            duration = getattr(record, "duration_seconds", None)
            if isinstance(entries, int):
                metrics.append(f"entries={entries}")
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            _ = body.append("Listing complete")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
            entry_path = getattr(record, "directory", entry_path)
        else:
            _ = body.append(record.getMessage())

        if entry_path:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(entry_path)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["ProviderRichHandler"]
