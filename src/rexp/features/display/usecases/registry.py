"""Where: src/rexp/features/display/usecases/registry.py
What: Hold the active display modules and theme chosen by the init script.
Why: Let user code swap row layout and colors without touching the renderer.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from rexp.features.theme import Theme
from rexp.platform.logging import logger
from rexp.shared import DisplayModuleError, Entry, ProviderNotConfiguredError

from ..domain.builtins import DisplayModule, default_display_modules


class DisplayRegistry:
    """Active row layout and theme.

    Any callable taking an entry and returning text is a display module,
    including provider methods such as ``GitMetadataProvider.last_author``.
    """

    def __init__(self, *, use_nerd_fonts: bool = True, theme: Theme | None = None) -> None:
        self._modules: tuple[DisplayModule, ...] = tuple(default_display_modules(use_nerd_fonts))
        self._theme: Theme | None = theme

    @property
    def modules(self) -> tuple[DisplayModule, ...]:
        return self._modules

    @property
    def theme(self) -> Theme | None:
        return self._theme

    def set_display_modules(self, *modules: Callable[[Entry], Any]) -> None:
        """Replace the row layout.

        Raises:
            DisplayModuleError: If any module is not callable; the layout is left unchanged.
        """
        for position, module in enumerate(modules, start=1):
            if not callable(module):
                raise DisplayModuleError(
                    f"Invalid module type at position {position}: {type(module).__name__}"
                )
        self._modules = tuple(modules)
        logger.debug("Registered %d display module(s)", len(modules))

    def set_theme(self, theme: Theme | Mapping[str, Any]) -> Theme:
        """Activate ``theme``, parsing nested color tables when needed."""

        resolved = theme if isinstance(theme, Theme) else Theme.from_mapping(theme)
        self._theme = resolved
        return resolved

    def render_row(self, entry: Entry) -> list[str]:
        """Render every module for ``entry``; a failing module renders empty.

        Raises:
            ProviderNotConfiguredError: If a provider module runs before configuration.
        """

        cells: list[str] = []
        for module in self._modules:
            try:
                value = module(entry)
            except ProviderNotConfiguredError:
                raise
            except Exception as exc:
                logger.warning(
                    "Display module %s failed for %s: %s",
                    getattr(module, "__name__", repr(module)),
                    entry.path,
                    exc,
                )
                value = ""
            cells.append(value if isinstance(value, str) else str(value))
        return cells


__all__ = ["DisplayRegistry"]
