"""Display feature exports.

Where: src/rexp/features/display/__init__.py
What: Re-export built-in display modules, icons, and the registry.
Why: Keep init-script imports short.
"""

from __future__ import annotations

from .domain.builtins import (
    DisplayModule,
    creation_date,
    default_display_modules,
    icon,
    large_spacer,
    medium_spacer,
    name,
    size,
    small_spacer,
)
from .domain.icons import file_icon
from .usecases.registry import DisplayRegistry

__all__ = [
    "DisplayModule",
    "DisplayRegistry",
    "creation_date",
    "default_display_modules",
    "file_icon",
    "icon",
    "large_spacer",
    "medium_spacer",
    "name",
    "size",
    "small_spacer",
]
