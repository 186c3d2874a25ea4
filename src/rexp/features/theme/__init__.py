"""Color themes for the listing."""

from __future__ import annotations

from .domain.flavors import (
    FLAVORS,
    Flavor,
    Rgb,
    SelectedColors,
    Theme,
    flavor_theme,
    frappe,
    latte,
    macchiato,
    mocha,
)

__all__ = [
    "FLAVORS",
    "Flavor",
    "Rgb",
    "SelectedColors",
    "Theme",
    "flavor_theme",
    "frappe",
    "latte",
    "macchiato",
    "mocha",
]
