"""
Summary: Closed registry of Catppuccin color flavors and the theme record type.
Why: Give hosts immutable presets plus validation for user-supplied theme tables.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Final

from rexp.shared import ThemeError


class Flavor(StrEnum):
    LATTE = "latte"
    FRAPPE = "frappe"
    MACCHIATO = "macchiato"
    MOCHA = "mocha"


@dataclass(frozen=True, slots=True)
class Rgb:
    """One 24-bit color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b"):
            value = getattr(self, channel)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
                raise ThemeError(f"channel {channel} must be an integer in [0, 255], got {value!r}")

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any]) -> "Rgb":
        try:
            return cls(r=table["r"], g=table["g"], b=table["b"])
        except (KeyError, TypeError) as exc:
            raise ThemeError(f"color table needs r, g and b channels: {table!r}") from exc

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True, slots=True)
class SelectedColors:
    """Colors of the row under the cursor."""

    fg: Rgb
    bg: Rgb


@dataclass(frozen=True, slots=True)
class Theme:
    """Complete color set for the listing."""

    fg: Rgb
    bg: Rgb
    selected: SelectedColors
    highlight: Rgb

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any]) -> "Theme":
        """Parse the nested table shape user scripts pass to ``set_theme``.

        Raises:
            ThemeError: If a color is missing or a channel is out of range.
        """
        try:
            selected = table["selected"]
            return cls(
                fg=Rgb.from_mapping(table["fg"]),
                bg=Rgb.from_mapping(table["bg"]),
                selected=SelectedColors(
                    fg=Rgb.from_mapping(selected["fg"]),
                    bg=Rgb.from_mapping(selected["bg"]),
                ),
                highlight=Rgb.from_mapping(table["highlight"]),
            )
        except (KeyError, TypeError) as exc:
            raise ThemeError(f"incomplete theme table: missing {exc}") from exc

    def to_mapping(self) -> dict[str, Any]:
        def _color(rgb: Rgb) -> dict[str, int]:
            return {"r": rgb.r, "g": rgb.g, "b": rgb.b}

        return {
            "fg": _color(self.fg),
            "bg": _color(self.bg),
            "selected": {"fg": _color(self.selected.fg), "bg": _color(self.selected.bg)},
            "highlight": _color(self.highlight),
        }


def _theme(
    fg: tuple[int, int, int],
    bg: tuple[int, int, int],
    selected_fg: tuple[int, int, int],
    selected_bg: tuple[int, int, int],
    highlight: tuple[int, int, int],
) -> Theme:
    return Theme(
        fg=Rgb(*fg),
        bg=Rgb(*bg),
        selected=SelectedColors(fg=Rgb(*selected_fg), bg=Rgb(*selected_bg)),
        highlight=Rgb(*highlight),
    )


FLAVORS: Final[Mapping[Flavor, Theme]] = MappingProxyType(
    {
        Flavor.LATTE: _theme(
            fg=(76, 79, 105),
            bg=(239, 241, 245),
            selected_fg=(239, 241, 245),
            selected_bg=(114, 135, 253),
            highlight=(223, 142, 29),
        ),
        Flavor.FRAPPE: _theme(
            fg=(198, 208, 245),
            bg=(48, 52, 70),
            selected_fg=(48, 52, 70),
            selected_bg=(148, 156, 187),
            highlight=(239, 159, 118),
        ),
        Flavor.MACCHIATO: _theme(
            fg=(202, 211, 245),
            bg=(36, 39, 58),
            selected_fg=(36, 39, 58),
            selected_bg=(147, 154, 183),
            highlight=(245, 169, 127),
        ),
        Flavor.MOCHA: _theme(
            fg=(205, 214, 244),
            bg=(30, 30, 46),
            selected_fg=(30, 30, 46),
            selected_bg=(147, 153, 178),
            highlight=(250, 179, 135),
        ),
    }
)


def flavor_theme(flavor: Flavor | str) -> Theme:
    """Look up a flavor by enum member or case-insensitive name.

    Raises:
        ThemeError: If the name is not a known flavor.
    """
    try:
        key = Flavor(flavor.lower()) if isinstance(flavor, str) else flavor
    except ValueError as exc:
        known = ", ".join(member.value for member in Flavor)
        raise ThemeError(f"unknown flavor {flavor!r}; expected one of {known}") from exc
    return FLAVORS[key]


def latte() -> Theme:
    return FLAVORS[Flavor.LATTE]


def frappe() -> Theme:
    return FLAVORS[Flavor.FRAPPE]


def macchiato() -> Theme:
    return FLAVORS[Flavor.MACCHIATO]


def mocha() -> Theme:
    return FLAVORS[Flavor.MOCHA]


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
