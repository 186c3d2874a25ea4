"""Nerd Font glyphs keyed by file extension."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

DIRECTORY_ICON: Final[str] = "\U000f024b"
DEFAULT_FILE_ICON: Final[str] = "\U000f0219"
CMAKE_ICON: Final[str] = "\ue615"
TEXT_ICON: Final[str] = "\ue612"


def _expand(groups: dict[tuple[str, ...], str]) -> dict[str, str]:
    return {extension: glyph for extensions, glyph in groups.items() for extension in extensions}


EXTENSION_ICONS: Final[Mapping[str, str]] = MappingProxyType(
    _expand(
        {
            # Programming
            ("rs",): "\U000f1617",
            ("c",): "\ue61e",
            ("cpp", "cc", "cxx"): "\ue61d",
            ("py",): "\ue606",
            ("java", "class"): "\ue738",
            ("js", "jsx"): "\ue60c",
            ("json",): "\ue60b",
            ("html", "xml"): "\ue60e",
            ("css",): "\ue614",
            ("go",): "\ue627",
            ("php",): "\ue608",
            ("rb",): "\ue791",
            ("swift",): "\ue755",
            ("ts", "tsx"): "\ue628",
            ("sh", "bash"): "\ue795",
            ("lua",): "\ue620",
            ("r",): "\uedc1",
            ("dart",): "\ue798",
            ("kotlin", "kt"): "\ue634",
            ("scala",): "\ue737",
            ("elixir", "ex", "exs"): "\ue62d",
            ("hs",): "\ue61f",
            ("clj", "cljs", "cljc", "edn", "cljr"): "\ue768",
            ("erl",): "\ue7b1",
            ("ml", "mli"): "\ue67a",
            ("sql",): "\ue706",
            ("m",): "\ue82a",
            ("cs",): "\ue7b2",
            ("pl",): "\ue769",
            ("asm", "s"): "\ue6ab",
            ("ps1",): "\ue86c",
            ("groovy",): "\ue775",
            ("jl",): "\ue624",
            ("fs", "fsx", "fsi"): "\ue7a7",
            ("lisp", "lsp"): "\ue6b0",
            ("f", "for", "f90"): "\U000f121a",
            ("ada",): "\ue6b5",
            # Config files
            ("yaml", "yml", "ini", "config", "babelrc"): "\ue615",
            ("toml",): "\ue6b2",
            ("lock",): "\uf023",
            ("env",): "\U000f048b",
            ("dockerfile",): "\U000f0868",
            ("makefile",): "\ue673",
            # Media
            ("mp3", "wav", "flac"): "\ue638",
            ("mp4", "mkv", "avi"): "\uf52c",
            ("jpg", "jpeg", "png", "gif", "svg"): "\ue60d",
            # Documents
            ("md",): "\ue609",
            ("pdf",): "\ueaeb",
            ("doc", "docx"): "\ue6a5",
            # Archives
            ("zip", "rar", "7z", "tar", "gz"): "\uf1c6",
            # Git
            ("git",): "\ue725",
            ("github",): "\ue709",
            ("gitignore",): "\ue702",
        }
    )
)


def file_icon(file_name: str, *, is_dir: bool = False) -> str:
    """Return the glyph for ``file_name``.

    The text after the last dot picks the glyph, so dotfiles such as
    ``.gitignore`` and extension-less names such as ``Makefile`` both match.
    """
    if is_dir or file_name.endswith("/"):
        return DIRECTORY_ICON

    extension = file_name.rsplit(".", 1)[-1].lower()
    if extension == "txt":
        return CMAKE_ICON if file_name.lower() == "cmakelists.txt" else TEXT_ICON
    return EXTENSION_ICONS.get(extension, DEFAULT_FILE_ICON)


__all__ = [
    "DEFAULT_FILE_ICON",
    "DIRECTORY_ICON",
    "EXTENSION_ICONS",
    "file_icon",
]
