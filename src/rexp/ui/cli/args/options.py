"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from rexp.config.settings import RuntimeSettings
from rexp.features.providers import ProviderColumn


@final
@dataclass(slots=True)
class InfoArgs:
    """Command line arguments for ``rexp-info``."""

    path: Path
    columns: tuple[ProviderColumn, ...]
    settings: RuntimeSettings
    show_hidden: bool
    verbose: bool
    quiet: bool


__all__ = ["InfoArgs"]
