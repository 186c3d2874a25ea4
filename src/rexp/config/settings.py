"""Where: src/rexp/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to feature layers without file I/O.
Trade-offs: - Validation is limited to simple boundary checks; invalid values fall
  back to defaults with a warning instead of failing startup.
"""

from __future__ import annotations

from dataclasses import dataclass

from rexp.config.config import (
    COMMIT_MESSAGE_LIMIT_DEFAULT,
    MAX_WORKERS_DEFAULT,
    NERD_FONTS_DEFAULT,
    PROCESS_TIMEOUT_SECONDS_DEFAULT,
    THEME_FLAVOR_DEFAULT,
    Config,
)
from rexp.features.providers import ProviderSettings
from rexp.features.theme import Flavor
from rexp.platform.logging import logger


@dataclass(frozen=True, slots=True)
class RuntimeSettings:
    """Validated values the CLI host hands to providers and renderers."""

    commit_message_limit: int
    process_timeout_seconds: float
    max_workers: int
    nerd_fonts: bool
    theme_flavor: Flavor

    @property
    def provider_settings(self) -> ProviderSettings:
        return ProviderSettings(limit=self.commit_message_limit)

    @classmethod
    def from_config(cls, config: Config) -> "RuntimeSettings":
        limit = config.commit_message_limit
        if not _is_int(limit) or limit < 0:
            logger.warning(
                "Invalid commit_message_limit %r, using %d", limit, COMMIT_MESSAGE_LIMIT_DEFAULT
            )
            limit = COMMIT_MESSAGE_LIMIT_DEFAULT

        timeout = config.process_timeout_seconds
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            logger.warning(
                "Invalid process_timeout_seconds %r, using %.1f",
                timeout,
                PROCESS_TIMEOUT_SECONDS_DEFAULT,
            )
            timeout = PROCESS_TIMEOUT_SECONDS_DEFAULT

        workers = config.max_workers
        if not _is_int(workers) or workers < 1:
            logger.warning("Invalid max_workers %r, using %d", workers, MAX_WORKERS_DEFAULT)
            workers = MAX_WORKERS_DEFAULT

        try:
            flavor = Flavor(str(config.theme_flavor).strip().lower())
        except ValueError:
            logger.warning(
                "Unknown theme_flavor %r, using %s", config.theme_flavor, THEME_FLAVOR_DEFAULT
            )
            flavor = Flavor(THEME_FLAVOR_DEFAULT)

        nerd_fonts = config.nerd_fonts
        if not isinstance(nerd_fonts, bool):
            logger.warning("Invalid nerd_fonts %r, using true", nerd_fonts)
            nerd_fonts = NERD_FONTS_DEFAULT

        return cls(
            commit_message_limit=limit,
            process_timeout_seconds=float(timeout),
            max_workers=workers,
            nerd_fonts=nerd_fonts,
            theme_flavor=flavor,
        )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = ["RuntimeSettings"]
