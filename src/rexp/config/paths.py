"""Shared path utilities for configuration and log locations.

This module centralizes how the application discovers locations for
config and log files.

Policy:
- Config: ``$REXP_CONFIG_DIR/config.toml`` when set, otherwise
  ``$XDG_CONFIG_HOME/rexp/config.toml`` falling back to ``~/.config``.
- Logs: ``$XDG_STATE_HOME/rexp/rexp.log`` falling back to ``~/.local/state``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_APP_DIR_NAME: Final[str] = "rexp"
_ENV_CONFIG_DIR: Final[str] = "REXP_CONFIG_DIR"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _xdg_base(env_var: str, fallback: str, env: Mapping[str, str] | None = None) -> Path:
    """Return an XDG base directory, ignoring empty or relative overrides."""

    mapping = env if env is not None else os.environ
    raw = (mapping.get(env_var) or "").strip()
    if raw and Path(raw).is_absolute():
        return Path(raw)
    return Path.home() / fallback


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the directory holding ``config.toml``."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_DIR,
        default_factory=lambda: _xdg_base("XDG_CONFIG_HOME", ".config", env) / _APP_DIR_NAME,
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default path to the main TOML config file."""

    return (default_config_dir(env) / "config.toml").resolve()


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return (_xdg_base("XDG_STATE_HOME", ".local/state", env) / _APP_DIR_NAME).resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return (default_log_dir(env) / "rexp.log").resolve()


__all__ = [
    "default_config_dir",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
