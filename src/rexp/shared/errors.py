"""
Summary: Exception hierarchy shared by providers, themes, and display modules.
Why: Let hosts catch every rexp failure through one base class.
"""

from __future__ import annotations


class RexpError(Exception):
    """Base class for rexp errors."""


class InvalidSettingsError(RexpError, ValueError):
    """Raised when provider settings fall outside their valid range."""


class ProviderNotConfiguredError(RexpError, RuntimeError):
    """Raised when a provider query runs before ``configure``."""


class ProviderAlreadyConfiguredError(RexpError, RuntimeError):
    """Raised when ``configure`` is called on an already configured provider."""


class ThemeError(RexpError, ValueError):
    """Raised when a theme table is incomplete or carries invalid channels."""


class DisplayModuleError(RexpError, TypeError):
    """Raised when a registered display module is not callable."""


class ConfigError(RexpError, ValueError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "ConfigError",
    "DisplayModuleError",
    "InvalidSettingsError",
    "ProviderAlreadyConfiguredError",
    "ProviderNotConfiguredError",
    "RexpError",
    "ThemeError",
]
