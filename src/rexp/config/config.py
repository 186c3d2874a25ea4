"""Configuration management for rexp."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from rexp.config.file_ops import write_text_file
from rexp.config.paths import default_config_path, default_log_file
from rexp.platform.logging import logger
from rexp.shared.errors import ConfigError


COMMIT_MESSAGE_LIMIT_DEFAULT = 50
PROCESS_TIMEOUT_SECONDS_DEFAULT = 5.0
MAX_WORKERS_DEFAULT = 8
NERD_FONTS_DEFAULT = True
THEME_FLAVOR_DEFAULT = "mocha"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Maximum characters of a commit summary before it is cut with ".."
    commit_message_limit: int = COMMIT_MESSAGE_LIMIT_DEFAULT

    # Per-command timeout for git and linguist queries
    process_timeout_seconds: float = PROCESS_TIMEOUT_SECONDS_DEFAULT

    # Threads used to query entries of one listing concurrently
    max_workers: int = MAX_WORKERS_DEFAULT

    # Display settings
    nerd_fonts: bool = NERD_FONTS_DEFAULT
    theme_flavor: str = THEME_FLAVOR_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata.

        Values that are neither text nor paths are dropped with a warning.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)
            elif value is not None and not isinstance(value, Path):
                logger.warning("Invalid %s %r, ignoring it", f.name, value)
                setattr(self, f.name, None)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Target file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# rexp configuration file")
        lines.append("")

        lines.append("# Commit summaries longer than this many characters end with '..'")
        lines.append(
            f"commit_message_limit = {self._format_toml_value(config['commit_message_limit'])}"
        )
        lines.append("")

        lines.append("# Seconds to wait for git or github-linguist before giving up")
        lines.append(
            f"process_timeout_seconds = {self._format_toml_value(config['process_timeout_seconds'])}"
        )
        lines.append("")

        lines.append("# Number of entries queried in parallel")
        lines.append(f"max_workers = {self._format_toml_value(config['max_workers'])}")
        lines.append("")

        lines.append("# Show Nerd Font file icons")
        lines.append(f"nerd_fonts = {self._format_toml_value(config['nerd_fonts'])}")
        lines.append("")

        lines.append("# Color scheme: latte, frappe, macchiato or mocha")
        lines.append(f"theme_flavor = {self._format_toml_value(config['theme_flavor'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append(f"# Example: log_file = {self._format_toml_value(default_log_file())}")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, creating a default one when missing.

        Args:
            path: Config file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML.
            OSError: If the file cannot be read.
        """
        config_file = (path or default_config_path()).expanduser().resolve()

        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except OSError as e:
                logger.error("Failed to load configuration: %s", e)
                raise
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid configuration file {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(key for key in config_dict if key not in known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()
            _ = instance.save(config_file)
            logger.info("Created default configuration at %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached singleton so the next ``load`` rereads the file."""
        cls._instance = None
        cls._loaded_from = None


__all__ = [
    "COMMIT_MESSAGE_LIMIT_DEFAULT",
    "Config",
    "MAX_WORKERS_DEFAULT",
    "NERD_FONTS_DEFAULT",
    "PROCESS_TIMEOUT_SECONDS_DEFAULT",
    "THEME_FLAVOR_DEFAULT",
]
