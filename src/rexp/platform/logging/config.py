"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the shared ``rexp`` logger with a Rich console and an optional rotating file.
Why: Hosts reconfigure verbosity and file output once the config file has been read.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import ProviderRichHandler


LOGGER_NAME: Final[str] = "rexp"
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5
_FILE_FORMAT: Final[str] = "%(asctime)s [%(threadName)s] %(levelname)s %(name)s: %(message)s"


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    resolved = Path(log_file).expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Replace the handlers of the ``rexp`` logger.

    Args:
        log_file: Rotating log file; console output only when None.
        console_level: Threshold for the Rich console handler.
        file_level: Threshold for the file handler.
        console: Console to render to. Defaults to a soft-wrapping stderr console.

    Returns:
        logging.Logger: The reconfigured ``rexp`` logger.
    """

    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)

    for handler in list(configured.handlers):
        configured.removeHandler(handler)
        handler.close()

    console_handler = ProviderRichHandler(
        console=console or Console(stderr=True, soft_wrap=True)
    )
    console_handler.setLevel(console_level)
    configured.addHandler(console_handler)

    if log_file is not None:
        configured.addHandler(_file_handler(log_file, file_level))

    return configured


# Console-only until a host passes a log file.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
