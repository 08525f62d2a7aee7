"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the ``cuemeta`` logger from a rich console handler and an optional rotating file.
Why: Library imports log to stderr only; the CLI attaches the file once config is read.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from cuemeta.config.paths import default_log_file

from .handlers import CueRichHandler

LOGGER_NAME: Final[str] = "cuemeta"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    handler = CueRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = log_file.expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        target,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the application logger, replacing any previous handlers."""

    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)
    for handler in list(configured.handlers):
        configured.removeHandler(handler)
        handler.close()

    configured.addHandler(_console_handler(console_level))
    if log_file is not None:
        configured.addHandler(_file_handler(Path(log_file), file_level))
    return configured


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]
