"""Locations of the configuration file and the rotating log.

Both live under the repository root so a checkout is self-contained:
``<repo_root>/config/config.toml`` and ``<repo_root>/logs/cuemeta.log``.
``CUEMETA_LOG_DIR`` moves the log directory elsewhere.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final


LOG_DIR_ENV: Final[str] = "CUEMETA_LOG_DIR"
LOG_FILE_NAME: Final[str] = "cuemeta.log"


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest parent holding ``pyproject.toml`` or ``.git``.

    Falls back to the working directory when neither marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for candidate in (here, *here.parents):
        if (candidate / "pyproject.toml").exists() or (candidate / ".git").exists():
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_dir() -> Path:
    """Log directory from ``CUEMETA_LOG_DIR`` or ``<repo_root>/logs``."""

    override = os.environ.get(LOG_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / LOG_FILE_NAME


__all__ = [
    "LOG_DIR_ENV",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
]
