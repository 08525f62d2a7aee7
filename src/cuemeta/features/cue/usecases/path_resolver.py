"""
Summary: Resolve FILE references of a cue sheet against the sheet's own directory.
Why: Sheets authored on case-insensitive filesystems must still work on case-sensitive ones.
"""

from __future__ import annotations

import os

from cuemeta.platform.logging import logger

from ..domain.errors import PathNotResolvedError
from .ports import StoragePort


def file_name_of(path: str) -> str:
    """Return the last component of ``path`` accepting both separator styles."""

    return path.replace("\\", "/").rsplit("/", 1)[-1]


def _sheet_directory(sheet_location: str) -> str:
    return os.path.dirname(os.path.abspath(sheet_location))


class PathResolver:
    """Turns a referenced file name into an absolute path next to the sheet."""

    def __init__(self, storage: StoragePort, *, case_insensitive: bool = True) -> None:
        self.storage = storage
        self.case_insensitive = case_insensitive

    def candidate_path(self, referenced_path: str, sheet_location: str) -> str:
        """Join the sheet directory with the file name of ``referenced_path``."""

        return os.path.join(_sheet_directory(sheet_location), file_name_of(referenced_path))

    def resolve(self, referenced_path: str, sheet_location: str) -> str:
        """Return the absolute path of ``referenced_path``.

        Raises:
            PathNotResolvedError: When neither the candidate nor any directory
                entry matches. The error carries the candidate path.
        """
        candidate = self.candidate_path(referenced_path, sheet_location)
        if self.storage.exists(candidate):
            return candidate

        if not self.case_insensitive:
            raise PathNotResolvedError(candidate)

        directory = _sheet_directory(sheet_location)
        try:
            entries = self.storage.list_directory(directory)
        except OSError as exc:
            logger.debug("Cannot list %s while resolving %s: %s", directory, candidate, exc)
            raise PathNotResolvedError(candidate) from exc

        for entry in entries:
            # Directories can match by name but never hold audio.
            if self.storage.paths_equal(entry, candidate) and self.storage.exists(entry):
                logger.debug("Resolved %s to %s by directory scan", candidate, entry)
                return entry

        raise PathNotResolvedError(candidate)


__all__ = ["PathResolver", "file_name_of"]
