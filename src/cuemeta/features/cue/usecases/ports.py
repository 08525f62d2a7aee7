"""Summary: Ports defining cue use case dependencies.
Why: Decouple parsing and materialization from storage, charset, and tag backends."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable

from cuemeta.shared import ExternalTag


@runtime_checkable
class StoragePort(Protocol):
    """Port for the read-only storage primitives used by cue parsing."""

    def open_text(self, path: str) -> TextIO:
        """Open ``path`` for line reading; raise ``OSError`` when unavailable."""
        ...

    def exists(self, path: str) -> bool:
        """Return True when ``path`` names an existing file."""
        ...

    def list_directory(self, directory: str) -> list[str]:
        """Return the paths of the entries in ``directory``; raise ``OSError`` on failure."""
        ...

    def paths_equal(self, left: str, right: str) -> bool:
        """Compare two paths using the backend's notion of path equality."""
        ...


@runtime_checkable
class CharsetNormalizerPort(Protocol):
    """Port converting text of unknown encoding into canonical text."""

    def normalize(self, text: str) -> str:
        """Return ``text`` unchanged when valid, otherwise a best-effort decoding."""
        ...


@runtime_checkable
class ExternalTagReaderPort(Protocol):
    """Port reading the embedded tags of one audio file."""

    def read(self, file_path: Path) -> ExternalTag:
        """Return the tags of ``file_path``; unreadable files yield an unloaded tag."""
        ...


__all__ = [
    "StoragePort",
    "CharsetNormalizerPort",
    "ExternalTagReaderPort",
]
