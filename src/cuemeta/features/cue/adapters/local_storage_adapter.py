"""src/cuemeta/features/cue/adapters/local_storage_adapter.py
What: Adapter implementing StoragePort on top of the local filesystem.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

import os
from typing import TextIO

from cuemeta.features.cue.usecases.ports import StoragePort


class LocalStorageAdapter(StoragePort):
    """Read-only storage backed by ``open``/``os.scandir``.

    Text is decoded as UTF-8 with undecodable bytes smuggled through as
    surrogates so the charset normalizer can repair them per field.
    """

    def open_text(self, path: str) -> TextIO:
        return open(path, "r", encoding="utf-8-sig", errors="surrogateescape", newline=None)

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def list_directory(self, directory: str) -> list[str]:
        with os.scandir(directory or ".") as entries:
            return [os.path.join(directory, entry.name) for entry in entries]

    def paths_equal(self, left: str, right: str) -> bool:
        return os.path.normcase(left).casefold() == os.path.normcase(right).casefold()


__all__ = ["LocalStorageAdapter"]
