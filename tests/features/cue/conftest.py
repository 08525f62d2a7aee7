"""Shared pytest fixtures for cue feature tests."""

from __future__ import annotations

import io
import posixpath
from collections.abc import Callable
from typing import TextIO

import pytest

DARK_SIDE_CUE = """\
PERFORMER "Pink Floyd"
TITLE "The Dark Side Of The Moon"
FILE "The Dark Side Of The Moon.mp3" WAVE
  TRACK 01 AUDIO
    TITLE "Speak To Me / Breathe"
    PERFORMER "Pink Floyd"
    INDEX 00 00:00:00
    INDEX 01 00:00:32
  TRACK 02 AUDIO
    TITLE "On The Run"
    PERFORMER "Pink Floyd"
    INDEX 00 03:58:72
    INDEX 01 04:00:72
  TRACK 03 AUDIO
    TITLE "Time"
    PERFORMER "Pink Floyd"
    INDEX 00 07:31:70
    INDEX 01 07:33:70
"""


class InMemoryStorage:
    """StoragePort double keeping files in a dict of POSIX paths."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.listed: list[str] = []

    def open_text(self, path: str) -> TextIO:
        if path not in self.files:
            raise FileNotFoundError(path)
        return io.StringIO(self.files[path], newline=None)

    def exists(self, path: str) -> bool:
        return path in self.files

    def list_directory(self, directory: str) -> list[str]:
        self.listed.append(directory)
        entries = [path for path in self.files if posixpath.dirname(path) == directory]
        if not entries:
            raise FileNotFoundError(directory)
        return entries

    def paths_equal(self, left: str, right: str) -> bool:
        return left.casefold() == right.casefold()


@pytest.fixture
def dark_side_cue() -> str:
    """Three-track single-file sheet."""
    return DARK_SIDE_CUE


@pytest.fixture
def storage() -> InMemoryStorage:
    """Empty in-memory storage backend."""
    return InMemoryStorage()


@pytest.fixture
def make_storage() -> Callable[[dict[str, str]], InMemoryStorage]:
    """Factory building in-memory storage preloaded with ``{path: text}``."""
    return InMemoryStorage
