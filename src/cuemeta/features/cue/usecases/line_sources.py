"""
Summary: Line sources feeding the cue parser from storage or an in-memory buffer.
Why: Sheets come from standalone files and from tags embedded in audio files.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from types import TracebackType
from typing import Final, Protocol, Self, TextIO, runtime_checkable

from cuemeta.platform.logging import logger

from .ports import StoragePort

_LINE_SEGMENT: Final[re.Pattern[str]] = re.compile(r"[^\r\n]+")


@runtime_checkable
class LineSource(Protocol):
    """Finite, non-restartable supply of trimmed, non-empty lines."""

    def ready(self) -> bool:
        """Return True when the source could be opened and has content."""
        ...

    def next_line(self) -> str | None:
        """Return the next non-blank trimmed line, or None at end of input."""
        ...


class StorageLineReader:
    """Reads lines from a file opened through a storage backend."""

    def __init__(self, storage: StoragePort, path: str) -> None:
        self.path = path
        self._handle: TextIO | None = None
        try:
            self._handle = storage.open_text(path)
        except OSError as exc:
            logger.debug("Cannot open cue sheet %s: %s", path, exc)

    def ready(self) -> bool:
        return self._handle is not None

    def next_line(self) -> str | None:
        if self._handle is None:
            return None
        for raw_line in self._handle:
            line = raw_line.strip()
            if line:
                return line
        self.close()
        return None

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class BufferLineReader:
    """Splits an in-memory buffer on ``\\r`` or ``\\n`` and skips blank segments."""

    def __init__(self, content: str) -> None:
        self._has_content = bool(content)
        self._segments: Iterator[re.Match[str]] = _LINE_SEGMENT.finditer(content)

    def ready(self) -> bool:
        return self._has_content

    def next_line(self) -> str | None:
        for segment in self._segments:
            line = segment.group().strip()
            if line:
                return line
        return None

    def close(self) -> None:
        self._segments = iter(())

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["LineSource", "StorageLineReader", "BufferLineReader"]
