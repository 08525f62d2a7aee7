"""
Summary: Error taxonomy raised while reading and parsing cue sheets.
Why: Give callers a typed failure kind while the public entry points stay boolean.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class CueErrorKind(StrEnum):
    """Failure kinds surfaced by the cue parser."""

    SOURCE_UNAVAILABLE = "source_unavailable"
    MALFORMED_TIMECODE = "malformed_timecode"
    UNSUPPORTED_CROSS_FILE_TRACK = "unsupported_cross_file_track"
    NO_TRACKS_FOUND = "no_tracks_found"
    PATH_NOT_RESOLVED = "path_not_resolved"


class CueError(Exception):
    """Base class for cue sheet failures."""

    kind: ClassVar[CueErrorKind]


class SourceUnavailableError(CueError):
    """The line source could not be opened or holds no content."""

    kind: ClassVar[CueErrorKind] = CueErrorKind.SOURCE_UNAVAILABLE

    def __init__(self, source: str | None = None) -> None:
        super().__init__(
            f"Cannot read cue sheet from {source!r}"
            if source
            else "Cue sheet buffer is empty"
        )
        self.source = source


class MalformedTimecodeError(CueError):
    """An ``INDEX 01`` line does not follow the MM:SS:FF layout."""

    kind: ClassVar[CueErrorKind] = CueErrorKind.MALFORMED_TIMECODE

    def __init__(self, line: str) -> None:
        super().__init__(f"Mangled time in INDEX 01 line: {line!r}")
        self.line = line


class UnsupportedCrossFileTrackError(CueError):
    """A track's audible region starts in a different file than the track itself."""

    kind: ClassVar[CueErrorKind] = CueErrorKind.UNSUPPORTED_CROSS_FILE_TRACK

    def __init__(self, track_number: int | None) -> None:
        super().__init__(
            f"Track {track_number} is split over multiple files, unsupported"
            if track_number is not None
            else "Track split over multiple files, unsupported"
        )
        self.track_number = track_number


class NoTracksFoundError(CueError):
    """The sheet was read completely without opening a single track."""

    kind: ClassVar[CueErrorKind] = CueErrorKind.NO_TRACKS_FOUND

    def __init__(self) -> None:
        super().__init__("No TRACK entries in cue sheet")


class PathNotResolvedError(CueError):
    """A FILE reference matches nothing in the sheet's directory."""

    kind: ClassVar[CueErrorKind] = CueErrorKind.PATH_NOT_RESOLVED

    def __init__(self, candidate: str) -> None:
        super().__init__(
            f"Could not find {candidate!r} referenced in cue, case sensitivity issue?"
        )
        self.candidate = candidate


__all__ = [
    "CueErrorKind",
    "CueError",
    "SourceUnavailableError",
    "MalformedTimecodeError",
    "UnsupportedCrossFileTrackError",
    "NoTracksFoundError",
    "PathNotResolvedError",
]
