"""
Summary: Line-driven state machine turning cue sheet text into a CueSheet.
Why: A track's end is only known once the next track's INDEX 01 arrives, so parsing is ordered.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from ..domain.errors import (
    CueError,
    MalformedTimecodeError,
    NoTracksFoundError,
    PathNotResolvedError,
    SourceUnavailableError,
    UnsupportedCrossFileTrackError,
)
from ..domain.extractors import (
    extract_field,
    extract_number,
    extract_timecode,
    parse_leading_float,
)
from ..domain.models import CueSheet, CueTrack, ReplayGainInfo
from .cue_events import CueEvent, log_cue_event
from .line_sources import BufferLineReader, LineSource, StorageLineReader
from .path_resolver import PathResolver
from .ports import CharsetNormalizerPort, StoragePort

# Offset of the value in ``REM REPLAYGAIN_xxx_yyyy <value>`` lines.
_REPLAYGAIN_VALUE_OFFSET: Final[int] = 26


@dataclass(slots=True)
class _TrackDraft:
    number: int
    file: str
    title: str = ""
    performer: str = ""
    start_ms: int = 0
    end_ms: int = 0
    gain: float | None = None
    peak: float | None = None

    def freeze(self) -> CueTrack:
        return CueTrack(
            number=self.number,
            file=self.file,
            title=self.title,
            performer=self.performer,
            start_ms=self.start_ms,
            end_ms=self.end_ms,
            replay_gain=ReplayGainInfo(gain=self.gain, peak=self.peak),
        )


@dataclass(slots=True)
class ParseState:
    """Cursors and partial results owned by a single parse call."""

    sheet_location: str | None = None
    title: str = ""
    performer: str = ""
    genre: str = ""
    year: int = 0
    disc_number: int = 0
    album_gain: float | None = None
    album_peak: float | None = None
    tracks: list[_TrackDraft] = field(default_factory=list)
    current_file: str = ""
    file_changed_since_last_track: bool = False
    file_count: int = 0
    unresolved_files: list[str] = field(default_factory=list)

    @property
    def current_track(self) -> _TrackDraft | None:
        return self.tracks[-1] if self.tracks else None

    def freeze(self) -> CueSheet:
        return CueSheet(
            tracks=tuple(track.freeze() for track in self.tracks),
            title=self.title,
            performer=self.performer,
            genre=self.genre,
            year=self.year,
            disc_number=self.disc_number,
            replay_gain=ReplayGainInfo(gain=self.album_gain, peak=self.album_peak),
            one_file_per_track=len(self.tracks) == self.file_count,
            unresolved_files=tuple(self.unresolved_files),
        )


LineHandler = Callable[[ParseState, str], None]


class SheetParser:
    """Parses cue sheets from files or embedded tag buffers."""

    def __init__(
        self,
        storage: StoragePort,
        normalizer: CharsetNormalizerPort | None = None,
        *,
        resolve_case_insensitive: bool = True,
    ) -> None:
        self.storage = storage
        self.normalizer = normalizer
        self.resolver = PathResolver(storage, case_insensitive=resolve_case_insensitive)
        # First matching prefix wins, so INDEX 01 and REM subkeys are checked in this order.
        self._handlers: tuple[tuple[str, LineHandler], ...] = (
            ("INDEX 01", self._on_index),
            ("TITLE", self._on_title),
            ("PERFORMER", self._on_performer),
            ("TRACK", self._on_track),
            ("REM DISCNUMBER", self._on_disc_number),
            ("FILE", self._on_file),
            ("REM DATE", self._on_date),
            ("REM GENRE", self._on_genre),
            ("REM REPLAYGAIN_ALBUM_GAIN", self._on_album_gain),
            ("REM REPLAYGAIN_ALBUM_PEAK", self._on_album_peak),
            ("REM REPLAYGAIN_TRACK_GAIN", self._on_track_gain),
            ("REM REPLAYGAIN_TRACK_PEAK", self._on_track_peak),
        )

    # Entry points -------------------------------------------------------------

    def parse_file(self, path: str) -> CueSheet | None:
        """Parse the sheet stored at ``path``; FILE entries resolve next to it."""

        with StorageLineReader(self.storage, path) as reader:
            return self._parse_logged(reader, path)

    def parse_tag(self, content: str) -> CueSheet | None:
        """Parse a sheet held in memory, e.g. an embedded CUESHEET tag."""

        with BufferLineReader(content) as reader:
            return self._parse_logged(reader, None)

    def parse(self, source: LineSource, sheet_location: str | None = None) -> CueSheet:
        """Consume ``source`` and build a sheet.

        Raises:
            CueError: Any failure except an unresolved FILE path, which is
                recorded on the sheet instead.
        """
        if not source.ready():
            raise SourceUnavailableError(sheet_location)

        state = ParseState(sheet_location=sheet_location)
        while (line := source.next_line()) is not None:
            self.feed(state, line)
        return self.finish(state)

    # Transitions --------------------------------------------------------------

    def feed(self, state: ParseState, line: str) -> None:
        """Apply the handler whose directive prefixes ``line``; ignore the rest."""

        upper = line.upper()
        for prefix, handler in self._handlers:
            if upper.startswith(prefix):
                handler(state, line)
                return

    def finish(self, state: ParseState) -> CueSheet:
        """Close the last track and freeze the state into a sheet."""

        last_track = state.current_track
        if last_track is None:
            raise NoTracksFoundError()
        last_track.end_ms = 0
        return state.freeze()

    def _text(self, line: str, keyword: str) -> str:
        normalize = self.normalizer.normalize if self.normalizer is not None else None
        return extract_field(line, keyword, normalize)

    def _on_index(self, state: ParseState, line: str) -> None:
        if state.file_changed_since_last_track:
            current = state.current_track
            raise UnsupportedCrossFileTrackError(current.number if current else None)

        time_ms = extract_timecode(line)
        if time_ms is None:
            raise MalformedTimecodeError(line)

        if len(state.tracks) > 1 and state.tracks[-2].file == state.current_file:
            state.tracks[-2].end_ms = time_ms
        if state.tracks:
            state.tracks[-1].start_ms = time_ms

    def _on_title(self, state: ParseState, line: str) -> None:
        title = self._text(line, "TITLE")
        if state.current_track is None:
            state.title = title
        else:
            state.current_track.title = title

    def _on_performer(self, state: ParseState, line: str) -> None:
        performer = self._text(line, "PERFORMER")
        if state.current_track is None:
            state.performer = performer
        else:
            state.current_track.performer = performer

    def _on_track(self, state: ParseState, line: str) -> None:
        number = extract_number(line[len("TRACK") :])
        position = len(state.tracks) + 1
        state.tracks.append(
            _TrackDraft(
                number=number if number is not None and number > 0 else position,
                file=state.current_file,
            )
        )
        state.file_changed_since_last_track = False

    def _on_disc_number(self, state: ParseState, line: str) -> None:
        disc_number = extract_number(line[len("REM DISCNUMBER") :])
        if disc_number is not None and disc_number > 0:
            state.disc_number = disc_number

    def _on_file(self, state: ParseState, line: str) -> None:
        state.file_count += 1
        if state.current_file:
            state.file_changed_since_last_track = True

        state.current_file = self._text(line, "FILE")
        if state.sheet_location and state.current_file:
            state.current_file = self._resolve(state, state.current_file)

    def _resolve(self, state: ParseState, referenced: str) -> str:
        assert state.sheet_location is not None
        try:
            return self.resolver.resolve(referenced, state.sheet_location)
        except PathNotResolvedError as exc:
            log_cue_event(
                logging.WARNING,
                CueEvent.PATH_UNRESOLVED,
                "%s",
                exc,
                source_path=exc.candidate,
                error_kind=exc.kind.value,
            )
            state.unresolved_files.append(exc.candidate)
            return exc.candidate

    def _on_date(self, state: ParseState, line: str) -> None:
        year = extract_number(line[len("REM DATE") :])
        if year is not None and year > 0:
            state.year = year

    def _on_genre(self, state: ParseState, line: str) -> None:
        state.genre = self._text(line, "REM GENRE")

    def _on_album_gain(self, state: ParseState, line: str) -> None:
        state.album_gain = parse_leading_float(line[_REPLAYGAIN_VALUE_OFFSET:])

    def _on_album_peak(self, state: ParseState, line: str) -> None:
        state.album_peak = parse_leading_float(line[_REPLAYGAIN_VALUE_OFFSET:])

    def _on_track_gain(self, state: ParseState, line: str) -> None:
        if state.current_track is not None:
            state.current_track.gain = parse_leading_float(line[_REPLAYGAIN_VALUE_OFFSET:])

    def _on_track_peak(self, state: ParseState, line: str) -> None:
        if state.current_track is not None:
            state.current_track.peak = parse_leading_float(line[_REPLAYGAIN_VALUE_OFFSET:])

    # Logging ------------------------------------------------------------------

    def _parse_logged(self, source: LineSource, sheet_location: str | None) -> CueSheet | None:
        log_cue_event(
            logging.DEBUG,
            CueEvent.PARSE_START,
            "Parsing cue sheet %s",
            sheet_location or "<embedded>",
            source_path=sheet_location,
        )
        try:
            sheet = self.parse(source, sheet_location)
        except CueError as exc:
            log_cue_event(
                logging.ERROR,
                CueEvent.PARSE_ERROR,
                "Failed to parse cue sheet %s: %s",
                sheet_location or "<embedded>",
                exc,
                source_path=sheet_location,
                error_kind=exc.kind.value,
                error_message=str(exc),
            )
            return None

        log_cue_event(
            logging.INFO,
            CueEvent.PARSE_SUCCESS,
            "Parsed cue sheet %s with %d tracks",
            sheet_location or "<embedded>",
            len(sheet.tracks),
            source_path=sheet_location,
            track_count=len(sheet.tracks),
        )
        return sheet


__all__ = ["ParseState", "SheetParser"]
