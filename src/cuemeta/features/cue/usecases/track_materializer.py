"""
Summary: Materialize parsed cue sheets into track records and merge per-file tags.
Why: Playback and cataloguing need flat records with inherited album metadata.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from cuemeta.shared import EmbeddedArt, ExternalTag

from ..domain.extractors import milliseconds_to_seconds_rounded
from ..domain.models import CueSheet, CueTrack, ReplayGainInfo
from .cue_events import CueEvent, log_cue_event

# Disc numbers are packed above the low 16 bits of the track number.
DISC_SHIFT = 16
TRACK_MASK = (1 << DISC_SHIFT) - 1


@dataclass(frozen=True, slots=True)
class MaterializerOptions:
    """Immutable preferences used while building track records."""

    item_separator: str = ""

    @classmethod
    def from_settings(cls) -> MaterializerOptions:
        """Build options from the persisted configuration."""
        from cuemeta.config.settings import ITEM_SEPARATOR

        return cls(item_separator=ITEM_SEPARATOR)


@dataclass(frozen=True, slots=True)
class TrackRecord:
    """A playable track with offsets into its media file."""

    title: str
    artist_desc: str
    album: str
    album_artists: tuple[str, ...]
    genres: tuple[str, ...]
    release_date: str
    track_number: int
    file_path: str
    start_offset_ms: int
    end_offset_ms: int
    duration_s: int
    album_replay_gain: ReplayGainInfo = field(default_factory=ReplayGainInfo)
    track_replay_gain: ReplayGainInfo = field(default_factory=ReplayGainInfo)
    embedded_art: EmbeddedArt | None = None
    cue_sheet: str = ""

    @property
    def track(self) -> int:
        return self.track_number & TRACK_MASK

    @property
    def disc_number(self) -> int:
        return self.track_number >> DISC_SHIFT


@dataclass(frozen=True, slots=True)
class LoadedTrack:
    """A merged record plus the tag that should win when building items."""

    record: TrackRecord
    tag: ExternalTag
    prefer_external_tag: bool


@dataclass(frozen=True, slots=True)
class TrackLoadResult:
    """Tracks of one sheet that belong to one physical media file."""

    file_path: str
    items: tuple[LoadedTrack, ...]

    @property
    def tracks_found(self) -> int:
        return len(self.items)

    @property
    def success(self) -> bool:
        return self.tracks_found != 0


def split_items(value: str, separator: str) -> tuple[str, ...]:
    """Split a multi-value field; an empty separator disables splitting."""
    if not value:
        return ()
    if not separator:
        return (value,)
    return tuple(value.split(separator))


def _build_record(
    sheet: CueSheet,
    track: CueTrack,
    *,
    album_artists: tuple[str, ...],
    genres: tuple[str, ...],
    release_date: str,
) -> TrackRecord:
    track_number = track.number
    if sheet.disc_number > 0:
        track_number |= sheet.disc_number << DISC_SHIFT

    if track.end_ms:
        duration_s = milliseconds_to_seconds_rounded(track.end_ms - track.start_ms)
    else:
        duration_s = 0

    return TrackRecord(
        title=track.title or f"Track {track.number:2d}",
        artist_desc=track.performer or sheet.performer,
        album=sheet.title,
        album_artists=album_artists,
        genres=genres,
        release_date=release_date,
        track_number=track_number,
        file_path=track.file,
        start_offset_ms=track.start_ms,
        end_offset_ms=track.end_ms,
        duration_s=duration_s,
        album_replay_gain=sheet.replay_gain if sheet.replay_gain.is_valid else ReplayGainInfo(),
        track_replay_gain=track.replay_gain if track.replay_gain.is_valid else ReplayGainInfo(),
    )


def to_track_records(
    sheet: CueSheet,
    options: MaterializerOptions | None = None,
) -> list[TrackRecord]:
    """Convert every track of ``sheet`` into a record, in sheet order."""

    options = options or MaterializerOptions()
    album_artists = split_items(sheet.performer, options.item_separator)
    genres = split_items(sheet.genre, options.item_separator)
    release_date = f"{sheet.year:04d}"

    return [
        _build_record(
            sheet,
            track,
            album_artists=album_artists,
            genres=genres,
            release_date=release_date,
        )
        for track in sheet.tracks
    ]


def merge_with_external_tag(
    record: TrackRecord,
    tag: ExternalTag,
    one_file_per_track: bool,
) -> LoadedTrack:
    """Fill gaps in ``record`` from the media file's own tags.

    Sheet data stays authoritative, except that one-file-per-track albums
    whose files carry album, artist and title tags prefer those tags.
    """
    changes: dict[str, object] = {}
    if tag.loaded:
        if not record.album and tag.album:
            changes["album"] = tag.album
        if not record.album_artists and tag.album_artists:
            changes["album_artists"] = tag.album_artists
        if not record.genres and tag.genres:
            changes["genres"] = tag.genres
        if not record.artist_desc and tag.artist:
            changes["artist_desc"] = tag.artist
        if tag.disc_number:
            changes["track_number"] = record.track_number | (tag.disc_number << DISC_SHIFT)
        if tag.cue_sheet:
            changes["cue_sheet"] = tag.cue_sheet
        if tag.year:
            changes["release_date"] = tag.release_date or f"{tag.year:04d}"
        if (record.embedded_art is None or record.embedded_art.is_empty) and (
            tag.embedded_art is not None and not tag.embedded_art.is_empty
        ):
            changes["embedded_art"] = tag.embedded_art

    if not record.duration_s and tag.duration_s > 0:
        # Only the last track of a file has no end offset.
        total_ms = int(tag.duration_s * 1000)
        changes["duration_s"] = milliseconds_to_seconds_rounded(total_ms - record.start_offset_ms)

    merged = replace(record, **changes) if changes else record
    prefer_external_tag = (
        tag.loaded
        and one_file_per_track
        and bool(tag.album and tag.artist and tag.title)
    )
    return LoadedTrack(record=merged, tag=tag, prefer_external_tag=prefer_external_tag)


def load_tracks(
    sheet: CueSheet,
    file_path: str,
    tag: ExternalTag,
    options: MaterializerOptions | None = None,
) -> TrackLoadResult:
    """Materialize the tracks of ``sheet`` stored in ``file_path`` and merge ``tag``.

    An empty result means the sheet has no entry for that file.
    """
    items = tuple(
        merge_with_external_tag(record, tag, sheet.one_file_per_track)
        for record in to_track_records(sheet, options)
        if record.file_path == file_path
    )
    result = TrackLoadResult(file_path=file_path, items=items)

    if result.success:
        log_cue_event(
            logging.DEBUG,
            CueEvent.TRACKS_LOADED,
            "Loaded %d cue tracks for %s",
            result.tracks_found,
            file_path,
            source_path=file_path,
            track_count=result.tracks_found,
        )
    else:
        log_cue_event(
            logging.WARNING,
            CueEvent.TRACKS_NO_MATCH,
            "Cue sheet has no tracks for %s",
            file_path,
            source_path=file_path,
        )
    return result


__all__ = [
    "DISC_SHIFT",
    "MaterializerOptions",
    "TrackRecord",
    "LoadedTrack",
    "TrackLoadResult",
    "split_items",
    "to_track_records",
    "merge_with_external_tag",
    "load_tracks",
]
