"""
Summary: Immutable cue sheet, cue track, and replay gain models.
Why: Parsed sheets are shared with materialization and path rewriting without re-parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True, slots=True)
class ReplayGainInfo:
    """Loudness normalization hint; gain and peak are independently optional."""

    gain: float | None = None
    peak: float | None = None

    @property
    def has_gain(self) -> bool:
        return self.gain is not None

    @property
    def has_peak(self) -> bool:
        return self.peak is not None

    @property
    def is_valid(self) -> bool:
        """Return True when a gain value is present."""
        return self.has_gain


@dataclass(frozen=True, slots=True)
class CueTrack:
    """One track of a cue sheet.

    ``end_ms`` of 0 means the end is unknown and playback runs to the end
    of ``file``. Empty ``title``/``performer`` inherit the album values.
    """

    number: int
    file: str
    title: str = ""
    performer: str = ""
    start_ms: int = 0
    end_ms: int = 0
    replay_gain: ReplayGainInfo = field(default_factory=ReplayGainInfo)


@dataclass(frozen=True, slots=True)
class CueSheet:
    """Album metadata plus the ordered tracks of one parsed sheet."""

    tracks: tuple[CueTrack, ...]
    title: str = ""
    performer: str = ""
    genre: str = ""
    year: int = 0
    disc_number: int = 0
    replay_gain: ReplayGainInfo = field(default_factory=ReplayGainInfo)
    one_file_per_track: bool = False
    unresolved_files: tuple[str, ...] = ()

    @property
    def is_loaded(self) -> bool:
        return bool(self.tracks)

    def media_files(self) -> list[str]:
        """Return the distinct media files referenced by the tracks, sorted."""

        return sorted({track.file for track in self.tracks})

    def with_media_file(self, old_media_file: str, media_file: str) -> CueSheet:
        """Return a copy where tracks bound to ``old_media_file`` point at ``media_file``."""

        tracks = tuple(
            replace(track, file=media_file) if track.file == old_media_file else track
            for track in self.tracks
        )
        return replace(self, tracks=tracks)


__all__ = ["ReplayGainInfo", "CueTrack", "CueSheet"]
