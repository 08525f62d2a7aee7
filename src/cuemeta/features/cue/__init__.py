# Where: cuemeta.features.cue.__init__
# What: Expose cue parsing, materialization, and domain types.
# Why: Provide a cohesive import surface for UI and integration layers.

from .domain import (
    CueError,
    CueErrorKind,
    CueSheet,
    CueTrack,
    ReplayGainInfo,
)
from .usecases import (
    BufferLineReader,
    LoadedTrack,
    MaterializerOptions,
    SheetParser,
    StorageLineReader,
    TrackLoadResult,
    TrackRecord,
    load_tracks,
    merge_with_external_tag,
    to_track_records,
)

__all__ = [
    "CueError",
    "CueErrorKind",
    "CueSheet",
    "CueTrack",
    "ReplayGainInfo",
    "BufferLineReader",
    "LoadedTrack",
    "MaterializerOptions",
    "SheetParser",
    "StorageLineReader",
    "TrackLoadResult",
    "TrackRecord",
    "load_tracks",
    "merge_with_external_tag",
    "to_track_records",
]
