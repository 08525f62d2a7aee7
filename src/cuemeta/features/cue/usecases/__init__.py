"""
Summary: Public surface for cue parsing and materialization use cases.
Why: Provide a stable import path for services, adapters, and tests.
"""

from .cue_events import CueEvent, log_cue_event
from .line_sources import BufferLineReader, LineSource, StorageLineReader
from .path_resolver import PathResolver, file_name_of
from .ports import CharsetNormalizerPort, ExternalTagReaderPort, StoragePort
from .sheet_parser import ParseState, SheetParser
from .track_materializer import (
    DISC_SHIFT,
    LoadedTrack,
    MaterializerOptions,
    TrackLoadResult,
    TrackRecord,
    load_tracks,
    merge_with_external_tag,
    split_items,
    to_track_records,
)

__all__ = [
    "CueEvent",
    "log_cue_event",
    "BufferLineReader",
    "LineSource",
    "StorageLineReader",
    "PathResolver",
    "file_name_of",
    "CharsetNormalizerPort",
    "ExternalTagReaderPort",
    "StoragePort",
    "ParseState",
    "SheetParser",
    "DISC_SHIFT",
    "LoadedTrack",
    "MaterializerOptions",
    "TrackLoadResult",
    "TrackRecord",
    "load_tracks",
    "merge_with_external_tag",
    "split_items",
    "to_track_records",
]
