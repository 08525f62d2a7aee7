"""
Summary: Domain models, errors, and pure extractors for cue sheets.
Why: Provide one import path for types shared by parser, materializer, and adapters.
"""

from .errors import (
    CueError,
    CueErrorKind,
    MalformedTimecodeError,
    NoTracksFoundError,
    PathNotResolvedError,
    SourceUnavailableError,
    UnsupportedCrossFileTrackError,
)
from .extractors import (
    FRAMES_PER_SECOND,
    extract_field,
    extract_number,
    extract_quoted,
    extract_timecode,
    milliseconds_to_seconds_rounded,
    parse_leading_float,
    parse_leading_int,
)
from .models import CueSheet, CueTrack, ReplayGainInfo

__all__ = [
    "CueError",
    "CueErrorKind",
    "MalformedTimecodeError",
    "NoTracksFoundError",
    "PathNotResolvedError",
    "SourceUnavailableError",
    "UnsupportedCrossFileTrackError",
    "FRAMES_PER_SECOND",
    "extract_field",
    "extract_number",
    "extract_quoted",
    "extract_timecode",
    "milliseconds_to_seconds_rounded",
    "parse_leading_float",
    "parse_leading_int",
    "CueSheet",
    "CueTrack",
    "ReplayGainInfo",
]
