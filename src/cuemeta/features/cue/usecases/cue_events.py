"""src/cuemeta/features/cue/usecases/cue_events.py
Where: Cue feature usecases layer.
What: Structured event identifiers and logging helper for cue processing.
Why: Let the console handler style parse outcomes without string matching.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from cuemeta.platform.logging import logger


class CueEvent(StrEnum):
    """Structured event identifiers for cue processing logs."""

    PARSE_START = "cue.parse.start"
    PARSE_SUCCESS = "cue.parse.success"
    PARSE_ERROR = "cue.parse.error"
    PATH_UNRESOLVED = "cue.path.unresolved"
    TRACKS_LOADED = "cue.tracks.loaded"
    TRACKS_NO_MATCH = "cue.tracks.no_match"


def log_cue_event(
    level: int,
    event: CueEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Log ``message`` tagged with ``event`` and stringified path context."""

    extra: dict[str, Any] = {"cue_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["CueEvent", "log_cue_event"]
