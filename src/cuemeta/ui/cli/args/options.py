"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    cue_path: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class TracksArgs:
    """Command line arguments for the ``tracks`` subcommand."""

    command: Literal["tracks"]
    audio_path: Path
    cue_path: Path | None
    verbose: bool
    quiet: bool


CLIArgs = ShowArgs | TracksArgs

__all__ = ["CLIArgs", "ShowArgs", "TracksArgs"]
