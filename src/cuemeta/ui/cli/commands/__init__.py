"""Command execution package for CLI."""

from cuemeta.ui.cli.commands.executor import CommandExecutor
from cuemeta.ui.cli.commands.show import ShowCommand
from cuemeta.ui.cli.commands.tracks import TracksCommand

__all__ = [
    "CommandExecutor",
    "ShowCommand",
    "TracksCommand",
]
