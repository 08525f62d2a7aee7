"""Command line argument handling package."""

from cuemeta.ui.cli.args.parser import ArgumentParser
from cuemeta.ui.cli.args.options import CLIArgs, ShowArgs, TracksArgs

__all__ = ["ArgumentParser", "CLIArgs", "ShowArgs", "TracksArgs"]
