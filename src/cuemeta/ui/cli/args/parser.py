"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from cuemeta.config.config import Config
from cuemeta.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from cuemeta.ui.cli.args.options import CLIArgs, ShowArgs, TracksArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="cuemeta - Read cue sheets and list the tracks they describe.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        show_parser = subparsers.add_parser(
            "show",
            help="Parse a cue sheet and print album and track information",
        )
        _ = show_parser.add_argument(
            "cue_path",
            type=str,
            help="Path to the .cue file",
            metavar="CUE_PATH",
        )
        ArgumentParser._add_verbosity_flags(show_parser)

        tracks_parser = subparsers.add_parser(
            "tracks",
            help="List the cue tracks stored in one audio file merged with its tags",
        )
        _ = tracks_parser.add_argument(
            "audio_path",
            type=str,
            help="Path to the audio file",
            metavar="AUDIO_PATH",
        )
        _ = tracks_parser.add_argument(
            "--cue",
            type=str,
            dest="cue_path",
            help="Standalone cue sheet (defaults to the file's embedded CUESHEET tag)",
            metavar="CUE_PATH",
        )
        ArgumentParser._add_verbosity_flags(tracks_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed parsing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        if parsed_args.command == "show":
            cue_path = ArgumentParser._existing_path(parsed_args.cue_path, "Cue sheet")
            return ShowArgs(
                command="show",
                cue_path=cue_path,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        audio_path = ArgumentParser._existing_path(parsed_args.audio_path, "Audio file")
        cue_path = (
            ArgumentParser._existing_path(parsed_args.cue_path, "Cue sheet")
            if parsed_args.cue_path
            else None
        )
        return TracksArgs(
            command="tracks",
            audio_path=audio_path,
            cue_path=cue_path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _existing_path(raw_path: str, label: str) -> Path:
        path = Path(raw_path)
        if not path.is_file():
            logger.error("%s does not exist: %s", label, path)
            sys.exit(1)
        return path
