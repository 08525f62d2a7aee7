"""Command line interface for cuemeta."""

import sys
from typing import final

from cuemeta.platform.logging import logger
from cuemeta.ui.cli.args import ArgumentParser
from cuemeta.ui.cli.args.options import CLIArgs, ShowArgs
from cuemeta.ui.cli.commands import CommandExecutor, ShowCommand, TracksCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command: CommandExecutor = (
                ShowCommand() if isinstance(args, ShowArgs) else TracksCommand()
            )
            if not command.execute(args):
                sys.exit(1)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
