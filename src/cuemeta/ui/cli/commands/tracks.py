"""src/cuemeta/ui/cli/commands/tracks.py
What: Load the cue tracks stored in one audio file and print them.
Why: Show the final records after merging sheet data with the file's tags.
"""

from typing import override

from cuemeta.application.services.cue_service import TracksRequest
from cuemeta.ui.cli.args.options import CLIArgs, TracksArgs
from cuemeta.ui.cli.commands.executor import CommandExecutor


class TracksCommand(CommandExecutor):
    """Command for listing merged track records of one media file."""

    @override
    def execute(self, args: CLIArgs) -> bool:
        assert isinstance(args, TracksArgs)
        result = self.service.load_tracks(
            TracksRequest(audio_path=args.audio_path, cue_path=args.cue_path)
        )
        if result is None or not result.success:
            return False
        self.display.show_tracks(result.items, quiet=args.quiet)
        return True
