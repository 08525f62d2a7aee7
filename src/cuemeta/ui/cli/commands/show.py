"""src/cuemeta/ui/cli/commands/show.py
What: Parse one cue sheet and print it.
Why: Let users check how a sheet will be split before importing it.
"""

from typing import override

from cuemeta.ui.cli.args.options import CLIArgs, ShowArgs
from cuemeta.ui.cli.commands.executor import CommandExecutor


class ShowCommand(CommandExecutor):
    """Command for displaying a parsed cue sheet."""

    @override
    def execute(self, args: CLIArgs) -> bool:
        assert isinstance(args, ShowArgs)
        sheet = self.service.parse_sheet(args.cue_path)
        if sheet is None:
            return False
        self.display.show_sheet(sheet, quiet=args.quiet)
        return True
