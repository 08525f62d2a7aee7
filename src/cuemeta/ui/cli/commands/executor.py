"""src/cuemeta/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse the application service and display helpers across commands.
"""

from abc import ABC, abstractmethod

from cuemeta.application.services.cue_service import CueService
from cuemeta.ui.cli.args.options import CLIArgs
from cuemeta.ui.cli.display.sheet import SheetDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    service: CueService
    display: SheetDisplay

    def __init__(self, service: CueService | None = None, display: SheetDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            service: Application service; built from settings when omitted.
            display: Console renderer.
        """
        self.service = service or CueService()
        self.display = display or SheetDisplay()

    @abstractmethod
    def execute(self, args: CLIArgs) -> bool:
        """Execute the command.

        Returns:
            True on success.
        """
        pass
