"""Display management for CLI interface."""

from cuemeta.ui.cli.display.sheet import SheetDisplay

__all__ = ["SheetDisplay"]
