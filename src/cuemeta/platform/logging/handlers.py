"""Rich console handler for cue sheet events.

Where: platform/logging/handlers.py
What: Render structured cue parsing events with icons, colors, and compact paths.
Why: Keep console diagnostics readable while the file log stays plain text.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class CueRichHandler(RichHandler):
    """Rich handler that styles cue events and abbreviates file paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "cue.parse.start": ("📄", "blue"),
        "cue.parse.success": ("✅", "green"),
        "cue.parse.error": ("❌", "red"),
        "cue.path.unresolved": ("⚠️", "yellow"),
        "cue.tracks.loaded": ("🎧", "green"),
        "cue.tracks.no_match": ("ℹ️", "yellow"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path keeping only its trailing segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        else:
            display_string = str(pure_path)

        text = Text()
        for char in display_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_cue_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured cue events with dedicated styling."""

        event = getattr(record, "cue_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = {
            "cue.parse.start": "Parsing ",
            "cue.parse.success": "Parsed ",
            "cue.parse.error": "Failed ",
            "cue.path.unresolved": "Unresolved ",
            "cue.tracks.loaded": "Loaded ",
            "cue.tracks.no_match": "No tracks for ",
        }.get(event)
        if prefix is None:
            _ = body.append(message)
            _ = text.append_text(body)
            return text

        _ = body.append(prefix)
        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))
        else:
            _ = body.append("<embedded>")

        details: list[str] = []
        track_count = getattr(record, "track_count", None)
        if isinstance(track_count, int):
            details.append(f"tracks={track_count}")
        error_kind = getattr(record, "error_kind", None)
        if error_kind:
            details.append(str(error_kind))
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for cue events."""

        cue_text = self._render_cue_message(record, message)
        if cue_text is not None:
            return cue_text

        if record.levelno >= logging.ERROR:
            return Text(message, style=Style(color="red"))
        if record.levelno >= logging.WARNING:
            return Text(message, style=Style(color="yellow"))
        return super().render_message(record, message)


__all__ = ["CueRichHandler"]
