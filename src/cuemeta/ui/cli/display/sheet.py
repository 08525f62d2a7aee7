"""src/cuemeta/ui/cli/display/sheet.py
Where: CLI adapter layer for cue sheet rendering.
What: Build Rich tables for parsed sheets and loaded track records.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.table import Table

from cuemeta.features.cue import CueSheet, LoadedTrack, ReplayGainInfo


def format_offset(milliseconds: int) -> str:
    """Render an offset as ``M:SS.mmm``."""

    minutes, remainder = divmod(milliseconds, 60_000)
    seconds, millis = divmod(remainder, 1000)
    return f"{minutes}:{seconds:02d}.{millis:03d}"


def format_replay_gain(info: ReplayGainInfo) -> str:
    parts: list[str] = []
    if info.gain is not None:
        parts.append(f"{info.gain:+.2f} dB")
    if info.peak is not None:
        parts.append(f"peak {info.peak:.6f}")
    return ", ".join(parts)


@final
class SheetDisplay:
    """Handles cue sheet display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize sheet display."""
        self.console = console or Console()

    def show_sheet(self, sheet: CueSheet, quiet: bool = False) -> None:
        """Display album information and the track table of ``sheet``."""

        if quiet:
            return

        self.console.print(f"[bold cyan]{sheet.title or '(untitled)'}[/bold cyan]")
        if sheet.performer:
            self.console.print(f"Performer: {sheet.performer}")
        if sheet.genre:
            self.console.print(f"Genre: {sheet.genre}")
        if sheet.year:
            self.console.print(f"Year: {sheet.year}")
        if sheet.disc_number:
            self.console.print(f"Disc: {sheet.disc_number}")
        album_gain = format_replay_gain(sheet.replay_gain)
        if album_gain:
            self.console.print(f"Album gain: {album_gain}")
        layout = "one file per track" if sheet.one_file_per_track else "shared media file"
        self.console.print(f"Layout: {layout}")

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Title")
        table.add_column("Performer")
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        table.add_column("File")
        for track in sheet.tracks:
            table.add_row(
                str(track.number),
                track.title,
                track.performer or sheet.performer,
                format_offset(track.start_ms),
                format_offset(track.end_ms) if track.end_ms else "-",
                track.file,
            )
        self.console.print(table)

        for unresolved in sheet.unresolved_files:
            self.console.print(f"[yellow]Missing media file:[/yellow] {unresolved}")

    def show_tracks(self, items: Sequence[LoadedTrack], quiet: bool = False) -> None:
        """Display merged track records."""

        if quiet:
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Disc", justify="right")
        table.add_column("#", justify="right")
        table.add_column("Title")
        table.add_column("Artist")
        table.add_column("Album")
        table.add_column("Start", justify="right")
        table.add_column("Duration", justify="right")
        table.add_column("Source")
        for item in items:
            record = item.record
            table.add_row(
                str(record.disc_number or ""),
                str(record.track),
                record.title,
                record.artist_desc,
                record.album,
                format_offset(record.start_offset_ms),
                f"{record.duration_s}s" if record.duration_s else "?",
                "tags" if item.prefer_external_tag else "cue",
            )
        self.console.print(table)
        self.console.print(f"Total tracks: {len(items)}")


__all__ = ["SheetDisplay", "format_offset", "format_replay_gain"]
