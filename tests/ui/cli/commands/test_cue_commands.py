"""Tests for the show and tracks command executors."""

from pathlib import Path
from unittest.mock import MagicMock

from cuemeta.application.services.cue_service import TracksRequest
from cuemeta.features.cue import CueSheet, CueTrack, TrackLoadResult
from cuemeta.ui.cli.args.options import ShowArgs, TracksArgs
from cuemeta.ui.cli.commands import ShowCommand, TracksCommand


def _show_args(quiet: bool = False) -> ShowArgs:
    return ShowArgs(command="show", cue_path=Path("album.cue"), verbose=False, quiet=quiet)


def _tracks_args(cue_path: Path | None = None) -> TracksArgs:
    return TracksArgs(
        command="tracks",
        audio_path=Path("disc.flac"),
        cue_path=cue_path,
        verbose=False,
        quiet=False,
    )


def test_show_command_displays_parsed_sheet() -> None:
    service = MagicMock()
    display = MagicMock()
    sheet = CueSheet(tracks=(CueTrack(number=1, file="disc.flac"),))
    service.parse_sheet.return_value = sheet

    assert ShowCommand(service=service, display=display).execute(_show_args(quiet=True))

    service.parse_sheet.assert_called_once_with(Path("album.cue"))
    display.show_sheet.assert_called_once_with(sheet, quiet=True)


def test_show_command_fails_when_sheet_is_rejected() -> None:
    service = MagicMock()
    display = MagicMock()
    service.parse_sheet.return_value = None

    assert not ShowCommand(service=service, display=display).execute(_show_args())
    display.show_sheet.assert_not_called()


def test_tracks_command_forwards_request_and_displays_items() -> None:
    service = MagicMock()
    display = MagicMock()
    result = TrackLoadResult(file_path="disc.flac", items=(MagicMock(),))
    service.load_tracks.return_value = result

    command = TracksCommand(service=service, display=display)

    assert command.execute(_tracks_args(Path("album.cue")))
    service.load_tracks.assert_called_once_with(
        TracksRequest(audio_path=Path("disc.flac"), cue_path=Path("album.cue"))
    )
    display.show_tracks.assert_called_once_with(result.items, quiet=False)


def test_tracks_command_fails_without_matching_tracks() -> None:
    service = MagicMock()
    display = MagicMock()
    service.load_tracks.side_effect = [None, TrackLoadResult(file_path="disc.flac", items=())]
    command = TracksCommand(service=service, display=display)

    assert not command.execute(_tracks_args())
    assert not command.execute(_tracks_args())
    display.show_tracks.assert_not_called()
