"""Tests for cue line sources."""

from __future__ import annotations

from typing import Any

from cuemeta.features.cue.usecases.line_sources import (
    BufferLineReader,
    LineSource,
    StorageLineReader,
)



def test_buffer_reader_splits_on_any_line_break() -> None:
    reader = BufferLineReader("TITLE a\r\nTRACK 01 AUDIO\rINDEX 01 00:00:00\nREM x")

    assert reader.ready()
    assert list(reader) == ["TITLE a", "TRACK 01 AUDIO", "INDEX 01 00:00:00", "REM x"]
    assert reader.next_line() is None


def test_buffer_reader_skips_blank_and_whitespace_lines() -> None:
    reader = BufferLineReader("\n\n   \t  \r\n  TITLE a  \n\n")

    assert reader.next_line() == "TITLE a"
    assert reader.next_line() is None


def test_buffer_reader_empty_buffer_is_not_ready() -> None:
    reader = BufferLineReader("")

    assert not reader.ready()
    assert reader.next_line() is None


def test_storage_reader_trims_lines_and_closes_at_end(make_storage: Any) -> None:
    storage = make_storage({"/music/a.cue": "  TITLE x  \r\n\r\n\tTRACK 01 AUDIO\n"})
    reader = StorageLineReader(storage, "/music/a.cue")

    assert reader.ready()
    assert reader.next_line() == "TITLE x"
    assert reader.next_line() == "TRACK 01 AUDIO"
    assert reader.next_line() is None
    assert not reader.ready()


def test_storage_reader_reports_open_failure(storage: Any) -> None:
    reader = StorageLineReader(storage, "/missing.cue")

    assert not reader.ready()
    assert reader.next_line() is None


def test_readers_satisfy_line_source_protocol(storage: Any) -> None:
    assert isinstance(BufferLineReader("x"), LineSource)
    assert isinstance(StorageLineReader(storage, "/missing.cue"), LineSource)
