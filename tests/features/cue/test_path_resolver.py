"""Tests for FILE path resolution relative to the sheet."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest

from cuemeta.features.cue.adapters.local_storage_adapter import LocalStorageAdapter
from cuemeta.features.cue.domain.errors import PathNotResolvedError
from cuemeta.features.cue.usecases.path_resolver import PathResolver, file_name_of



def test_file_name_of_handles_both_separators() -> None:
    assert file_name_of("C:\\rips\\Album\\disc.flac") == "disc.flac"
    assert file_name_of("sub/dir/disc.flac") == "disc.flac"
    assert file_name_of("disc.flac") == "disc.flac"


def test_resolve_returns_candidate_when_it_exists(make_storage: Any) -> None:
    storage = make_storage({"/music/album/disc.flac": ""})
    resolver = PathResolver(storage)

    resolved = resolver.resolve("C:\\rips\\disc.flac", "/music/album/disc.cue")

    assert resolved == "/music/album/disc.flac"
    assert storage.listed == []


def test_resolve_falls_back_to_case_insensitive_scan(make_storage: Any) -> None:
    storage = make_storage(
        {"/music/album/Disc.FLAC": "", "/music/album/cover.jpg": ""}
    )
    resolver = PathResolver(storage)

    resolved = resolver.resolve("disc.flac", "/music/album/disc.cue")

    assert resolved == "/music/album/Disc.FLAC"
    assert storage.listed == ["/music/album"]


def test_resolve_raises_with_candidate_when_nothing_matches(make_storage: Any) -> None:
    storage = make_storage({"/music/album/other.flac": ""})
    resolver = PathResolver(storage)

    with pytest.raises(PathNotResolvedError) as excinfo:
        _ = resolver.resolve("disc.flac", "/music/album/disc.cue")

    assert excinfo.value.candidate == "/music/album/disc.flac"


def test_resolve_treats_listing_failure_as_not_found(storage: Any) -> None:
    resolver = PathResolver(storage)

    with pytest.raises(PathNotResolvedError):
        _ = resolver.resolve("disc.flac", "/nowhere/disc.cue")


def test_resolve_skips_scan_when_case_insensitive_disabled(make_storage: Any) -> None:
    storage = make_storage({"/music/album/Disc.FLAC": ""})
    resolver = PathResolver(storage, case_insensitive=False)

    with pytest.raises(PathNotResolvedError):
        _ = resolver.resolve("disc.flac", "/music/album/disc.cue")
    assert storage.listed == []


def test_resolve_relative_sheet_scans_case_insensitively(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _ = (tmp_path / "track.flac").write_bytes(b"")
    monkeypatch.chdir(tmp_path)
    resolver = PathResolver(LocalStorageAdapter())

    resolved = resolver.resolve("TRACK.FLAC", "album.cue")

    assert resolved == os.path.join(os.path.abspath("."), "track.flac")
    assert os.path.isabs(resolved)


def test_relative_sheet_candidate_is_absolute(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    resolver = PathResolver(LocalStorageAdapter())

    with pytest.raises(PathNotResolvedError) as excinfo:
        _ = resolver.resolve("missing.flac", "album.cue")

    assert excinfo.value.candidate == os.path.join(os.path.abspath("."), "missing.flac")


def test_scan_skips_directories_matching_by_name(tmp_path: Path) -> None:
    (tmp_path / "DISC.FLAC").mkdir()
    resolver = PathResolver(LocalStorageAdapter())

    with pytest.raises(PathNotResolvedError):
        _ = resolver.resolve("disc.flac", str(tmp_path / "album.cue"))
