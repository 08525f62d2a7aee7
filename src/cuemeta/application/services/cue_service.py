"""Application service for reading cue sheets.

This layer centralizes construction of parsers and adapters so that
multiple UIs can reuse the same use cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from cuemeta.features.cue import (
    CueSheet,
    MaterializerOptions,
    SheetParser,
    TrackLoadResult,
    load_tracks,
)
from cuemeta.features.cue.adapters import (
    ChardetNormalizer,
    LocalStorageAdapter,
    MutagenTagReader,
)
from cuemeta.features.cue.usecases.ports import (
    CharsetNormalizerPort,
    ExternalTagReaderPort,
    StoragePort,
)
from cuemeta.platform.logging import logger
from cuemeta.shared import ExternalTag


@dataclass(frozen=True)
class TracksRequest:
    """Input parameters for loading the cue tracks of one media file.

    Attributes:
        audio_path: Media file whose tracks should be loaded.
        cue_path: Standalone sheet; when None the file's embedded CUESHEET tag is used.
    """

    audio_path: Path
    cue_path: Path | None = None


@final
class CueService:
    """Application service that parses sheets and loads per-file tracks."""

    def __init__(
        self,
        *,
        storage_factory: Callable[[], StoragePort] | None = None,
        normalizer_factory: Callable[[], CharsetNormalizerPort] | None = None,
        tag_reader_factory: Callable[[], ExternalTagReaderPort] | None = None,
        options: MaterializerOptions | None = None,
        resolve_case_insensitive: bool | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories.

        Tests can inject light-weight doubles while production code relies on
        the default adapters and persisted settings.
        """
        if options is None or resolve_case_insensitive is None:
            from cuemeta.config.settings import RESOLVE_CASE_INSENSITIVE

            options = options or MaterializerOptions.from_settings()
            if resolve_case_insensitive is None:
                resolve_case_insensitive = RESOLVE_CASE_INSENSITIVE

        self.storage: StoragePort = (storage_factory or LocalStorageAdapter)()
        self.normalizer: CharsetNormalizerPort = (normalizer_factory or ChardetNormalizer)()
        self.tag_reader: ExternalTagReaderPort = (
            tag_reader_factory or (lambda: MutagenTagReader(options.item_separator or " / "))
        )()
        self.options = options
        self.parser = SheetParser(
            self.storage,
            self.normalizer,
            resolve_case_insensitive=resolve_case_insensitive,
        )

    def parse_sheet(self, cue_path: Path) -> CueSheet | None:
        """Parse a standalone sheet; FILE entries resolve next to it."""

        return self.parser.parse_file(str(cue_path.expanduser().resolve()))

    def parse_embedded(self, audio_path: Path) -> CueSheet | None:
        """Parse the CUESHEET tag embedded in ``audio_path`` and bind it to that file."""

        resolved = audio_path.expanduser().resolve()
        return self._bind_embedded(resolved, self.tag_reader.read(resolved))

    def _bind_embedded(self, audio_path: Path, tag: ExternalTag) -> CueSheet | None:
        if not tag.cue_sheet:
            logger.info("No embedded cue sheet in %s", audio_path)
            return None

        sheet = self.parser.parse_tag(tag.cue_sheet)
        if sheet is None:
            return None
        for media_file in sheet.media_files():
            sheet = sheet.with_media_file(media_file, str(audio_path))
        return sheet

    def load_tracks(self, request: TracksRequest) -> TrackLoadResult | None:
        """Load the tracks stored in ``request.audio_path``.

        Returns None when no sheet could be parsed; an empty result when the
        sheet has no entry for the file.
        """
        audio_path = request.audio_path.expanduser().resolve()
        tag = self.tag_reader.read(audio_path)
        if request.cue_path is not None:
            sheet = self.parse_sheet(request.cue_path)
        else:
            sheet = self._bind_embedded(audio_path, tag)
        if sheet is None:
            return None

        return load_tracks(sheet, str(audio_path), tag, self.options)


__all__ = ["CueService", "TracksRequest"]
