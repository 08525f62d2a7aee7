"""External tag reader backed by mutagen.

Where: src/cuemeta/features/cue/adapters/mutagen_tag_adapter.py
What: Read album, artist, disc, date, duration, cover art, and CUESHEET tags.
Why: Cue tracks are merged with the tags of the media file they point into.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import mutagen
from mutagen._util import MutagenError
from mutagen.flac import FLAC
from mutagen.mp4 import MP4, MP4Cover

from cuemeta.features.cue.usecases.ports import ExternalTagReaderPort
from cuemeta.platform.logging import logger
from cuemeta.shared import EmbeddedArt, ExternalTag

from ._tag_utils import parse_slash_separated, parse_year, safe_get_all, safe_get_first

__all__ = ["MutagenTagReader"]

_CUESHEET_KEY = "CUESHEET"


class MutagenTagReader(ExternalTagReaderPort):
    """Reads :class:`ExternalTag` views through ``mutagen.File``."""

    def __init__(self, artist_separator: str = " / ") -> None:
        self.artist_separator = artist_separator

    def read(self, file_path: Path) -> ExternalTag:
        try:
            easy = mutagen.File(file_path, easy=True)
            raw = mutagen.File(file_path)
        except (MutagenError, OSError) as exc:
            logger.warning("Failed to read tags from %s: %s", file_path, exc)
            return ExternalTag()

        if easy is None:
            logger.debug("Unsupported audio format for tag reading: %s", file_path)
            return ExternalTag()

        duration_s = float(getattr(easy.info, "length", 0.0) or 0.0)
        tags = easy.tags
        if tags is None:
            return ExternalTag(duration_s=duration_s)

        date = safe_get_first(tags, "date")
        disc_number, _ = parse_slash_separated(safe_get_first(tags, "discnumber"))
        tag = ExternalTag(
            loaded=True,
            title=safe_get_first(tags, "title"),
            artist=self.artist_separator.join(safe_get_all(tags, "artist")),
            album=safe_get_first(tags, "album"),
            album_artists=safe_get_all(tags, "albumartist"),
            genres=safe_get_all(tags, "genre"),
            disc_number=disc_number or 0,
            year=parse_year(date) or 0,
            release_date=date,
            duration_s=duration_s,
            embedded_art=self._read_embedded_art(raw),
            cue_sheet=self._read_cue_sheet(raw),
        )
        logger.debug("Read external tag for %s: %s", file_path, tag)
        return tag

    @staticmethod
    def _read_cue_sheet(audio: Any) -> str:
        tags = getattr(audio, "tags", None)
        if tags is None:
            return ""
        if hasattr(tags, "getall"):
            for frame in tags.getall("TXXX"):
                if str(getattr(frame, "desc", "")).upper() == _CUESHEET_KEY:
                    return "\n".join(str(text) for text in frame.text)
            return ""
        # Vorbis comments and APEv2 keys are case-insensitive.
        return safe_get_first(tags, _CUESHEET_KEY)

    @staticmethod
    def _read_embedded_art(audio: Any) -> EmbeddedArt | None:
        if isinstance(audio, FLAC) and audio.pictures:
            picture = audio.pictures[0]
            return EmbeddedArt(mime_type=picture.mime, size=len(picture.data))

        tags = getattr(audio, "tags", None)
        if tags is None:
            return None
        if hasattr(tags, "getall"):
            frames = tags.getall("APIC")
            if frames:
                return EmbeddedArt(mime_type=frames[0].mime, size=len(frames[0].data))
            return None
        if isinstance(audio, MP4):
            covers = tags.get("covr") or []
            if covers:
                cover = covers[0]
                mime_type = "image/png" if cover.imageformat == MP4Cover.FORMAT_PNG else "image/jpeg"
                return EmbeddedArt(mime_type=mime_type, size=len(cover))
        return None
