# Where: cuemeta.shared.external_tag
# What: Read-only view of the tags embedded in one audio file.
# Why: Let the cue materializer merge per-file tags without knowing mutagen.

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EmbeddedArt:
    """Presence and shape of cover art stored inside an audio file."""

    mime_type: str = ""
    size: int = 0

    @property
    def is_empty(self) -> bool:
        return self.size <= 0


@dataclass(frozen=True, slots=True)
class ExternalTag:
    """Metadata for a music file as read from its own tags."""

    loaded: bool = False
    title: str = ""
    artist: str = ""
    album: str = ""
    album_artists: tuple[str, ...] = ()
    genres: tuple[str, ...] = ()
    disc_number: int = 0
    year: int = 0
    release_date: str = ""
    duration_s: float = 0.0
    embedded_art: EmbeddedArt | None = None
    cue_sheet: str = ""


__all__ = ["EmbeddedArt", "ExternalTag"]
