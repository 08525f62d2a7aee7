"""Summary: Concrete adapters for cue use case ports.
Why: Bind storage, charset detection, and tag reading to real libraries."""

from .charset_adapter import ChardetNormalizer
from .local_storage_adapter import LocalStorageAdapter
from .mutagen_tag_adapter import MutagenTagReader

__all__ = ["ChardetNormalizer", "LocalStorageAdapter", "MutagenTagReader"]
