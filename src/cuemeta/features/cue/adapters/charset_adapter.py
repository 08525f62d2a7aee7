"""src/cuemeta/features/cue/adapters/charset_adapter.py
What: Adapter implementing CharsetNormalizerPort with chardet detection.
Why: Legacy cue sheets are often written in local code pages rather than UTF-8."""

from __future__ import annotations

from typing import Final

import chardet

from cuemeta.features.cue.usecases.ports import CharsetNormalizerPort
from cuemeta.platform.logging import logger

FALLBACK_ENCODING: Final[str] = "cp1252"


def _has_surrogates(text: str) -> bool:
    return any("\udc80" <= char <= "\udcff" for char in text)


class ChardetNormalizer(CharsetNormalizerPort):
    """Repairs text carrying undecodable bytes as ``surrogateescape`` surrogates."""

    def normalize(self, text: str) -> str:
        if not _has_surrogates(text):
            return text

        raw = text.encode("utf-8", errors="surrogateescape")
        detected = chardet.detect(raw)
        encoding = detected.get("encoding") or FALLBACK_ENCODING
        try:
            decoded = raw.decode(encoding)
        except (LookupError, UnicodeDecodeError):
            decoded = raw.decode(FALLBACK_ENCODING, errors="replace")
            encoding = FALLBACK_ENCODING
        logger.debug("Decoded cue field as %s: %r", encoding, decoded)
        return decoded


__all__ = ["ChardetNormalizer", "FALLBACK_ENCODING"]
