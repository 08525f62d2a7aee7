"""Tag utility helpers.

Where: src/cuemeta/features/cue/adapters/_tag_utils.py
What: Provide pure helper routines for parsing and safe metadata tag access.
Why: Keep the mutagen adapter focused on format dispatch.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "safe_get_first",
    "safe_get_all",
    "parse_slash_separated",
    "parse_year",
]


def safe_get_first(tags: Any, key: str, default: str = "") -> str:
    """Safely get the first string value for ``key`` or return the default."""
    try:
        value = tags.get(key)
    except (KeyError, ValueError):
        return default
    if isinstance(value, list):
        return str(value[0]) if value else default
    if value is None:
        return default
    return str(value)


def safe_get_all(tags: Any, key: str) -> tuple[str, ...]:
    """Return every non-empty string value stored under ``key``."""
    try:
        value = tags.get(key)
    except (KeyError, ValueError):
        return ()
    if isinstance(value, list):
        return tuple(str(item) for item in value if str(item))
    if value:
        return (str(value),)
    return ()


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) or (None, None) if conversion fails.
    """
    parts: list[str] = value.split(sep="/") if value else []
    num: int | None = int(parts[0]) if parts and parts[0].isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None
    return num, total


def parse_year(date_str: str) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    return int(date_str[:4]) if date_str and len(date_str) >= 4 and date_str[:4].isdigit() else None
