"""
Summary: Pure field extractors for cue sheet directive lines.
Why: Keep quoting, number, and timecode rules testable apart from the parser state.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final

__all__ = [
    "FRAMES_PER_SECOND",
    "parse_leading_int",
    "parse_leading_float",
    "extract_quoted",
    "extract_field",
    "extract_number",
    "extract_timecode",
    "milliseconds_to_seconds_rounded",
]

# CD timecode subdivision: one frame is 1/75th of a second.
FRAMES_PER_SECOND: Final[int] = 75

_LEADING_INT: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_LEADING_FLOAT: Final[re.Pattern[str]] = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)

TextNormalizer = Callable[[str], str]


def parse_leading_int(text: str) -> int:
    """Parse the leading integer of ``text`` ignoring trailing garbage.

    Mirrors C ``atoi``: leading whitespace and a sign are accepted, and 0
    is returned when no digits are found.
    """
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_leading_float(text: str) -> float | None:
    """Parse the leading decimal number of ``text`` (e.g. ``"-6.52 dB"``)."""
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else None


def extract_quoted(line: str, normalize: TextNormalizer | None = None) -> str:
    """Return the text between the first pair of double quotes.

    Without a closing pair the whole line is returned trimmed. The result is
    passed through ``normalize`` for charset repair when given.
    """
    text = line.strip()
    left = line.find('"')
    if left != -1:
        right = line.find('"', left + 1)
        if right != -1:
            text = line[left + 1 : right]
    return normalize(text) if normalize is not None else text


def extract_field(line: str, keyword: str, normalize: TextNormalizer | None = None) -> str:
    """Strip a leading directive ``keyword`` (any case) and extract its value."""
    if line[: len(keyword)].upper() == keyword.upper():
        line = line[len(keyword) :]
    return extract_quoted(line, normalize)


def extract_number(text: str) -> int | None:
    """Return the non-negative integer that ``text`` starts with, or None."""
    number = text.lstrip()
    if not number or not ("0" <= number[0] <= "9"):
        return None
    return parse_leading_int(number)


def extract_timecode(index_line: str) -> int | None:
    """Convert an ``INDEX nn MM:SS:FF`` line into milliseconds.

    Returns None unless the time splits into exactly three parts.
    """
    number_time = index_line[5:].lstrip()
    position = 0
    while position < len(number_time) and "0" <= number_time[position] <= "9":
        position += 1
    number_time = number_time[position:].lstrip()
    if not number_time:
        return None

    parts = number_time.split(":")
    if len(parts) != 3:
        return None

    minutes, seconds, frames = (parse_leading_int(part) for part in parts)
    return (minutes * 60 + seconds) * 1000 + _truncating_div(frames * 1000, FRAMES_PER_SECOND)


def milliseconds_to_seconds_rounded(milliseconds: int) -> int:
    """Convert milliseconds to whole seconds, rounding halves up."""
    return (milliseconds + 500) // 1000


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient
