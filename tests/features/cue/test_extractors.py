"""Tests for cue field extractors.

Where: tests/features/cue/test_extractors.py
What: Validate quoting, number, and timecode extraction rules.
Why: The parser relies on these lenient conversions for real-world sheets.
"""

from cuemeta.features.cue.domain.extractors import (
    extract_field,
    extract_number,
    extract_quoted,
    extract_timecode,
    milliseconds_to_seconds_rounded,
    parse_leading_float,
    parse_leading_int,
)


def test_extract_quoted_returns_text_between_quotes() -> None:
    assert extract_quoted('TITLE "On The Run"') == "On The Run"
    assert extract_quoted('FILE "a.flac" WAVE') == "a.flac"
    assert extract_quoted('TITLE ""') == ""


def test_extract_quoted_falls_back_to_trimmed_line() -> None:
    assert extract_quoted("   Unquoted Name  ") == "Unquoted Name"
    assert extract_quoted('  "unterminated ') == '"unterminated'


def test_extract_field_strips_keyword_for_unquoted_values() -> None:
    assert extract_field("TITLE   Unquoted Name  ", "TITLE") == "Unquoted Name"
    assert extract_field("title Lower", "TITLE") == "Lower"
    assert extract_field('REM GENRE "Progressive Rock"', "REM GENRE") == "Progressive Rock"


def test_extract_quoted_applies_normalizer() -> None:
    assert extract_quoted('TITLE "abc"', str.upper) == "ABC"


def test_extract_number_requires_leading_digit() -> None:
    assert extract_number("  07 AUDIO") == 7
    assert extract_number("5abc") == 5
    assert extract_number("AUDIO") is None
    assert extract_number("-3") is None
    assert extract_number("") is None


def test_parse_leading_int_mimics_atoi() -> None:
    assert parse_leading_int(" 42xyz") == 42
    assert parse_leading_int("-7") == -7
    assert parse_leading_int("xyz") == 0
    assert parse_leading_int("") == 0


def test_parse_leading_float_reads_replay_gain_values() -> None:
    assert parse_leading_float("-6.52 dB") == -6.52
    assert parse_leading_float(" 0.988403") == 0.988403
    assert parse_leading_float("+1") == 1.0
    assert parse_leading_float("dB") is None


def test_leading_numbers_accept_ascii_digits_only() -> None:
    assert parse_leading_int("1\u0663") == 1
    assert parse_leading_int("\u0663") == 0
    assert parse_leading_float("2.5\u0663 dB") == 2.5
    assert parse_leading_float("\u0663.5") is None
    assert extract_timecode("INDEX 01 0\u0663:00:00") == 0


def test_extract_timecode_converts_frames_to_milliseconds() -> None:
    assert extract_timecode("INDEX 01 07:33:70") == 453933
    assert extract_timecode("INDEX 01 00:00:32") == 426
    assert extract_timecode("INDEX 01 04:00:72") == 240960
    assert extract_timecode("INDEX 01 00:00:00") == 0


def test_extract_timecode_accepts_lenient_components() -> None:
    assert extract_timecode("INDEX 01   01:02:03 extra") == 62040
    assert extract_timecode("INDEX 01 100:00:00") == 6_000_000


def test_extract_timecode_rejects_wrong_part_count() -> None:
    assert extract_timecode("INDEX 01 07:33") is None
    assert extract_timecode("INDEX 01 00:07:33:70") is None
    assert extract_timecode("INDEX 01") is None


def test_milliseconds_to_seconds_rounded() -> None:
    assert milliseconds_to_seconds_rounded(2000) == 2
    assert milliseconds_to_seconds_rounded(1499) == 1
    assert milliseconds_to_seconds_rounded(1500) == 2
    assert milliseconds_to_seconds_rounded(0) == 0
