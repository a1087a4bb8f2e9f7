"""Unit and property tests for pocketutils.fmt.durations."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pocketutils.fmt.durations import format_duration, format_seconds, parse_duration


@pytest.mark.parametrize(
    "milliseconds, leading, ms, expected",
    [
        (0, False, False, "0:00"),
        (0, True, True, "00:00.000"),
        (5_000, False, False, "0:05"),
        (65_000, True, False, "01:05"),
        (65_250, False, True, "1:05.250"),
        (3_600_000, False, False, "1:00:00"),
        (3_723_004, True, True, "01:02:03.004"),
        (36_000_000, False, False, "10:00:00"),
        (1_999.9, False, True, "0:01.999"),
    ],
)
def test_format_duration(milliseconds, leading, ms, expected):
    assert format_duration(milliseconds, leading=leading, ms=ms) == expected


def test_hours_force_minute_padding():
    """Once hours are shown the minutes are padded even without leading."""
    assert format_duration(3_660_000) == "1:01:00"


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, ""),
        (59, "59s"),
        (60, "1m"),
        (3_661, "1h 1m 1s"),
        (86_400, "1d"),
        (90_061, "1d 1h 1m 1s"),
        (172_805, "2d 5s"),
    ],
)
def test_format_seconds(seconds, expected):
    assert format_seconds(seconds) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("00:00:00", 0),
        ("00:00:01", 1_000),
        ("01:02:03", 3_723_000),
        ("01:02:03.5", 3_723_500),
        ("01:02:03.05", 3_723_050),
        ("01:02:03.123", 3_723_123),
        ("  00:10:00  ", 600_000),
        ("59:59:59.999", 215_999_999),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", None, "1:02:03", "01:02", "01:02:03.1234", "aa:bb:cc", "60:00:00", "00:60:00", "00:00:60"],
)
def test_parse_duration_invalid_returns_zero(text):
    assert parse_duration(text) == 0


@pytest.mark.parametrize("text", ["٠١:٠٢:٠٣", "０１:０２:０３", "01:02:03.٥"])
def test_parse_duration_rejects_non_ascii_digits(text):
    """Only ASCII digits count as duration fields."""
    assert parse_duration(text) == 0


def test_parse_duration_logs_rejections(log_records):
    parse_duration("00:99:00")
    parse_duration("nope")
    assert len(log_records) == 2


@pytest.mark.property
@given(st.integers(min_value=0, max_value=3_599_999))
def test_round_trip_whole_seconds(n):
    """Parsing a formatted duration recovers it truncated to whole seconds."""
    assert parse_duration("00:" + format_duration(n, leading=True)) == n // 1000 * 1000


@pytest.mark.property
@given(st.integers(min_value=0, max_value=3_599_999))
def test_round_trip_with_milliseconds(n):
    assert parse_duration("00:" + format_duration(n, leading=True, ms=True)) == n
