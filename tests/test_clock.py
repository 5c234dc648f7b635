"""Tests for time-of-day arithmetic."""

from datetime import date, time

import pytest

from worship_tracker.domain.clock import (
    ClockFormat,
    add_minutes,
    format_clock_time,
    format_display_date,
    midpoint,
    minutes_of_day,
    parse_clock_time,
    parse_tagged_clock_time,
)
from worship_tracker.domain.errors import ParseError


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("00:00", 0),
        ("05:35", 335),
        ("12:15", 735),
        ("23:59", 1439),
        ("7:05", 425),
    ],
)
def test_parse_24_hour_times(text: str, expected: int) -> None:
    assert parse_clock_time(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12:00 am", 0),
        ("12:15 am", 15),
        ("5:35 am", 335),
        ("12:15 pm", 735),
        ("2:58 pm", 898),
        ("11:59 pm", 1439),
        ("8:58PM", 1258),
    ],
)
def test_parse_12_hour_times(text: str, expected: int) -> None:
    assert parse_clock_time(text) == expected


def test_tagged_parser_reports_format() -> None:
    assert parse_tagged_clock_time("17:42").clock_format is ClockFormat.H24
    assert parse_tagged_clock_time("5:42 pm").clock_format is ClockFormat.H12
    assert parse_tagged_clock_time(" 06:48 ").minutes == 408


@pytest.mark.parametrize(
    "text",
    ["", "noon", "24:00", "12:60", "0:15 am", "13:00 pm", "5:3 am", "05:35:00", "5 pm"],
)
def test_parse_rejects_malformed_times(text: str) -> None:
    with pytest.raises(ParseError):
        parse_clock_time(text)


def test_parse_rejects_non_strings() -> None:
    with pytest.raises(ParseError):
        parse_clock_time(None)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (0, "12:00 am"),
        (15, "12:15 am"),
        (335, "5:35 am"),
        (720, "12:00 pm"),
        (1082, "6:02 pm"),
        (1439, "11:59 pm"),
        (1455, "12:15 am"),
    ],
)
def test_format_clock_time(minutes: int, expected: str) -> None:
    assert format_clock_time(minutes) == expected


def test_format_then_parse_returns_minutes_of_day() -> None:
    for minutes in range(1440):
        assert parse_clock_time(format_clock_time(minutes)) == minutes


def test_midpoint_rounds_toward_earlier_time() -> None:
    assert midpoint(735, 1062) == 898
    assert midpoint(1062, 1455) == 1258
    assert midpoint(10, 11) == 10


def test_midpoint_does_not_wrap() -> None:
    assert midpoint(1062, 15) == 538


def test_add_minutes_is_not_reduced() -> None:
    assert add_minutes(1430, 20) == 1450


def test_minutes_of_day_ignores_seconds() -> None:
    assert minutes_of_day(time(12, 20, 59)) == 740


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2025, 3, 1), "Saturday, March 1st, 2025"),
        (date(2025, 3, 2), "Sunday, March 2nd, 2025"),
        (date(2025, 3, 3), "Monday, March 3rd, 2025"),
        (date(2025, 3, 11), "Tuesday, March 11th, 2025"),
        (date(2025, 3, 22), "Saturday, March 22nd, 2025"),
    ],
)
def test_format_display_date(day: date, expected: str) -> None:
    assert format_display_date(day) == expected
