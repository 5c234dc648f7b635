"""Time-of-day arithmetic on minutes since midnight."""

import re
from dataclasses import dataclass
from datetime import date, time
from enum import StrEnum

from worship_tracker.domain.errors import ParseError

MINUTES_PER_DAY = 1440
NOON = 720

_LAST_HOUR = 23
_LAST_MINUTE = 59
_HALF_DAY_HOURS = 12

_H24_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_H12_PATTERN = re.compile(r"^(\d{1,2}):(\d{2}) ?([ap]m)$", re.IGNORECASE)


class ClockFormat(StrEnum):
    """Which clock convention a time string was written in."""

    H24 = "24h"
    H12 = "12h"


@dataclass(frozen=True)
class ClockReading:
    """A parsed time of day together with the format it was read from."""

    minutes: int
    clock_format: ClockFormat


def parse_tagged_clock_time(text: str) -> ClockReading:
    """Parse "HH:MM" or "H:MM am/pm" and report which shape matched."""
    if not isinstance(text, str):
        raise ParseError(text)
    cleaned = text.strip()

    match = _H24_PATTERN.match(cleaned)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > _LAST_HOUR or minute > _LAST_MINUTE:
            raise ParseError(text)
        return ClockReading(hour * 60 + minute, ClockFormat.H24)

    match = _H12_PATTERN.match(cleaned)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if not 1 <= hour <= _HALF_DAY_HOURS or minute > _LAST_MINUTE:
            raise ParseError(text)
        hour %= _HALF_DAY_HOURS
        if match.group(3).lower() == "pm":
            hour += _HALF_DAY_HOURS
        return ClockReading(hour * 60 + minute, ClockFormat.H12)

    raise ParseError(text)


def parse_clock_time(text: str) -> int:
    """Return minutes since midnight for a 24-hour or 12-hour time string."""
    return parse_tagged_clock_time(text).minutes


def format_clock_time(minutes: int) -> str:
    """Format minutes since midnight as "H:MM am/pm", rolling past midnight."""
    hour, minute = divmod(minutes % MINUTES_PER_DAY, 60)
    meridiem = "pm" if hour >= _HALF_DAY_HOURS else "am"
    display_hour = hour % _HALF_DAY_HOURS or _HALF_DAY_HOURS
    return f"{display_hour}:{minute:02d} {meridiem}"


def midpoint(start: int, end: int) -> int:
    """Return the point halfway between two times, rounded toward the earlier one.

    No wraparound is applied: when ``end`` belongs to the next day the caller
    adds a full day to it first.
    """
    return start + (end - start) // 2


def add_minutes(minutes: int, delta: int) -> int:
    """Shift a time by ``delta`` minutes without reducing modulo one day."""
    return minutes + delta


def minutes_of_day(value: time) -> int:
    """Return minutes since midnight for a wall-clock time, ignoring seconds."""
    return value.hour * 60 + value.minute


def format_display_date(day: date) -> str:
    """Format a date like "Saturday, March 1st, 2025"."""
    if 11 <= day.day % 100 <= 13:  # noqa: PLR2004
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day.day % 10, "th")
    return f"{day.strftime('%A, %B')} {day.day}{suffix}, {day.year}"
