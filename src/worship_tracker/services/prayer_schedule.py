"""Next prayer and per-prayer status for a given wall-clock time."""

from datetime import time
from types import MappingProxyType

from worship_tracker.domain.clock import minutes_of_day, parse_clock_time
from worship_tracker.domain.errors import ParseError
from worship_tracker.domain.prayer_times import (
    PrayerEntry,
    PrayerSchedule,
    PrayerStatus,
    PrayerTimeSet,
)

CURRENT_WINDOW_MINUTES = 15
NEXT_PRAYER_TOMORROW = "Fajr (tomorrow)"
NEXT_PRAYER_UNKNOWN = "Unknown"

PRAYER_FIELDS = (
    ("Fajr", "fajr"),
    ("Sunrise", "sunrise"),
    ("Dhuhr", "dhuhr"),
    ("Asr", "asr"),
    ("Sunset", "sunset"),
    ("Maghrib", "maghrib"),
    ("Isha", "isha"),
)
DISPLAY_FIELDS = (*PRAYER_FIELDS, ("Solar Midnight", "solar_midnight"))


def prayer_entries(times: PrayerTimeSet) -> list[PrayerEntry]:
    """Return the named prayer entries sorted by time of day.

    Raises ParseError when any entry cannot be read.
    """
    entries = [
        PrayerEntry(name=name, minutes=parse_clock_time(getattr(times, attr)))
        for name, attr in PRAYER_FIELDS
    ]
    return sorted(entries, key=lambda entry: entry.minutes)


def next_prayer(times: PrayerTimeSet, now: time) -> str:
    """Return the name of the first prayer after ``now``."""
    try:
        entries = prayer_entries(times)
    except ParseError:
        return NEXT_PRAYER_UNKNOWN
    current = minutes_of_day(now)
    for entry in entries:
        if entry.minutes > current:
            return entry.name
    return NEXT_PRAYER_TOMORROW


def prayer_status(time_text: str | None, now: time) -> PrayerStatus:
    """Classify a prayer time as upcoming, current or passed at ``now``."""
    if not time_text:
        return PrayerStatus.UNKNOWN
    try:
        start = parse_clock_time(time_text)
    except ParseError:
        return PrayerStatus.UNKNOWN
    current = minutes_of_day(now)
    if current < start:
        return PrayerStatus.UPCOMING
    if current <= start + CURRENT_WINDOW_MINUTES:
        return PrayerStatus.CURRENT
    return PrayerStatus.PASSED


def build_schedule(times: PrayerTimeSet, now: time) -> PrayerSchedule:
    """Return the next prayer and the status of every displayed entry."""
    statuses = {
        name: prayer_status(getattr(times, attr), now) for name, attr in DISPLAY_FIELDS
    }
    return PrayerSchedule(
        next_prayer=next_prayer(times, now), statuses=MappingProxyType(statuses)
    )
