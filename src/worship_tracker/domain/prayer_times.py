"""Domain models for prayer times."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from enum import StrEnum


@dataclass(frozen=True)
class Location:
    """A location identified by country and city slugs."""

    country: str
    city: str


@dataclass(frozen=True)
class DailyAstronomicalRecord:
    """Sun events for one calendar day at one location, as listed in a reference table."""

    day: date
    sunrise: str | None
    sunset: str | None
    solar_noon: str | None
    nautical_twilight_start: str | None
    nautical_twilight_end: str | None = None


@dataclass(frozen=True)
class PrayerTimeSet:
    """Display times for a single day, each formatted as "H:MM am/pm"."""

    fajr: str
    sunrise: str
    dhuhr: str
    asr: str
    sunset: str
    maghrib: str
    isha: str
    solar_midnight: str


class PrayerStatus(StrEnum):
    """Display status of a prayer relative to the current time."""

    UPCOMING = "upcoming"
    CURRENT = "current"
    PASSED = "passed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PrayerEntry:
    """A named prayer time expressed in minutes since midnight."""

    name: str
    minutes: int


@dataclass(frozen=True)
class DailyPrayerTimes:
    """Prayer times resolved for a day, flagged when the fallback set was used."""

    day: date
    location: str
    times: PrayerTimeSet
    is_fallback: bool = False


@dataclass(frozen=True)
class PrayerSchedule:
    """Next upcoming prayer and the status of each displayed entry."""

    next_prayer: str
    statuses: Mapping[str, PrayerStatus]
