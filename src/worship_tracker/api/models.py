"""Pydantic response models for the prayer times API."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from worship_tracker.domain.prayer_times import PrayerStatus


class PrayerTimesPayload(BaseModel):
    """Formatted prayer times for one day."""

    model_config = ConfigDict(from_attributes=True)

    fajr: str
    sunrise: str
    dhuhr: str
    asr: str
    sunset: str
    maghrib: str
    isha: str
    solar_midnight: str


class PrayerTimesResponse(BaseModel):
    """Prayer times for a day and location."""

    day: date
    display_date: str
    location: str
    is_fallback: bool
    times: PrayerTimesPayload


class PrayerScheduleResponse(PrayerTimesResponse):
    """Prayer times with next prayer and statuses at a given time."""

    now: str
    next_prayer: str
    statuses: dict[str, PrayerStatus]


class LocationPayload(BaseModel):
    """A known location."""

    model_config = ConfigDict(from_attributes=True)

    country: str
    city: str


class LocationsResponse(BaseModel):
    """Locations with fixed timetables and locations with reference data."""

    default_locations: list[LocationPayload]
    reference_locations: list[str]


class StaticTimesResponse(BaseModel):
    """Fixed timetable for a city."""

    city: str
    times: dict[str, str]
