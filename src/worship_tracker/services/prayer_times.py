"""Prayer time derivation from daily sun events."""

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import Protocol

from worship_tracker.domain.clock import (
    MINUTES_PER_DAY,
    NOON,
    add_minutes,
    format_clock_time,
    midpoint,
    parse_clock_time,
)
from worship_tracker.domain.errors import InvalidRecordError, LookupMiss, ParseError
from worship_tracker.domain.prayer_times import (
    DailyAstronomicalRecord,
    DailyPrayerTimes,
    PrayerSchedule,
    PrayerTimeSet,
)
from worship_tracker.services.prayer_schedule import build_schedule

MAGHRIB_OFFSET_MINUTES = 20

_REQUIRED_FIELDS = ("nautical_twilight_start", "sunrise", "solar_noon", "sunset")

_logger = logging.getLogger(__name__)


class ReferenceDataRepository(Protocol):
    """Source of daily astronomical records."""

    def get_record(self, location: str, day: date) -> DailyAstronomicalRecord:
        """Return the record for a location and day or raise LookupMiss."""


def derive_prayer_times(record: DailyAstronomicalRecord) -> PrayerTimeSet:
    """Compute the display prayer times for one astronomical record."""
    minutes = _parse_record(record)
    fajr = minutes["nautical_twilight_start"]
    sunrise = minutes["sunrise"]
    dhuhr = minutes["solar_noon"]
    sunset = minutes["sunset"]

    solar_midnight = add_minutes(dhuhr, NOON)
    asr = midpoint(dhuhr, sunset)
    maghrib = add_minutes(sunset, MAGHRIB_OFFSET_MINUTES)

    # Raw comparison: a solar midnight below sunset belongs to the next day.
    midnight_abs = solar_midnight
    if midnight_abs < sunset:
        midnight_abs += MINUTES_PER_DAY
    isha = midpoint(sunset, midnight_abs)

    return PrayerTimeSet(
        fajr=format_clock_time(fajr),
        sunrise=format_clock_time(sunrise),
        dhuhr=format_clock_time(dhuhr),
        asr=format_clock_time(asr),
        sunset=format_clock_time(sunset),
        maghrib=format_clock_time(maghrib),
        isha=format_clock_time(isha),
        solar_midnight=format_clock_time(solar_midnight),
    )


def _parse_record(record: DailyAstronomicalRecord) -> dict[str, int]:
    """Parse the required record fields into minutes since midnight."""
    parsed: dict[str, int] = {}
    for name in _REQUIRED_FIELDS:
        value = getattr(record, name)
        if not value:
            raise InvalidRecordError(
                f"Record for {record.day} is missing {name}", field_name=name
            )
        try:
            parsed[name] = parse_clock_time(value)
        except ParseError as exc:
            raise InvalidRecordError(
                f"Record for {record.day} has invalid {name}: {value!r}",
                field_name=name,
            ) from exc
    return parsed


@dataclass
class PrayerTimesService:
    """Resolves prayer times for a day, substituting a fixed set on failure."""

    repository: ReferenceDataRepository
    fallback: PrayerTimeSet
    default_location: str

    def get_prayer_times(
        self, day: date, location: str | None = None
    ) -> DailyPrayerTimes:
        """Return derived prayer times, or the fallback set if derivation fails."""
        resolved_location = location or self.default_location
        try:
            record = self.repository.get_record(resolved_location, day)
            times = derive_prayer_times(record)
        except LookupMiss as exc:
            _logger.warning("Using fallback prayer times: %s", exc)
            return DailyPrayerTimes(
                day=day,
                location=resolved_location,
                times=self.fallback,
                is_fallback=True,
            )
        except InvalidRecordError:
            _logger.exception(
                "Invalid astronomical record, using fallback prayer times",
                extra={"location": resolved_location, "day": day.isoformat()},
            )
            return DailyPrayerTimes(
                day=day,
                location=resolved_location,
                times=self.fallback,
                is_fallback=True,
            )
        return DailyPrayerTimes(day=day, location=resolved_location, times=times)

    def get_schedule(
        self, day: date, now: time, location: str | None = None
    ) -> tuple[DailyPrayerTimes, PrayerSchedule]:
        """Return the day's prayer times with next prayer and statuses at ``now``."""
        daily = self.get_prayer_times(day, location)
        return daily, build_schedule(daily.times, now)

