"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from worship_tracker.adapters.reference_table import (
    FALLBACK_PRAYER_TIMES,
    MILTON_KEYNES_RECORDS,
    StaticReferenceTable,
)
from worship_tracker.config import Settings
from worship_tracker.containers import AppContainer
from worship_tracker.domain.errors import LookupMiss
from worship_tracker.domain.prayer_times import DailyAstronomicalRecord
from worship_tracker.services.prayer_times import (
    PrayerTimesService,
    ReferenceDataRepository,
)

FIRST_OF_MARCH = date(2025, 3, 1)


@dataclass
class RecordingReferenceRepository(ReferenceDataRepository):
    """In-memory reference repository that records lookups."""

    records: dict[tuple[str, date], DailyAstronomicalRecord] = field(
        default_factory=dict
    )
    lookups: list[tuple[str, date]] = field(default_factory=list)

    def get_record(self, location: str, day: date) -> DailyAstronomicalRecord:
        self.lookups.append((location, day))
        record = self.records.get((location, day))
        if record is None:
            raise LookupMiss(location, day)
        return record


def make_record(  # noqa: PLR0913
    *,
    day: date = FIRST_OF_MARCH,
    sunrise: str | None = "06:48",
    sunset: str | None = "17:42",
    solar_noon: str | None = "12:15",
    nautical_twilight_start: str | None = "05:35",
    nautical_twilight_end: str | None = "18:56",
) -> DailyAstronomicalRecord:
    return DailyAstronomicalRecord(
        day=day,
        sunrise=sunrise,
        sunset=sunset,
        solar_noon=solar_noon,
        nautical_twilight_start=nautical_twilight_start,
        nautical_twilight_end=nautical_twilight_end,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        default_location="milton-keynes",
        civil_timezone="Europe/London",
        reference_csv_path=None,
        environment="test",
    )


@pytest.fixture
def reference_table() -> StaticReferenceTable:
    table = StaticReferenceTable()
    table.add_records("milton-keynes", MILTON_KEYNES_RECORDS)
    return table


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 1, 12, 0, tzinfo=ZoneInfo("Europe/London"))


@pytest.fixture
def container(
    settings: Settings,
    reference_table: StaticReferenceTable,
    fixed_now: datetime,
) -> AppContainer:
    service = PrayerTimesService(
        repository=reference_table,
        fallback=FALLBACK_PRAYER_TIMES,
        default_location=settings.default_location,
    )
    return AppContainer(
        settings=settings,
        reference_table=reference_table,
        prayer_times_service=service,
        now=lambda: fixed_now,
    )
