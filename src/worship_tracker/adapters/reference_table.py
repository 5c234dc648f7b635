"""Reference sun-event tables used to derive prayer times."""

import csv
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from worship_tracker.domain.errors import LookupMiss
from worship_tracker.domain.prayer_times import (
    DailyAstronomicalRecord,
    Location,
    PrayerTimeSet,
)
from worship_tracker.services.prayer_times import ReferenceDataRepository

MILTON_KEYNES = Location(country="uk", city="milton-keynes")

_TIME_CELL_PATTERN = re.compile(r"(\d{2}:\d{2})")
_CSV_TIME_COLUMNS = (
    "sunrise",
    "sunset",
    "solar_noon",
    "nautical_twilight_start",
    "nautical_twilight_end",
)

_logger = logging.getLogger(__name__)


def _record(day: date, *times: str) -> DailyAstronomicalRecord:
    sunrise, sunset, solar_noon, twilight_start, twilight_end = times
    return DailyAstronomicalRecord(
        day=day,
        sunrise=sunrise,
        sunset=sunset,
        solar_noon=solar_noon,
        nautical_twilight_start=twilight_start,
        nautical_twilight_end=twilight_end,
    )


# sunrise, sunset, solar noon, nautical twilight start, nautical twilight end
MILTON_KEYNES_RECORDS = (
    _record(date(2025, 3, 1), "06:48", "17:42", "12:15", "05:35", "18:56"),
    _record(date(2025, 3, 2), "06:46", "17:44", "12:15", "05:33", "18:57"),
    _record(date(2025, 3, 3), "06:44", "17:46", "12:14", "05:31", "18:59"),
    _record(date(2025, 3, 4), "06:41", "17:48", "12:14", "05:29", "19:01"),
    _record(date(2025, 3, 5), "06:39", "17:50", "12:14", "05:26", "19:03"),
)

FALLBACK_PRAYER_TIMES = PrayerTimeSet(
    fajr="5:15 am",
    sunrise="6:45 am",
    dhuhr="12:30 pm",
    asr="3:45 pm",
    sunset="5:42 pm",
    maghrib="6:50 pm",
    isha="8:00 pm",
    solar_midnight="12:15 am",
)


@dataclass
class StaticReferenceTable(ReferenceDataRepository):
    """In-memory reference table keyed by city slug and date."""

    records: dict[str, dict[date, DailyAstronomicalRecord]] = field(
        default_factory=dict
    )

    def add_records(
        self, location: str, records: Iterable[DailyAstronomicalRecord]
    ) -> None:
        """Add records for a location, replacing any for the same day."""
        table = self.records.setdefault(location, {})
        for record in records:
            table[record.day] = record

    def get_record(self, location: str, day: date) -> DailyAstronomicalRecord:
        """Return the record for a location and day."""
        table = self.records.get(location)
        if table is None:
            raise LookupMiss(location)
        record = table.get(day)
        if record is None:
            raise LookupMiss(location, day)
        return record

    def locations(self) -> list[str]:
        """Return the locations with at least one record."""
        return sorted(self.records)

    def available_days(self, location: str) -> list[date]:
        """Return the days listed for a location in ascending order."""
        return sorted(self.records.get(location, {}))


def default_reference_table() -> StaticReferenceTable:
    """Return the built-in Milton Keynes sample table."""
    table = StaticReferenceTable()
    table.add_records(MILTON_KEYNES.city, MILTON_KEYNES_RECORDS)
    return table


def clean_time_cell(text: str | None) -> str:
    """Extract "HH:MM" from a table cell such as "06:48?(101)"."""
    if not text:
        return ""
    match = _TIME_CELL_PATTERN.search(text)
    return match.group(1) if match else ""


def load_reference_csv(path: str | Path, location: str) -> StaticReferenceTable:
    """Load a sun-event CSV export into a reference table for one location.

    Expected columns: date (YYYY-MM-DD), sunrise, sunset, solar_noon,
    nautical_twilight_start, nautical_twilight_end. Time cells are cleaned of
    trailing annotations; cells without a time are kept empty. Rows without
    an ISO date are skipped, so lookups for them miss.
    """
    records = []
    with Path(path).open(newline="", encoding="utf-8") as handle:
        for line_number, row in enumerate(csv.DictReader(handle), start=2):
            raw_day = (row.get("date") or "").strip()
            try:
                day = date.fromisoformat(raw_day)
            except ValueError:
                _logger.warning(
                    "Skipping reference row %s in %s: invalid date %r",
                    line_number,
                    path,
                    raw_day,
                )
                continue
            times = [clean_time_cell(row.get(column)) for column in _CSV_TIME_COLUMNS]
            records.append(_record(day, *times))

    _logger.info(
        "Loaded %s reference records for %s from %s", len(records), location, path
    )
    table = StaticReferenceTable()
    table.add_records(location, records)
    return table
