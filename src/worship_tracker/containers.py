"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from worship_tracker.adapters.reference_table import (
    FALLBACK_PRAYER_TIMES,
    StaticReferenceTable,
    default_reference_table,
    load_reference_csv,
)
from worship_tracker.config import Settings
from worship_tracker.services.prayer_times import PrayerTimesService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    reference_table: StaticReferenceTable
    prayer_times_service: PrayerTimesService
    now: Callable[[], datetime]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.reference_csv_path:
        reference_table = load_reference_csv(
            resolved_settings.reference_csv_path,
            location=resolved_settings.default_location,
        )
    else:
        reference_table = default_reference_table()
    prayer_times_service = PrayerTimesService(
        repository=reference_table,
        fallback=FALLBACK_PRAYER_TIMES,
        default_location=resolved_settings.default_location,
    )
    civil_tz = ZoneInfo(resolved_settings.civil_timezone)

    def now() -> datetime:
        return datetime.now(tz=civil_tz)

    return AppContainer(
        settings=resolved_settings,
        reference_table=reference_table,
        prayer_times_service=prayer_times_service,
        now=now,
    )
