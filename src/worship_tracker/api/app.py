"""FastAPI application factory."""

import logging
from datetime import date, time

from fastapi import FastAPI, HTTPException, Request

from worship_tracker.adapters.city_timetable import DEFAULT_LOCATIONS, lookup_city_times
from worship_tracker.api.models import (
    LocationPayload,
    LocationsResponse,
    PrayerScheduleResponse,
    PrayerTimesPayload,
    PrayerTimesResponse,
    StaticTimesResponse,
)
from worship_tracker.app_logging import configure_logging
from worship_tracker.containers import AppContainer
from worship_tracker.domain.clock import (
    format_clock_time,
    format_display_date,
    minutes_of_day,
    parse_tagged_clock_time,
)
from worship_tracker.domain.errors import ParseError
from worship_tracker.domain.prayer_times import DailyPrayerTimes


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Worship Tracker")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/prayer-times", response_model=PrayerTimesResponse)
    async def prayer_times(
        request: Request, day: date | None = None, location: str | None = None
    ) -> PrayerTimesResponse:
        """Return the prayer times for a day, defaulting to today."""
        state_container: AppContainer = request.app.state.container
        resolved_day = day or state_container.now().date()
        daily = state_container.prayer_times_service.get_prayer_times(
            resolved_day, location
        )
        return PrayerTimesResponse(**_daily_fields(daily))

    @app.get("/prayer-times/schedule", response_model=PrayerScheduleResponse)
    async def prayer_schedule(
        request: Request,
        day: date | None = None,
        now: str | None = None,
        location: str | None = None,
    ) -> PrayerScheduleResponse:
        """Return prayer times with the next prayer and each prayer's status."""
        state_container: AppContainer = request.app.state.container
        current = state_container.now()
        resolved_day = day or current.date()
        resolved_now = _parse_now(now) if now else current.time()
        daily, schedule = state_container.prayer_times_service.get_schedule(
            resolved_day, resolved_now, location
        )
        logger.debug(
            "Schedule for %s at %s: next=%s",
            daily.location,
            resolved_now,
            schedule.next_prayer,
        )
        return PrayerScheduleResponse(
            **_daily_fields(daily),
            now=format_clock_time(minutes_of_day(resolved_now)),
            next_prayer=schedule.next_prayer,
            statuses=dict(schedule.statuses),
        )

    @app.get("/locations", response_model=LocationsResponse)
    async def locations(request: Request) -> LocationsResponse:
        """Return known locations."""
        state_container: AppContainer = request.app.state.container
        return LocationsResponse(
            default_locations=[
                LocationPayload.model_validate(location)
                for location in DEFAULT_LOCATIONS
            ],
            reference_locations=state_container.reference_table.locations(),
        )

    @app.get("/locations/{city}/static-times", response_model=StaticTimesResponse)
    async def static_times(city: str) -> StaticTimesResponse:
        """Return the fixed timetable for a city."""
        return StaticTimesResponse(city=city, times=lookup_city_times(city))

    return app


def _parse_now(value: str) -> time:
    """Parse a "now" query value in either clock format."""
    try:
        reading = parse_tagged_clock_time(value)
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    hour, minute = divmod(reading.minutes, 60)
    return time(hour=hour, minute=minute)


def _daily_fields(daily: DailyPrayerTimes) -> dict[str, object]:
    """Return the response fields shared by prayer time endpoints."""
    return {
        "day": daily.day,
        "display_date": format_display_date(daily.day),
        "location": daily.location,
        "is_fallback": daily.is_fallback,
        "times": PrayerTimesPayload.model_validate(daily.times),
    }
