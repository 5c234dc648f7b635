"""Error kinds raised by the prayer times core."""

from datetime import date


class PrayerTimesError(Exception):
    """Base class for prayer times errors."""


class ParseError(PrayerTimesError, ValueError):
    """Raised when a time-of-day string matches neither accepted clock format."""

    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(f"Unrecognised time of day: {text!r}")


class InvalidRecordError(PrayerTimesError):
    """Raised when an astronomical record has missing or unparseable fields."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        self.field_name = field_name
        super().__init__(message)


class LookupMiss(PrayerTimesError, LookupError):
    """Raised when the reference table has no record for a location and date."""

    def __init__(self, location: str, day: date | None = None) -> None:
        self.location = location
        self.day = day
        if day is None:
            message = f"No reference data for location {location!r}"
        else:
            message = f"No reference data for {location!r} on {day.isoformat()}"
        super().__init__(message)
