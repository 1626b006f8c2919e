"""
Calendar registry.

Maps user-facing calendar names to the ``Calendar`` enum and holds the
package-wide default calendar.
"""

from typing import Dict, Union

from jdncal.conventions.types import Calendar
from jdncal.types import CalendarError


class UnsupportedCalendarError(CalendarError):
    """Raised when a calendar name or target is not supported."""


CALENDARS: Dict[str, Calendar] = {
    "GREGORIAN": Calendar.GREGORIAN,
    "JULIAN": Calendar.JULIAN,
    "ISLAMIC": Calendar.ISLAMIC,
    "HIJRI": Calendar.ISLAMIC,
    "HEBREW": Calendar.HEBREW,
    "JEWISH": Calendar.HEBREW,
}

_DEFAULT_CALENDAR = None  # Will be initialized on first use


def get_calendar(name: Union[str, Calendar]) -> Calendar:
    """Get a calendar by name (case-insensitive) or pass an enum member through."""
    if isinstance(name, Calendar):
        return name
    if not isinstance(name, str):
        raise UnsupportedCalendarError(
            f"Target calendar format not supported: {name}. Available: {list(CALENDARS.keys())}"
        )
    try:
        return CALENDARS[name.strip().upper()]
    except KeyError as exc:
        raise UnsupportedCalendarError(
            f"Target calendar format not supported: {name}. Available: {list(CALENDARS.keys())}"
        ) from exc


def get_default_calendar() -> Calendar:
    """Get default calendar, initializing if needed."""
    global _DEFAULT_CALENDAR
    if _DEFAULT_CALENDAR is None:
        _DEFAULT_CALENDAR = get_calendar("GREGORIAN")
    return _DEFAULT_CALENDAR


def set_default_calendar(calendar_name: Union[str, Calendar]) -> None:
    """Set the default calendar used when building periods from Python dates."""
    global _DEFAULT_CALENDAR
    _DEFAULT_CALENDAR = get_calendar(calendar_name)
