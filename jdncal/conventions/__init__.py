"""Calendar conventions: enums and the calendar registry."""

from .calendars import (
    CALENDARS,
    UnsupportedCalendarError,
    get_calendar,
    get_default_calendar,
    set_default_calendar,
)
from .types import Calendar, HebrewMonth, NameFormat

__all__ = [
    # Enums
    "Calendar",
    "HebrewMonth",
    "NameFormat",
    # Registry
    "CALENDARS",
    "UnsupportedCalendarError",
    "get_calendar",
    "get_default_calendar",
    "set_default_calendar",
]
