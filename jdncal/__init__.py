"""JDN Calendar Conversion.

This package converts dates between the Julian Day Number/Count and the
Gregorian, Julian, Islamic and Hebrew calendars, and shifts periods of days
by days, months or years in any of those calendars.

Key modules:
- conversion: Per-calendar conversion algorithms and the calendar dispatch
- periods: Calendar period model and month/year arithmetic
- conventions: Calendar enums and the calendar registry
- names: Localized weekday and month names
- utils: Bridging to Python dates and date strings
"""

from jdncal.conventions import Calendar, UnsupportedCalendarError, get_calendar
from jdncal.conversion import (
    day_of_week,
    days_in_month,
    from_jdc,
    from_jdn,
    to_jdc,
    to_jdn,
)
from jdncal.periods import (
    CalendarPeriodModel,
    construct,
    convert_calendar,
    to_calendar_period,
    to_jdn_period,
    transpose_by_day,
    transpose_by_month,
    transpose_by_year,
)
from jdncal.types import (
    JDC,
    JDN,
    CalendarDate,
    CalendarError,
    CalendarPeriod,
    InvalidDayOfWeekError,
    InvalidPeriodError,
    JDNPeriod,
    NonIntegralDayCountError,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Types
    "JDN",
    "JDC",
    "CalendarDate",
    "CalendarPeriod",
    "JDNPeriod",
    "Calendar",
    "get_calendar",
    # Errors
    "CalendarError",
    "InvalidPeriodError",
    "NonIntegralDayCountError",
    "InvalidDayOfWeekError",
    "UnsupportedCalendarError",
    # Conversion
    "to_jdc",
    "to_jdn",
    "from_jdc",
    "from_jdn",
    "day_of_week",
    "days_in_month",
    # Period model
    "CalendarPeriodModel",
    "construct",
    "to_calendar_period",
    "to_jdn_period",
    "convert_calendar",
    "transpose_by_day",
    "transpose_by_month",
    "transpose_by_year",
]
