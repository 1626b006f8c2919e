"""Conversion between calendar dates and Julian Day Numbers/Counts."""

from .factory import (
    CONVERTERS,
    CalendarConverter,
    day_of_week,
    days_in_month,
    from_jdc,
    from_jdn,
    get_converter,
    months_of_year,
    to_jdc,
    to_jdn,
)
from .hebrew import hebrew_to_jdc, jdc_to_hebrew, pesach_jdc, tishri_jdc
from .islamic import islamic_to_jdc, is_islamic_leap_year, jdc_to_islamic
from .solar import (
    gregorian_to_jdc,
    is_gregorian_leap_year,
    is_julian_leap_year,
    jdc_to_gregorian,
    jdc_to_julian,
    julian_to_jdc,
)
from .year_character import HebrewYearCharacter, is_hebrew_leap_year, resolve_year_character

__all__ = [
    # Dispatch
    "CONVERTERS",
    "CalendarConverter",
    "get_converter",
    "to_jdc",
    "to_jdn",
    "from_jdc",
    "from_jdn",
    "day_of_week",
    "days_in_month",
    "months_of_year",
    # Per-calendar
    "gregorian_to_jdc",
    "jdc_to_gregorian",
    "julian_to_jdc",
    "jdc_to_julian",
    "islamic_to_jdc",
    "jdc_to_islamic",
    "hebrew_to_jdc",
    "jdc_to_hebrew",
    "pesach_jdc",
    "tishri_jdc",
    # Leap years
    "is_gregorian_leap_year",
    "is_julian_leap_year",
    "is_islamic_leap_year",
    "is_hebrew_leap_year",
    # Hebrew year character
    "HebrewYearCharacter",
    "resolve_year_character",
]
