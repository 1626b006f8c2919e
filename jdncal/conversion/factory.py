"""
Calendar dispatch: one entry point for every supported calendar.
"""

import dataclasses
from typing import Callable, Dict, NamedTuple, Tuple, Union

from jdncal.conventions.calendars import get_calendar
from jdncal.conventions.types import Calendar
from jdncal.conversion import julian_day
from jdncal.conversion.hebrew import (
    hebrew_days_in_month,
    hebrew_months_of_year,
    hebrew_to_jdc,
    jdc_to_hebrew,
)
from jdncal.conversion.islamic import islamic_days_in_month, islamic_to_jdc, jdc_to_islamic
from jdncal.conversion.solar import (
    gregorian_to_jdc,
    jdc_to_gregorian,
    jdc_to_julian,
    julian_to_jdc,
    solar_days_in_month,
)
from jdncal.types import JDC, JDN, CalendarDate

CalendarLike = Union[str, Calendar]

_TWELVE_MONTHS = tuple(range(1, 13))


class CalendarConverter(NamedTuple):
    """Conversion functions of one calendar."""

    to_jdc: Callable[[CalendarDate], JDC]
    from_jdc: Callable[[JDC], CalendarDate]
    days_in_month: Callable[[int, int], int]
    months_of_year: Callable[[int], Tuple[int, ...]]


CONVERTERS: Dict[Calendar, CalendarConverter] = {
    Calendar.GREGORIAN: CalendarConverter(
        gregorian_to_jdc,
        jdc_to_gregorian,
        lambda year, month: solar_days_in_month(year, month, gregorian=True),
        lambda year: _TWELVE_MONTHS,
    ),
    Calendar.JULIAN: CalendarConverter(
        julian_to_jdc,
        jdc_to_julian,
        lambda year, month: solar_days_in_month(year, month, gregorian=False),
        lambda year: _TWELVE_MONTHS,
    ),
    Calendar.ISLAMIC: CalendarConverter(
        islamic_to_jdc,
        jdc_to_islamic,
        islamic_days_in_month,
        lambda year: _TWELVE_MONTHS,
    ),
    Calendar.HEBREW: CalendarConverter(
        hebrew_to_jdc,
        jdc_to_hebrew,
        hebrew_days_in_month,
        hebrew_months_of_year,
    ),
}


def get_converter(calendar: CalendarLike) -> CalendarConverter:
    """Look up the converter of a calendar given by enum member or name."""
    return CONVERTERS[get_calendar(calendar)]


def to_jdc(calendar: CalendarLike, date: CalendarDate) -> JDC:
    """
    Convert a calendar date to a Julian Day Count.

    Args:
        calendar: Calendar the date is expressed in
        date: Date, optionally with a daytime fraction

    Returns:
        JDC of the date (midnight is ``.5`` when no daytime is given)
    """
    return get_converter(calendar).to_jdc(date)


def to_jdn(calendar: CalendarLike, date: CalendarDate) -> JDN:
    """Convert a calendar date to a Julian Day Number."""
    return julian_day.to_jdn(to_jdc(calendar, date))


def from_jdc(calendar: CalendarLike, jdc: JDC) -> CalendarDate:
    """
    Convert a Julian Day Count to a calendar date.

    The result carries the day of week and the fraction of the day elapsed
    since midnight.
    """
    date = get_converter(calendar).from_jdc(jdc)
    return dataclasses.replace(date, day_of_week=julian_day.day_of_week(jdc))


def from_jdn(calendar: CalendarLike, jdn: JDN) -> CalendarDate:
    """Convert a Julian Day Number to a calendar date (daytime is noon, 0.5)."""
    return from_jdc(calendar, jdn)


def day_of_week(jdc: JDC) -> int:
    """Day of week of a JDC: 0 = Sunday .. 6 = Saturday."""
    return julian_day.day_of_week(jdc)


def days_in_month(calendar: CalendarLike, date: CalendarDate) -> int:
    """Number of days in the month containing ``date``."""
    return get_converter(calendar).days_in_month(date.year, date.month)


def months_of_year(calendar: CalendarLike, year: int) -> Tuple[int, ...]:
    """Month numbers of a year, in order (13 for Hebrew leap years)."""
    return get_converter(calendar).months_of_year(year)
