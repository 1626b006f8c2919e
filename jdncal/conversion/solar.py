"""
Gregorian and Julian calendar conversion (Meeus, Astronomical Algorithms ch. 7).

Years use astronomical numbering: 1 BCE is year 0, 44 BCE is year -43.
"""

import math

from jdncal.conversion.julian_day import truncate
from jdncal.types import JDC, CalendarDate

# Meeus constant for the March-based year count
_EPOCH_OFFSET = 1720994.5
_GREGORIAN_REFORM_ALPHA = 1867216.25


def _solar_to_jdc(date: CalendarDate, gregorian: bool) -> JDC:
    year, month = date.year, date.month
    day = date.day + (date.daytime or 0.0)

    # January and February count as months 13 and 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    c = -0.75 if year < 0 else 0.0
    jdc = truncate(365.25 * year + c) + truncate(30.6001 * (month + 1)) + day + _EPOCH_OFFSET

    if gregorian:
        a = math.floor(year / 100)
        jdc += 2 - a + math.floor(a / 4)

    return jdc


def _jdc_to_solar(jdc: JDC, gregorian: bool) -> CalendarDate:
    # Floor, not truncation, keeps days before JDN 0 in range
    jdc += 0.5
    z = math.floor(jdc)
    f = jdc - z

    if gregorian:
        alpha = math.floor((z - _GREGORIAN_REFORM_ALPHA) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    else:
        a = z

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    full_day = math.floor(day)
    return CalendarDate(year, month, full_day, daytime=day - full_day)


def gregorian_to_jdc(date: CalendarDate) -> JDC:
    """Convert a proleptic Gregorian date to a JDC."""
    return _solar_to_jdc(date, gregorian=True)


def julian_to_jdc(date: CalendarDate) -> JDC:
    """Convert a proleptic Julian date to a JDC."""
    return _solar_to_jdc(date, gregorian=False)


def jdc_to_gregorian(jdc: JDC) -> CalendarDate:
    """Convert a JDC to a proleptic Gregorian date with daytime."""
    return _jdc_to_solar(jdc, gregorian=True)


def jdc_to_julian(jdc: JDC) -> CalendarDate:
    """Convert a JDC to a proleptic Julian date with daytime."""
    return _jdc_to_solar(jdc, gregorian=False)


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_julian_leap_year(year: int) -> bool:
    return year % 4 == 0


def solar_days_in_month(year: int, month: int, gregorian: bool) -> int:
    """Month length in the Gregorian or Julian calendar."""
    if month == 2:
        leap = is_gregorian_leap_year(year) if gregorian else is_julian_leap_year(year)
        return 29 if leap else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31
