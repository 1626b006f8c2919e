"""
Month and year arithmetic on calendar dates.
"""

from jdncal.conventions.calendars import get_calendar
from jdncal.conventions.types import Calendar, HebrewMonth
from jdncal.conversion.factory import CalendarLike, days_in_month, months_of_year
from jdncal.types import CalendarDate

# Any 19 consecutive Hebrew years hold 12 common and 7 leap years
_HEBREW_CYCLE_YEARS = 19
_HEBREW_CYCLE_MONTHS = 235


def months_in_year(calendar: CalendarLike, year: int) -> int:
    return len(months_of_year(calendar, year))


def is_end_of_month(calendar: CalendarLike, date: CalendarDate) -> bool:
    return date.day == days_in_month(calendar, date)


def clamp_day(calendar: CalendarLike, date: CalendarDate) -> CalendarDate:
    """Move a day past the end of its month back to the month's last day."""
    last_day = days_in_month(calendar, CalendarDate(date.year, date.month, 1))
    return CalendarDate(date.year, date.month, min(date.day, last_day))


def _month_ordinal(calendar: Calendar, date: CalendarDate) -> int:
    months = months_of_year(calendar, date.year)
    month = date.month
    if month not in months and month == HebrewMonth.ADAR_II.value:
        # Adar II written for a common year means its single Adar
        month = HebrewMonth.ADAR.value
    return months.index(month)


def _shift_hebrew_months(date: CalendarDate, months: int) -> CalendarDate:
    year = date.year
    cycles, offset = divmod(_month_ordinal(Calendar.HEBREW, date) + months, _HEBREW_CYCLE_MONTHS)
    year += cycles * _HEBREW_CYCLE_YEARS

    # At most 19 iterations
    year_months = months_of_year(Calendar.HEBREW, year)
    while offset >= len(year_months):
        offset -= len(year_months)
        year += 1
        year_months = months_of_year(Calendar.HEBREW, year)

    return CalendarDate(year, year_months[offset], date.day)


def shift_months(calendar: CalendarLike, date: CalendarDate, months: int) -> CalendarDate:
    """Add months to a date, clamping the day to the target month's length.

    Args:
        calendar: Calendar the date is expressed in
        date: Start date
        months: Number of months to add (may be negative)

    Returns:
        Shifted date without day of week or daytime
    """
    calendar = get_calendar(calendar)

    if calendar == Calendar.HEBREW:
        shifted = _shift_hebrew_months(date, months)
    else:
        new_year, new_month = divmod(date.year * 12 + date.month - 1 + months, 12)
        shifted = CalendarDate(new_year, new_month + 1, date.day)

    return clamp_day(calendar, shifted)


def shift_years(calendar: CalendarLike, date: CalendarDate, years: int) -> CalendarDate:
    """Add years to a date, clamping the day to the target month's length.

    A Hebrew Adar II date moved into a common year lands in Adar.
    """
    calendar = get_calendar(calendar)
    new_year = date.year + years
    month = date.month

    if calendar == Calendar.HEBREW and month not in months_of_year(calendar, new_year):
        month = HebrewMonth.ADAR.value

    return clamp_day(calendar, CalendarDate(new_year, month, date.day))
