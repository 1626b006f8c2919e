"""
Hebrew calendar conversion.

Dates are anchored on 15 Nisan (Pesach), whose Julian or Gregorian date comes
from Gauss's Pesach formula. 1 Tishri of the following Hebrew year always
falls 163 days after Pesach, so the year's month-length table (selected by
its year length) gives the offset of any date from Pesach.

Months use a fixed 13-slot numbering: 1 Tishri .. 6 Adar (Adar I), 7 Adar II,
8 Nisan .. 13 Elul. Month 7 has no days in common years.
"""

import math
from typing import Dict, Tuple

from jdncal.conversion.julian_day import split_daytime
from jdncal.conversion.solar import gregorian_to_jdc, jdc_to_julian, julian_to_jdc
from jdncal.conversion.year_character import resolve_year_character
from jdncal.types import JDC, JDN, CalendarDate

# Hebrew year = Julian/Gregorian year of Pesach + 3760
ANNO_MUNDI_OFFSET = 3760
# Days from 15 Nisan to 1 Tishri of the next year
PESACH_TO_TISHRI = 163
NISAN = 8

# Month lengths per year length, Tishri first
MONTH_LENGTHS: Dict[int, Tuple[int, ...]] = {
    353: (30, 29, 29, 29, 30, 29, 0, 30, 29, 30, 29, 30, 29),
    354: (30, 29, 30, 29, 30, 29, 0, 30, 29, 30, 29, 30, 29),
    355: (30, 30, 30, 29, 30, 29, 0, 30, 29, 30, 29, 30, 29),
    383: (30, 29, 29, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29),
    384: (30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29),
    385: (30, 30, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29),
}

COMMON_YEAR_MONTHS = (1, 2, 3, 4, 5, 6, 8, 9, 10, 11, 12, 13)
LEAP_YEAR_MONTHS = tuple(range(1, 14))


def month_lengths(year: int) -> Tuple[int, ...]:
    return MONTH_LENGTHS[resolve_year_character(year).year_length]


def hebrew_months_of_year(year: int) -> Tuple[int, ...]:
    """Month numbers that exist in the given Hebrew year, in order."""
    if resolve_year_character(year).is_leap:
        return LEAP_YEAR_MONTHS
    return COMMON_YEAR_MONTHS


def hebrew_days_in_month(year: int, month: int) -> int:
    return month_lengths(year)[month - 1]


def pesach_jdc(year: int) -> JDC:
    """JDC (midnight) of 15 Nisan of a Hebrew year.

    Gauss's formula yields a day in March (or April, when the day exceeds 31)
    of the Gregorian year from 1583 on, of the Julian year before that.
    """
    jj = year - ANNO_MUNDI_OFFSET
    if jj >= 1583:
        century = math.floor(jj / 100)
        s = math.floor((3 * century - 5) / 4)
    else:
        s = 0

    a1 = (12 * jj + 12) % 19
    b1 = jj % 4
    q = -1.904412361576 + 1.554241796621 * a1 + 0.25 * b1 - 0.003177794022 * jj + s
    whole = math.floor(q)
    weekday = (whole + 3 * jj + 5 * b1 + 2 - s) % 7
    fraction = q - whole

    # Pesach may not fall on Monday, Wednesday or Friday
    if weekday in (2, 4, 6):
        day = whole + 23
    elif weekday == 1 and a1 > 6 and fraction >= 0.632870370:
        day = whole + 24
    elif weekday == 0 and a1 > 11 and fraction >= 0.897723765:
        day = whole + 23
    else:
        day = whole + 22

    month = 3
    if day > 31:
        month = 4
        day -= 31

    if jj >= 1583:
        return gregorian_to_jdc(CalendarDate(jj, month, day))
    return julian_to_jdc(CalendarDate(jj, month, day))


def tishri_jdc(year: int) -> JDC:
    """JDC (midnight) of 1 Tishri of a Hebrew year."""
    length = resolve_year_character(year).year_length
    return pesach_jdc(year) + PESACH_TO_TISHRI - length


def hebrew_to_jdc(date: CalendarDate) -> JDC:
    """Convert a Hebrew date to a JDC."""
    character = resolve_year_character(date.year)
    lengths = MONTH_LENGTHS[character.year_length]

    offset = sum(lengths[: date.month - 1]) + date.day - 1
    # Tishri 1 lies (year_length - 163) days before Pesach
    day_diff = offset - (character.year_length - PESACH_TO_TISHRI)
    return pesach_jdc(date.year) + day_diff + (date.daytime or 0.0)


def jdc_to_hebrew(jdc: JDC) -> CalendarDate:
    """Convert a JDC to a Hebrew date with daytime."""
    jdn, daytime = split_daytime(jdc)
    year = jdc_to_julian(jdc).year + ANNO_MUNDI_OFFSET
    next_tishri = pesach_jdc(year) + PESACH_TO_TISHRI

    if jdn < math.floor(next_tishri + 0.5):
        # Between 1 Tishri and the end of Elul of this year
        start = next_tishri - resolve_year_character(year).year_length
    else:
        year += 1
        start = next_tishri

    remaining: JDN = jdn - math.floor(start + 0.5)
    month = 1
    for length in month_lengths(year):
        if remaining < length:
            break
        remaining -= length
        month += 1

    return CalendarDate(year, month, remaining + 1, daytime=daytime)
