"""
Arithmetic Islamic (Hijri) calendar conversion.

Uses the Meeus tabular algorithm: a 30-year cycle with 11 leap years, epoch
1 Muharram 1 AH = JDC 1948439.5 (Julian 622-07-16). The inverse goes through
the Julian calendar. Results are reliable from about JDN 100000 onwards.
"""

import math

from jdncal.conversion.solar import jdc_to_julian
from jdncal.types import JDC, CalendarDate

ISLAMIC_EPOCH = 1948439.5
_CYCLE_DAYS = 10631  # days in 30 lunar years


def is_islamic_leap_year(year: int) -> bool:
    """Leap years (355 days) are years 2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29 of the cycle."""
    return (11 * year + 14) % 30 < 11


def islamic_days_in_month(year: int, month: int) -> int:
    if month == 12 and is_islamic_leap_year(year):
        return 30
    return 30 if month % 2 == 1 else 29


def islamic_to_jdc(date: CalendarDate) -> JDC:
    """Convert an Islamic date to a JDC."""
    h, m = date.year, date.month
    n = date.day + math.floor(29.5001 * (m - 1) + 0.99)

    q = math.floor(h / 30)
    r = h % 30
    a = math.floor((11 * r + 3) / 30)
    w = 404 * q + 354 * r + 208 + a
    q1 = math.floor(w / 1461)
    q2 = w % 1461
    g = 621 + 4 * math.floor(7 * q + q1)
    k = math.floor(q2 / 365.2422)
    e = math.floor(365.2422 * k)
    j = q2 - e + n - 1
    x = g + k

    # j is a day of Julian year x; roll over into the next year if needed
    if j > 366 and x % 4 == 0:
        j -= 366
        x += 1
    elif j > 365 and x % 4 > 0:
        j -= 365
        x += 1

    return math.floor(365.25 * (x - 1)) + 1721423 + j - 0.5 + (date.daytime or 0.0)


def jdc_to_islamic(jdc: JDC) -> CalendarDate:
    """Convert a JDC to an Islamic date with daytime."""
    julian = jdc_to_julian(jdc)
    x, m, d = julian.year, julian.month, julian.day

    # Day of the Julian year
    w = 1 if x % 4 == 0 else 2
    n = math.trunc(275 * m / 9) - w * math.trunc((m + 9) / 12) + d - 30

    a = x - 623
    b = math.floor(a / 4)
    c = a - 4 * b
    c1 = 365.2501 * c
    c2 = math.floor(c1)
    if c1 - c2 > 0.5:
        c2 += 1

    dd = 1461 * b + 170 + c2
    q = math.floor(dd / _CYCLE_DAYS)
    r = dd % _CYCLE_DAYS
    j = math.floor(r / 354)
    k = r % 354
    o = math.floor((11 * j + 14) / 30)
    year = 30 * q + j + 1
    day_of_year = k - o + n - 1

    if day_of_year > 354:
        cl = year % 30
        dl = (11 * cl + 3) % 30
        if dl < 19:
            day_of_year -= 354
            year += 1
        else:
            day_of_year -= 355
            year += 1
        if day_of_year == 0:
            day_of_year = 355
            year -= 1

    s = math.floor((day_of_year - 1) / 29.5)
    month = 1 + s
    day = math.floor(day_of_year - 29.5 * s)
    if day_of_year == 355:
        month, day = 12, 30

    return CalendarDate(year, month, day, daytime=julian.daytime)
