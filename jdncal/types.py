"""Core value types shared by the conversion engine and the period model.

A day is identified calendar-independently by its Julian Day Number (JDN,
an integer). A Julian Day Count (JDC) adds the time of day as a fraction:
``.5`` is midnight at the start of the civil day and ``.0`` is noon.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Optional

JDN = int
JDC = float


class CalendarError(ValueError):
    """Base class for all calendar conversion errors."""


class InvalidPeriodError(CalendarError):
    """Raised when a period starts after it ends."""


class NonIntegralDayCountError(CalendarError):
    """Raised when a JDN period is built from non-integral day numbers."""


class InvalidDayOfWeekError(CalendarError):
    """Raised when a day of week is not an integer in 0..6."""


@dataclass(frozen=True)
class CalendarDate:
    """A date expressed in the fields of one calendar.

    Attributes:
        year: Astronomical year (year 0 exists for Gregorian and Julian)
        month: Month number, 1-based in the calendar's own numbering
        day: Day of month, 1-based
        day_of_week: 0 = Sunday .. 6 = Saturday, if known
        daytime: Fraction of the day elapsed since midnight, if known
    """

    year: int
    month: int
    day: int
    day_of_week: Optional[int] = None
    daytime: Optional[float] = None

    def __post_init__(self):
        dow = self.day_of_week
        if dow is None:
            return
        if isinstance(dow, bool) or not isinstance(dow, numbers.Integral) or not 0 <= dow <= 6:
            raise InvalidDayOfWeekError(f"Invalid day of week: {dow}")

    def same_day(self, other: CalendarDate) -> bool:
        """Compare year, month and day only."""
        return (self.year, self.month, self.day) == (other.year, other.month, other.day)

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class CalendarPeriod:
    """A range of days given as two calendar dates (inclusive)."""

    start: CalendarDate
    end: CalendarDate

    @property
    def exact_date(self) -> bool:
        return self.start.same_day(self.end)


def _as_jdn(value) -> JDN:
    if isinstance(value, bool):
        raise NonIntegralDayCountError("JDNs are expected to be integers")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise NonIntegralDayCountError("JDNs are expected to be integers")


@dataclass(frozen=True)
class JDNPeriod:
    """A range of days given as two JDNs (inclusive).

    The ordering check runs before the integrality check, so a reversed
    period of fractional values reports the ordering problem.
    """

    start: JDN
    end: JDN

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidPeriodError(
                f"start of a JDN period must not be greater than its end: {self.start} > {self.end}"
            )
        # Normalise integral floats such as 2458094.0 to int
        object.__setattr__(self, "start", _as_jdn(self.start))
        object.__setattr__(self, "end", _as_jdn(self.end))

    @property
    def exact_date(self) -> bool:
        return self.start == self.end

    def shift(self, days: int) -> JDNPeriod:
        """Return a new period moved by a whole number of days."""
        return JDNPeriod(self.start + days, self.end + days)
