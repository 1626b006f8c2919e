"""Calendar period model.

A ``CalendarPeriodModel`` holds one range of days in two equivalent forms: a
``JDNPeriod`` (calendar independent) and a ``CalendarPeriod`` in the model's
calendar. The JDN form is the source of truth; the calendar form is always
derived from it, and every operation returns a new model, so the two can
never disagree.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional, Union

from jdncal.conventions.calendars import get_calendar, get_default_calendar
from jdncal.conventions.types import Calendar
from jdncal.conversion.factory import CalendarLike, from_jdn, to_jdn
from jdncal.conversion.factory import days_in_month as _days_in_month
from jdncal.periods.adjustments import shift_months, shift_years
from jdncal.types import CalendarDate, CalendarPeriod, JDNPeriod
from jdncal.utils.date import DateLike, from_python_date

logger = logging.getLogger(__name__)

Period = Union[JDNPeriod, CalendarPeriod]


def _date_at(calendar: Calendar, jdn: int) -> CalendarDate:
    # Periods deal in whole days only
    return dataclasses.replace(from_jdn(calendar, jdn), daytime=None)


@dataclass(frozen=True)
class CalendarPeriodModel:
    """A period of days viewed through one calendar.

    Attributes:
        calendar: Calendar of the calendar-field representation
        jdn_period: Start and end as Julian Day Numbers
        calendar_period: Start and end as dates (with day of week) in ``calendar``
    """

    calendar: Calendar
    jdn_period: JDNPeriod
    calendar_period: CalendarPeriod

    @classmethod
    def from_jdn_period(cls, calendar: CalendarLike, jdn_period: JDNPeriod) -> CalendarPeriodModel:
        calendar = get_calendar(calendar)
        calendar_period = CalendarPeriod(
            _date_at(calendar, jdn_period.start),
            _date_at(calendar, jdn_period.end),
        )
        return cls(calendar, jdn_period, calendar_period)

    @classmethod
    def from_calendar_period(
        cls, calendar: CalendarLike, calendar_period: CalendarPeriod
    ) -> CalendarPeriodModel:
        """Build a model from calendar dates.

        The dates are not validated; an out-of-range day such as 31 in a
        30-day month converts to the day it arithmetically denotes.
        """
        calendar = get_calendar(calendar)
        jdn_period = JDNPeriod(
            to_jdn(calendar, calendar_period.start),
            to_jdn(calendar, calendar_period.end),
        )
        return cls.from_jdn_period(calendar, jdn_period)

    @classmethod
    def construct(cls, calendar: CalendarLike, period: Period) -> CalendarPeriodModel:
        """Build a model from either kind of period."""
        if isinstance(period, JDNPeriod):
            return cls.from_jdn_period(calendar, period)
        if isinstance(period, CalendarPeriod):
            return cls.from_calendar_period(calendar, period)
        raise TypeError(f"Unsupported period type: {type(period)}")

    @classmethod
    def from_dates(
        cls,
        start: DateLike,
        end: Optional[DateLike] = None,
        calendar: Optional[CalendarLike] = None,
    ) -> CalendarPeriodModel:
        """Build a model from Python dates (or date strings).

        Args:
            start: First day of the period
            end: Last day of the period, defaults to ``start``
            calendar: Calendar of the resulting model, defaults to the package default

        Returns:
            CalendarPeriodModel covering the given days
        """
        start_jdn = to_jdn(Calendar.GREGORIAN, from_python_date(start))
        end_jdn = start_jdn if end is None else to_jdn(Calendar.GREGORIAN, from_python_date(end))
        if calendar is None:
            calendar = get_default_calendar()
        return cls.from_jdn_period(calendar, JDNPeriod(start_jdn, end_jdn))

    @property
    def exact_date(self) -> bool:
        return self.jdn_period.exact_date

    def to_calendar_period(self) -> CalendarPeriod:
        return self.calendar_period

    def to_jdn_period(self) -> JDNPeriod:
        return self.jdn_period

    def convert_calendar(self, target: CalendarLike) -> CalendarPeriodModel:
        """Same days, expressed in another calendar."""
        target = get_calendar(target)
        logger.debug("Converting period %s from %s to %s", self.jdn_period, self.calendar, target)
        return self.from_jdn_period(target, self.jdn_period)

    def transpose_by_day(self, days: int) -> CalendarPeriodModel:
        logger.debug("Transposing %s by %s day(s)", self.jdn_period, days)
        return self.from_jdn_period(self.calendar, self.jdn_period.shift(days))

    def transpose_by_month(self, months: int) -> CalendarPeriodModel:
        """Shift both ends by whole months of the model's calendar.

        The day of month is kept where possible and otherwise clamped to the
        last day of the target month.
        """
        period = CalendarPeriod(
            shift_months(self.calendar, self.calendar_period.start, months),
            shift_months(self.calendar, self.calendar_period.end, months),
        )
        logger.debug("Transposing %s by %s month(s) in %s", self.jdn_period, months, self.calendar)
        return self.from_calendar_period(self.calendar, period)

    def transpose_by_year(self, years: int) -> CalendarPeriodModel:
        """Shift both ends by whole years of the model's calendar, clamping the day.

        Moving a Hebrew leap-year period into a common year merges Adar I and
        Adar II into one Adar; an end that would then fall before the start
        is pulled up to the start.
        """
        start = to_jdn(self.calendar, shift_years(self.calendar, self.calendar_period.start, years))
        end = to_jdn(self.calendar, shift_years(self.calendar, self.calendar_period.end, years))
        if end < start:
            logger.debug("Year shift reversed the period ends (%s > %s), collapsing to start", start, end)
            end = start
        logger.debug("Transposing %s by %s year(s) in %s", self.jdn_period, years, self.calendar)
        return self.from_jdn_period(self.calendar, JDNPeriod(start, end))

    def days_in_month(self, date: Optional[CalendarDate] = None) -> int:
        """Days in the month of ``date`` (default: the period start) in the model's calendar."""
        if date is None:
            date = self.calendar_period.start
        return _days_in_month(self.calendar, date)


def construct(calendar: CalendarLike, period: Period) -> CalendarPeriodModel:
    return CalendarPeriodModel.construct(calendar, period)


def to_calendar_period(model: CalendarPeriodModel) -> CalendarPeriod:
    return model.to_calendar_period()


def to_jdn_period(model: CalendarPeriodModel) -> JDNPeriod:
    return model.to_jdn_period()


def convert_calendar(model: CalendarPeriodModel, target: CalendarLike) -> CalendarPeriodModel:
    return model.convert_calendar(target)


def transpose_by_day(model: CalendarPeriodModel, days: int) -> CalendarPeriodModel:
    return model.transpose_by_day(days)


def transpose_by_month(model: CalendarPeriodModel, months: int) -> CalendarPeriodModel:
    return model.transpose_by_month(months)


def transpose_by_year(model: CalendarPeriodModel, years: int) -> CalendarPeriodModel:
    return model.transpose_by_year(years)
