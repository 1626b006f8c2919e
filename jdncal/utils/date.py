from typing import Union
from datetime import datetime, date

from dateutil import parser as date_parser
from pandas import Timestamp

from jdncal.types import CalendarDate

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a date.
    Tries 'YYYY-MM-DD' and 'YYYYMMDD' first, then free-form parsing.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        try:
            return date_parser.parse(date_like).date()
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"Unsupported date string format: {date_like!r}") from exc
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def from_python_date(date_like: DateLike) -> CalendarDate:
    """
    Gregorian CalendarDate (with day of week, 0 = Sunday) for a date-like.
    """
    dt = to_date(date_like)
    return CalendarDate(dt.year, dt.month, dt.day, day_of_week=dt.isoweekday() % 7)


def to_python_date(calendar_date: CalendarDate) -> date:
    """
    datetime.date for a Gregorian CalendarDate. Only years 1..9999 are representable.
    """
    return date(calendar_date.year, calendar_date.month, calendar_date.day)
