"""
Weekday and month name lookup with locale and format fallbacks.
"""

import logging
from typing import List, Optional, Union

from jdncal.conventions.calendars import get_calendar
from jdncal.conventions.types import NameFormat
from jdncal.conversion.factory import CalendarLike
from jdncal.names.data import NAMES, NameTable

logger = logging.getLogger(__name__)

# Every calendar has English names in long format
_FALLBACK_LOCALE = "en"

_DEFAULT_LOCALE = _FALLBACK_LOCALE
_DEFAULT_FORMAT = NameFormat.LONG

FormatLike = Union[str, NameFormat]


def get_default_locale() -> str:
    return _DEFAULT_LOCALE


def set_default_locale(locale: str) -> None:
    """Set the locale used when a requested locale has no names."""
    global _DEFAULT_LOCALE
    _DEFAULT_LOCALE = locale


def _format_key(format: Optional[FormatLike]) -> str:
    if format is None:
        return _DEFAULT_FORMAT.value
    if isinstance(format, NameFormat):
        return format.value
    return format.lower()


def _lookup(table: NameTable, kind: str, locale: Optional[str], format: Optional[FormatLike]) -> List[str]:
    for candidate in (locale, _DEFAULT_LOCALE, _FALLBACK_LOCALE):
        if candidate in table:
            break
    if locale is not None and candidate != locale:
        logger.debug("No %s names for locale %r, using %r", kind, locale, candidate)

    formats = table[candidate]
    key = _format_key(format)
    if key not in formats:
        logger.debug("No %s %r format for locale %r, using %r", kind, key, candidate, _DEFAULT_FORMAT.value)
        key = _DEFAULT_FORMAT.value
    return list(formats[key])


def get_weekday_names(
    calendar: CalendarLike,
    locale: Optional[str] = None,
    format: Optional[FormatLike] = None,
) -> List[str]:
    """
    Weekday names of a calendar, Sunday first.

    Args:
        calendar: Calendar enum member or name
        locale: Locale code such as 'en' or 'de'; falls back to the default locale
        format: 'long', 'short' or 'narrow'; falls back to 'long'

    Returns:
        Seven names
    """
    return _lookup(NAMES[get_calendar(calendar)]["weekdays"], "weekday", locale, format)


def get_month_names(
    calendar: CalendarLike,
    locale: Optional[str] = None,
    format: Optional[FormatLike] = None,
) -> List[str]:
    """Month names of a calendar in month-number order (13 for Hebrew)."""
    return _lookup(NAMES[get_calendar(calendar)]["months"], "month", locale, format)
