"""
Basic enums used across the conversion and period modules.
"""

from enum import Enum


class Calendar(Enum):
    """Supported calendars."""

    GREGORIAN = "Gregorian"
    JULIAN = "Julian"
    ISLAMIC = "Islamic"
    HEBREW = "Hebrew"


class NameFormat(Enum):
    """Width of weekday and month names."""

    LONG = "long"
    SHORT = "short"
    NARROW = "narrow"


class HebrewMonth(Enum):
    """Internal Hebrew month numbering.

    Adar II only exists in leap years; in common years ADAR is the single Adar.
    """

    TISHRI = 1
    HESHVAN = 2
    KISLEV = 3
    TEVET = 4
    SHEVAT = 5
    ADAR = 6
    ADAR_II = 7
    NISAN = 8
    IYAR = 9
    SIVAN = 10
    TAMMUZ = 11
    AV = 12
    ELUL = 13
