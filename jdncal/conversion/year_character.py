"""
Hebrew year character (Slonimski's method).

For a Hebrew year this determines the number of days in the year, the weekday
of 1 Tishri and whether the year has 12 or 13 months. The year's position in
the 19-year Metonic cycle selects one of four interval tables; the fractional
part of a linear function of the year selects the row.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

logger = logging.getLogger(__name__)

# Rows are (upper bound of k1, year length, weekday of 1 Tishri).
# Weekday 1 = Monday, 2 = Tuesday, 4 = Thursday, 6 = Saturday.
_Table = List[Tuple[float, int, int]]

_COMMON_EARLY: _Table = [
    (0.090410, 353, 1),
    (0.271103, 355, 1),
    (0.376121, 354, 2),
    (0.661835, 354, 4),
    (0.714282, 355, 4),
    (0.752248, 353, 6),
    (1.0, 355, 6),
]

_COMMON_MID: _Table = [
    (0.090410, 353, 1),
    (0.271103, 355, 1),
    (0.376121, 354, 2),
    (0.661835, 354, 4),
    (0.714282, 355, 4),
    (0.804693, 353, 6),
    (1.0, 355, 6),
]

_COMMON_LATE: _Table = [
    (0.090410, 353, 1),
    (0.285711, 355, 1),
    (0.376121, 354, 2),
    (0.661835, 354, 4),
    (0.714282, 355, 4),
    (0.804693, 353, 6),
    (1.0, 355, 6),
]

# A leap year starting on Thursday is either deficient (383) or complete (385)
_LEAP: _Table = [
    (0.157466, 383, 1),
    (0.285711, 385, 1),
    (0.428570, 384, 2),
    (0.533590, 383, 4),
    (0.714282, 385, 4),
    (0.871750, 383, 6),
    (1.0, 385, 6),
]

YEAR_LENGTHS = (353, 354, 355, 383, 384, 385)


@dataclass(frozen=True)
class HebrewYearCharacter:
    """Length, first weekday and month count of a Hebrew year.

    Attributes:
        year: Hebrew year (Anno Mundi)
        year_length: Days in the year, one of 353, 354, 355, 383, 384, 385
        first_weekday: Weekday of 1 Tishri (0 = Sunday)
        month_count: 12 for common years, 13 for leap years
    """

    year: int
    year_length: int
    first_weekday: int
    month_count: int

    @property
    def is_leap(self) -> bool:
        return self.month_count == 13

    @property
    def is_deficient(self) -> bool:
        return self.year_length in (353, 383)

    @property
    def is_complete(self) -> bool:
        return self.year_length in (355, 385)


def metonic_position(year: int) -> int:
    """Position of the year in the 19-year cycle as used by the tables."""
    return (7 * year - 6) % 19


def is_hebrew_leap_year(year: int) -> bool:
    return metonic_position(year) >= 12


def _select_table(r1: int) -> _Table:
    if r1 < 5:
        return _COMMON_EARLY
    if r1 < 7:
        return _COMMON_MID
    if r1 < 12:
        return _COMMON_LATE
    return _LEAP


def resolve_year_character(year: int) -> HebrewYearCharacter:
    """Resolve the character of a Hebrew year.

    Args:
        year: Hebrew year (Anno Mundi)

    Returns:
        HebrewYearCharacter for the year
    """
    r1 = metonic_position(year)
    k1 = 0.178117458 * year + 0.7779654 * r1 + 0.2533747
    k1 -= math.floor(k1)

    for bound, length, weekday in _select_table(r1):
        if k1 < bound:
            break

    character = HebrewYearCharacter(
        year=year,
        year_length=length,
        first_weekday=weekday,
        month_count=13 if r1 >= 12 else 12,
    )
    logger.debug(
        "Hebrew year %s: length=%s, 1 Tishri weekday=%s, months=%s",
        year,
        length,
        weekday,
        character.month_count,
    )
    return character
