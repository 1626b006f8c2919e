"""Calendar period model and month/year arithmetic."""

from .adjustments import (
    clamp_day,
    is_end_of_month,
    months_in_year,
    shift_months,
    shift_years,
)
from .model import (
    CalendarPeriodModel,
    construct,
    convert_calendar,
    to_calendar_period,
    to_jdn_period,
    transpose_by_day,
    transpose_by_month,
    transpose_by_year,
)

__all__ = [
    # Model
    "CalendarPeriodModel",
    "construct",
    "to_calendar_period",
    "to_jdn_period",
    "convert_calendar",
    "transpose_by_day",
    "transpose_by_month",
    "transpose_by_year",
    # Month arithmetic
    "clamp_day",
    "is_end_of_month",
    "months_in_year",
    "shift_months",
    "shift_years",
]
