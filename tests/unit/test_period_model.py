"""Calendar period model tests.

Construction, calendar conversion, day/month/year transposition, month
lengths and error paths.
"""

import dataclasses
from datetime import date

import pytest

from jdncal import (
    CalendarPeriodModel,
    construct,
    convert_calendar,
    to_calendar_period,
    to_jdn_period,
    transpose_by_day,
    transpose_by_month,
    transpose_by_year,
)
from jdncal.conventions import Calendar, UnsupportedCalendarError, set_default_calendar
from jdncal.types import (
    CalendarDate,
    CalendarError,
    CalendarPeriod,
    InvalidPeriodError,
    JDNPeriod,
)


def _ymd(d: CalendarDate):
    return (d.year, d.month, d.day)


def _single_day(calendar, year, month, day) -> CalendarPeriodModel:
    single = CalendarDate(year, month, day)
    return CalendarPeriodModel.from_calendar_period(calendar, CalendarPeriod(single, single))


# ============================================================================
# CONSTRUCTION
# ============================================================================

class TestConstruction:
    """Building models from JDN or calendar periods."""

    def test_from_jdn_period(self):
        model = construct(Calendar.GREGORIAN, JDNPeriod(2458094, 2458094))
        period = to_calendar_period(model)

        assert _ymd(period.start) == (2017, 12, 6)
        assert period.start.day_of_week == 3
        assert period.start.daytime is None
        assert model.exact_date

    def test_from_calendar_period(self):
        period = CalendarPeriod(CalendarDate(2017, 12, 6), CalendarDate(2017, 12, 31))
        model = construct("Gregorian", period)

        assert to_jdn_period(model) == JDNPeriod(2458094, 2458119)
        assert not model.exact_date
        assert model.calendar_period.end.day_of_week == 0

    def test_out_of_range_day_is_normalised(self):
        """31 April converts to the day it arithmetically denotes, 1 May."""
        model = _single_day(Calendar.GREGORIAN, 2017, 4, 31)
        assert _ymd(model.calendar_period.start) == (2017, 5, 1)

    def test_reversed_calendar_period(self):
        period = CalendarPeriod(CalendarDate(2018, 1, 1), CalendarDate(2017, 1, 1))
        with pytest.raises(InvalidPeriodError):
            construct(Calendar.GREGORIAN, period)

    def test_unsupported_period_type(self):
        with pytest.raises(TypeError):
            construct(Calendar.GREGORIAN, (2458094, 2458094))

    def test_unsupported_calendar(self):
        with pytest.raises(UnsupportedCalendarError, match="Mayan"):
            construct("Mayan", JDNPeriod(0, 0))

    def test_model_is_immutable(self):
        model = construct(Calendar.GREGORIAN, JDNPeriod(2458094, 2458094))
        with pytest.raises(dataclasses.FrozenInstanceError):
            model.jdn_period = JDNPeriod(0, 0)


class TestFromDates:
    """Building models from Python dates."""

    def test_single_date(self):
        model = CalendarPeriodModel.from_dates(date(2017, 12, 6), calendar=Calendar.ISLAMIC)

        assert model.jdn_period == JDNPeriod(2458094, 2458094)
        assert _ymd(model.calendar_period.start) == (1439, 3, 17)

    def test_string_range(self):
        model = CalendarPeriodModel.from_dates("2017-12-06", "20171231", calendar="Gregorian")
        assert model.jdn_period == JDNPeriod(2458094, 2458119)

    def test_default_calendar(self):
        try:
            set_default_calendar("Julian")
            model = CalendarPeriodModel.from_dates("2017-12-06")
            assert model.calendar == Calendar.JULIAN
            assert _ymd(model.calendar_period.start) == (2017, 11, 23)
        finally:
            set_default_calendar(Calendar.GREGORIAN)


# ============================================================================
# CALENDAR CONVERSION
# ============================================================================

class TestConvertCalendar:
    """Same days, other calendar."""

    def test_gregorian_to_julian_and_islamic(self):
        model = construct(Calendar.GREGORIAN, JDNPeriod(2458094, 2458094))

        julian = convert_calendar(model, Calendar.JULIAN)
        islamic = convert_calendar(model, "Islamic")

        assert _ymd(julian.calendar_period.start) == (2017, 11, 23)
        assert _ymd(islamic.calendar_period.start) == (1439, 3, 17)
        assert julian.jdn_period == model.jdn_period
        assert islamic.jdn_period == model.jdn_period

    def test_to_hebrew(self):
        model = construct(Calendar.GREGORIAN, JDNPeriod(2451545, 2451545))
        hebrew = model.convert_calendar("Jewish")

        assert hebrew.calendar == Calendar.HEBREW
        assert _ymd(hebrew.calendar_period.start) == (5760, 4, 23)

    def test_original_is_unchanged(self):
        model = construct(Calendar.GREGORIAN, JDNPeriod(2458094, 2458094))
        model.convert_calendar(Calendar.JULIAN)
        assert model.calendar == Calendar.GREGORIAN

    def test_unsupported_target(self):
        model = construct(Calendar.GREGORIAN, JDNPeriod(2458094, 2458094))
        with pytest.raises(UnsupportedCalendarError, match="Target calendar format not supported: Maya"):
            model.convert_calendar("Maya")

    def test_unsupported_target_is_calendar_error(self):
        model = construct(Calendar.GREGORIAN, JDNPeriod(2458094, 2458094))
        with pytest.raises(CalendarError):
            model.convert_calendar(42)


# ============================================================================
# TRANSPOSITION
# ============================================================================

class TestTransposeByDay:
    """Whole-day shifts."""

    def test_one_year_of_days(self):
        model = construct(Calendar.GREGORIAN, JDNPeriod(2458094, 2458094))
        shifted = transpose_by_day(model, 365)

        assert shifted.jdn_period == JDNPeriod(2458459, 2458459)
        assert _ymd(shifted.calendar_period.start) == (2018, 12, 6)
        assert shifted.calendar_period.start.day_of_week == 4

    def test_negative_shift_of_range(self):
        model = construct(Calendar.JULIAN, JDNPeriod(1705426, 1705430))
        shifted = model.transpose_by_day(-10)

        assert shifted.jdn_period == JDNPeriod(1705416, 1705420)
        assert _ymd(shifted.calendar_period.start) == (-43, 3, 5)

    def test_returns_new_model(self):
        model = construct(Calendar.GREGORIAN, JDNPeriod(2458094, 2458094))
        model.transpose_by_day(1)
        assert model.jdn_period == JDNPeriod(2458094, 2458094)


class TestTransposeByMonth:
    """Month shifts with day clamping."""

    def test_gregorian_clamps_to_february(self):
        model = _single_day(Calendar.GREGORIAN, 2017, 3, 31)
        shifted = transpose_by_month(model, -1)

        assert _ymd(shifted.calendar_period.start) == (2017, 2, 28)
        assert shifted.jdn_period == JDNPeriod(2457813, 2457813)

    def test_gregorian_leap_february(self):
        model = _single_day(Calendar.GREGORIAN, 2020, 1, 31)
        shifted = model.transpose_by_month(1)

        assert _ymd(shifted.calendar_period.start) == (2020, 2, 29)
        assert shifted.jdn_period.start == 2458909

    def test_julian_bce(self):
        model = _single_day(Calendar.JULIAN, -43, 3, 15)
        shifted = model.transpose_by_month(1)

        assert _ymd(shifted.calendar_period.start) == (-43, 4, 15)
        assert shifted.jdn_period.start == 1705426 + 31

    def test_islamic_common_year_end(self):
        """Dhu al-Hijjah 1438 has 29 days."""
        model = construct(Calendar.ISLAMIC, JDNPeriod(2458007, 2458007))
        assert _ymd(model.calendar_period.start) == (1438, 12, 18)

        shifted = model.transpose_by_month(1)

        assert _ymd(shifted.calendar_period.start) == (1439, 1, 18)
        assert shifted.jdn_period.start - model.jdn_period.start == 29

    def test_islamic_leap_year_end(self):
        """Dhu al-Hijjah 1434 has 30 days."""
        model = construct(Calendar.ISLAMIC, JDNPeriod(2456589, 2456589))
        shifted = model.transpose_by_month(1)

        assert _ymd(shifted.calendar_period.start) == (1435, 1, 18)
        assert shifted.jdn_period.start - model.jdn_period.start == 30

    def test_hebrew_common_year_skips_adar_ii(self):
        model = _single_day(Calendar.HEBREW, 5770, 6, 7)
        shifted = model.transpose_by_month(1)

        assert _ymd(shifted.calendar_period.start) == (5770, 8, 7)
        assert shifted.jdn_period.start == 2455278

    @pytest.mark.parametrize(
        "months, expected, jdn",
        [
            (1, (5774, 6, 10), 2456699),
            (2, (5774, 7, 10), 2456729),
            (3, (5774, 8, 10), 2456758),
        ],
    )
    def test_hebrew_leap_year_has_both_adars(self, months, expected, jdn):
        model = _single_day(Calendar.HEBREW, 5774, 5, 10)
        shifted = model.transpose_by_month(months)

        assert _ymd(shifted.calendar_period.start) == expected
        assert shifted.jdn_period.start == jdn

    def test_hebrew_backwards_over_adar(self):
        model = _single_day(Calendar.HEBREW, 5775, 8, 1)
        shifted = model.transpose_by_month(-1)

        assert _ymd(shifted.calendar_period.start) == (5775, 6, 1)
        assert shifted.jdn_period.start == 2457074

    def test_hebrew_full_cycle(self):
        """235 months are exactly 19 years."""
        model = _single_day(Calendar.HEBREW, 5770, 1, 1)

        forward = model.transpose_by_month(235)
        back = forward.transpose_by_month(-235)

        assert _ymd(forward.calendar_period.start) == (5789, 1, 1)
        assert forward.jdn_period.start == 2462036
        assert back.jdn_period == model.jdn_period

    def test_range_keeps_both_ends(self):
        period = CalendarPeriod(CalendarDate(2017, 1, 15), CalendarDate(2017, 1, 31))
        model = construct(Calendar.GREGORIAN, period).transpose_by_month(1)

        assert _ymd(model.calendar_period.start) == (2017, 2, 15)
        assert _ymd(model.calendar_period.end) == (2017, 2, 28)


class TestTransposeByYear:
    """Year shifts with day clamping."""

    def test_julian_bce_forward(self):
        model = _single_day(Calendar.JULIAN, -43, 3, 15)
        shifted = transpose_by_year(model, 1)

        assert _ymd(shifted.calendar_period.start) == (-42, 3, 15)
        assert shifted.jdn_period.start == 1705426 + 365

    def test_julian_bce_backward(self):
        model = _single_day(Calendar.JULIAN, -43, 3, 15)
        shifted = model.transpose_by_year(-1)

        assert _ymd(shifted.calendar_period.start) == (-44, 3, 15)
        assert shifted.jdn_period.start == 1705426 - 365

    def test_gregorian_leap_day(self):
        model = _single_day(Calendar.GREGORIAN, 2016, 2, 29)
        shifted = model.transpose_by_year(1)
        assert _ymd(shifted.calendar_period.start) == (2017, 2, 28)

    def test_hebrew_adar_i_into_common_year(self):
        """30 Adar I 5774 becomes 29 Adar 5775."""
        model = _single_day(Calendar.HEBREW, 5774, 6, 30)
        shifted = model.transpose_by_year(1)

        assert _ymd(shifted.calendar_period.start) == (5775, 6, 29)
        assert shifted.jdn_period.start == 2457102

    def test_hebrew_period_across_both_adars_into_common_year(self):
        """30 Adar I .. 1 Adar II 5784 both land in the single Adar of 5785."""
        period = CalendarPeriod(CalendarDate(5784, 6, 30), CalendarDate(5784, 7, 1))
        model = construct(Calendar.HEBREW, period)
        assert model.jdn_period == JDNPeriod(2460380, 2460381)

        shifted = model.transpose_by_year(1)

        assert shifted.jdn_period == JDNPeriod(2460764, 2460764)
        assert _ymd(shifted.calendar_period.start) == (5785, 6, 29)
        assert shifted.exact_date

    def test_hebrew_adar_range_into_common_year_keeps_order(self):
        period = CalendarPeriod(CalendarDate(5784, 6, 1), CalendarDate(5784, 7, 29))
        shifted = construct(Calendar.HEBREW, period).transpose_by_year(1)

        assert shifted.jdn_period == JDNPeriod(2460736, 2460764)
        assert _ymd(shifted.calendar_period.start) == (5785, 6, 1)
        assert _ymd(shifted.calendar_period.end) == (5785, 6, 29)

    def test_hebrew_adar_ii_into_common_year(self):
        model = _single_day(Calendar.HEBREW, 5774, 7, 15)
        shifted = model.transpose_by_year(1)

        assert _ymd(shifted.calendar_period.start) == (5775, 6, 15)
        assert shifted.jdn_period.start == 2457088


# ============================================================================
# MONTH LENGTHS
# ============================================================================

class TestDaysInMonth:
    """Month length queries on the model."""

    def test_hebrew_5770(self):
        heshvan = _single_day(Calendar.HEBREW, 5770, 2, 1)
        adar = _single_day(Calendar.HEBREW, 5770, 6, 1)

        assert heshvan.days_in_month() == 30
        assert adar.days_in_month() == 29

    def test_explicit_date(self):
        model = _single_day(Calendar.GREGORIAN, 2017, 1, 1)

        assert model.days_in_month(CalendarDate(2000, 2, 1)) == 29
        assert model.days_in_month(CalendarDate(1900, 2, 1)) == 28

    def test_julian_century_leap_year(self):
        model = _single_day(Calendar.JULIAN, 1900, 2, 1)
        assert model.days_in_month() == 29
