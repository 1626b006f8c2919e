"""Islamic (Hijri) conversion tests."""

import pytest

from jdncal.conventions import Calendar
from jdncal.conversion import (
    from_jdn,
    is_islamic_leap_year,
    islamic_to_jdc,
    jdc_to_islamic,
    to_jdn,
)
from jdncal.conversion.islamic import ISLAMIC_EPOCH, islamic_days_in_month
from jdncal.types import CalendarDate


class TestIslamicToJDC:
    """Forward Islamic conversion."""

    @pytest.mark.parametrize(
        "year, month, day, expected",
        [
            (1439, 3, 17, 2458093.5),
            (1421, 1, 1, 2451640.5),
            (1420, 7, 20, 2451481.5),
            (1, 1, 1, 1948439.5),
            (0, 12, 29, 1948438.5),
        ],
    )
    def test_known_dates(self, year, month, day, expected):
        assert islamic_to_jdc(CalendarDate(year, month, day)) == expected

    def test_epoch(self):
        assert islamic_to_jdc(CalendarDate(1, 1, 1)) == ISLAMIC_EPOCH

    def test_same_day_as_gregorian(self):
        jdn = to_jdn(Calendar.ISLAMIC, CalendarDate(1439, 3, 17))
        gregorian = from_jdn(Calendar.GREGORIAN, jdn)

        assert jdn == 2458094
        assert (gregorian.year, gregorian.month, gregorian.day) == (2017, 12, 6)


class TestJDCToIslamic:
    """Inverse Islamic conversion."""

    @pytest.mark.parametrize(
        "jdc, expected",
        [
            (2458093.5, (1439, 3, 17)),
            (2448481.5, (1412, 2, 2)),
            (2386789.5, (1237, 12, 29)),
            (1948439.5, (1, 1, 1)),
            (2451481.5, (1420, 7, 20)),
        ],
    )
    def test_known_dates(self, jdc, expected):
        date = jdc_to_islamic(jdc)
        assert (date.year, date.month, date.day) == expected

    def test_daytime_is_kept(self):
        date = jdc_to_islamic(2458093.75)

        assert (date.year, date.month, date.day) == (1439, 3, 17)
        assert date.daytime == pytest.approx(0.25)

    def test_day_of_week_attached(self):
        assert from_jdn(Calendar.ISLAMIC, 2458094).day_of_week == 3


class TestIslamicLeapYears:
    """30-year cycle with 11 leap years."""

    def test_eleven_leap_years_per_cycle(self):
        leaps = [year for year in range(1, 31) if is_islamic_leap_year(year)]
        assert leaps == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]

    def test_last_month_length(self):
        assert islamic_days_in_month(1434, 12) == 30
        assert islamic_days_in_month(1435, 12) == 29

    def test_alternating_month_lengths(self):
        assert [islamic_days_in_month(1435, m) for m in range(1, 12)] == [
            30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30,
        ]


class TestIslamicRoundTrip:
    """from_jdn followed by to_jdn is the identity."""

    @pytest.mark.parametrize("start", [100000, 1948400, 2299150, 2386780, 2451500, 2458000])
    def test_round_trip(self, start):
        for jdn in range(start, start + 1100):
            assert to_jdn(Calendar.ISLAMIC, from_jdn(Calendar.ISLAMIC, jdn)) == jdn
