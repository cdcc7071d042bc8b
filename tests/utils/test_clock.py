"""
Unit tests for clock time sources.
"""
from datetime import date, datetime

from calgrid.utils.clock import (
    Clock,
    FixedClock,
    system_clock,
    resolve_clock,
    get_current_date,
    get_current_year,
    get_current_month,
)


class TestFixedClock:
    def test_reports_fixed_date(self):
        clock = FixedClock(date(2022, 3, 15))
        assert clock.today() == date(2022, 3, 15)
        assert clock.year() == 2022

    def test_accepts_datetime(self):
        assert FixedClock(datetime(2022, 3, 15, 23, 0)).today() == date(2022, 3, 15)

    def test_month_bases(self):
        clock = FixedClock(date(2022, 3, 15))
        assert clock.month() == 2
        assert clock.month(zero_based=False) == 3


class TestCurrentValueHelpers:
    def test_helpers_read_the_given_clock(self):
        clock = FixedClock(date(1999, 12, 31))
        assert get_current_date(clock) == date(1999, 12, 31)
        assert get_current_year(clock) == 1999
        assert get_current_month(clock=clock) == 11
        assert get_current_month(False, clock) == 12

    def test_default_is_system_clock(self):
        assert resolve_clock() is system_clock
        assert isinstance(system_clock, Clock)
        assert get_current_date() == date.today()
