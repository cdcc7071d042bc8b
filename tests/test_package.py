"""
Smoke tests for the package-level API.
"""
from datetime import date

import calgrid
from calgrid import CalendarConfig, FixedClock, WeekMode, build_calendar


def test_public_api_exports():
    for name in [
        "build_calendar", "CalendarService", "CalendarOptions", "CalendarDay", "CalendarObject",
        "Year", "Month", "Week", "WeekMode", "Clock", "FixedClock", "CalendarConfig", "InvalidDateError",
        "date_as_string", "is_same_date", "is_today", "today_as_string", "day_of_week",
        "in_range", "in_range_left", "in_range_right", "in_range_inclusive",
    ]:
        assert hasattr(calgrid, name), name


def test_build_calendar_end_to_end():
    result = build_calendar({"month": 0, "year": 2022, "mode": WeekMode.SUN},
                            clock=FixedClock(date(2022, 1, 1)),
                            config=CalendarConfig())

    assert result.days_of_month == 31
    assert result.start_at_week == 6
    assert len(result.days_in_prev_month) == 6
    assert len(result.days_in_next_month) == 5
    assert result.days_in_month[0].is_today is True
