"""
Unit tests for calendar grid models.
"""
import pytest
from datetime import date

from pydantic import ValidationError

from calgrid.models.calendar import CalendarDay, CalendarObject, CalendarOptions
from calgrid.models.week import WeekMode


def make_day(**overrides):
    values = {
        "monthIndex": 0,
        "month": 1,
        "year": 2022,
        "day": 1,
        "weekOfYears": 0,
        "weekOfMonths": 1,
        "dayOfWeek": 6,
    }
    values.update(overrides)
    return CalendarDay(**values)


class TestCalendarOptions:
    def test_all_fields_optional(self):
        options = CalendarOptions()
        assert (options.month, options.year, options.mode) == (None, None, None)

    def test_mode_from_string(self):
        assert CalendarOptions(mode="mon").mode == WeekMode.MON

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            CalendarOptions(mode="weekly")


class TestCalendarDay:
    def test_populate_by_alias_or_name(self):
        by_alias = make_day()
        by_name = CalendarDay(month_index=0, month=1, year=2022, day=1,
                              week_of_years=0, week_of_months=1, day_of_week=6)
        assert by_alias == by_name

    def test_flags_default_false(self):
        day = make_day()
        assert not any([day.is_today, day.is_weekbegin, day.is_weekend, day.is_prev_month, day.is_next_month])

    def test_as_date(self):
        assert make_day(day=31).as_date() == date(2022, 1, 31)

    def test_to_dict(self):
        data = make_day(isToday=True).to_dict()
        assert data["monthIndex"] == 0
        assert data["isToday"] is True
        assert "month_index" not in data


class TestCalendarObject:
    def test_defaults_to_empty_sequences(self):
        grid = CalendarObject(start_at_week=6, end_at_week=2, days_of_month=31)
        assert grid.days_in_prev_month == []
        assert grid.days_in_month == []
        assert grid.days_in_next_month == []

    def test_to_dict_nests_days(self):
        grid = CalendarObject(days_in_month=[make_day()], start_at_week=6, end_at_week=2, days_of_month=31)
        data = grid.to_dict()
        assert data["daysInMonth"][0]["dayOfWeek"] == 6
        assert data["startAtWeek"] == 6
