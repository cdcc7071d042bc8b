"""
Calendar grid models.

Output records of a grid build. Field names are snake_case in Python and
camelCase on the wire (`to_dict`).
"""
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict

from calgrid.models.week import WeekMode


class CalendarOptions(BaseModel):
    """Grid build request. Missing values mean "current" (month, year) or the configured default (mode)."""
    month: Optional[int] = None  # zero-based
    year: Optional[int] = None
    mode: Optional[WeekMode] = None

    model_config = ConfigDict(frozen=True)


class CalendarDay(BaseModel):
    """One cell of the month grid."""
    month_index: int = Field(alias="monthIndex")
    month: int
    year: int
    day: int
    is_today: bool = Field(default=False, alias="isToday")
    is_weekbegin: bool = Field(default=False, alias="isWeekbegin")
    is_weekend: bool = Field(default=False, alias="isWeekend")
    is_prev_month: bool = Field(default=False, alias="isPrevMonth")
    is_next_month: bool = Field(default=False, alias="isNextMonth")
    week_of_years: int = Field(alias="weekOfYears")
    week_of_months: int = Field(alias="weekOfMonths")
    day_of_week: int = Field(alias="dayOfWeek")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class CalendarObject(BaseModel):
    """
    A full month grid: the month's own days plus the padding days that
    complete its first and last week rows.
    """
    days_in_prev_month: List[CalendarDay] = Field(default_factory=list, alias="daysInPrevMonth")
    days_in_month: List[CalendarDay] = Field(default_factory=list, alias="daysInMonth")
    days_in_next_month: List[CalendarDay] = Field(default_factory=list, alias="daysInNextMonth")
    start_at_week: int = Field(alias="startAtWeek")
    end_at_week: int = Field(alias="endAtWeek")
    days_of_month: int = Field(alias="daysOfMonth")

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the grid to a dictionary with camelCase keys.
        """
        return self.model_dump(by_alias=True)
