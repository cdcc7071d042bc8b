"""
Models package for calendar grid generation.
"""

from .year import Year, YEAR_MIN, YEAR_MAX

from .month import Month

from .week import (
    Week,
    WeekMode,
)

from .calendar import (
    CalendarOptions,
    CalendarDay,
    CalendarObject,
)

__all__ = [
    'Year',
    'YEAR_MIN',
    'YEAR_MAX',
    'Month',
    'Week',
    'WeekMode',
    'CalendarOptions',
    'CalendarDay',
    'CalendarObject',
]
