"""
calgrid - month grid data for calendar views.
"""

from calgrid.models import (
    CalendarDay,
    CalendarObject,
    CalendarOptions,
    Month,
    Week,
    WeekMode,
    Year,
)
from calgrid.services import CalendarService, build_calendar
from calgrid.utils.calendar_config import CalendarConfig, get_calendar_config
from calgrid.utils.clock import Clock, FixedClock, system_clock
from calgrid.utils.date_utils import (
    InvalidDateError,
    date_as_string,
    day_of_week,
    is_same_date,
    is_today,
    today_as_string,
)
from calgrid.utils.numeric import in_range, in_range_inclusive, in_range_left, in_range_right

__version__ = "0.1.0"
