"""
Calendar grid service.

Builds the day grid for one month: the month's own days and the padding days
from the neighbouring months that fill its first and last week rows.
"""
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from calgrid.models.calendar import CalendarDay, CalendarObject, CalendarOptions
from calgrid.models.month import Month
from calgrid.models.week import Week, WeekMode
from calgrid.models.year import Year
from calgrid.utils.calendar_config import CalendarConfig, get_calendar_config
from calgrid.utils.clock import Clock, resolve_clock
from calgrid.utils.date_utils import DAYS_IN_WEEK, InvalidDateError, day_of_week, is_today

# Configure logging
logger = logging.getLogger(__name__)


class CalendarService:
    """
    Month grid builder.

    Month and year are normalized once at construction (out-of-range or
    missing values fall back to the current ones, read from `clock`). Every
    build is computed fresh from those values.
    """

    Month = Month
    Year = Year
    Week = Week

    def __init__(self, options: Optional[CalendarOptions] = None, clock: Optional[Clock] = None,
                 config: Optional[CalendarConfig] = None):
        self.options = options if options is not None else CalendarOptions()
        self.clock = resolve_clock(clock)
        self.config = config if config is not None else get_calendar_config()

        self._year = Year.of(self.options.year, clock=self.clock)
        self._month = Month.of(self.options.month, self._year.value, clock=self.clock)
        self._mode = self.options.mode if self.options.mode is not None else self.config.default_mode

    @property
    def month(self) -> int:
        """Normalized zero-based month."""
        return self._month.value

    @property
    def year(self) -> int:
        return self._year.value

    @property
    def mode(self) -> WeekMode:
        return self._mode

    @property
    def start_at_week(self) -> int:
        """Native weekday of the 1st of the month."""
        return day_of_week(1, self.month, self.year)

    @property
    def end_at_week(self) -> int:
        """Native weekday of the day after the last day of the month."""
        return (self.start_at_week + self.days_in_month()) % DAYS_IN_WEEK

    def days_in_month(self) -> int:
        return self._month.number_of_days()

    def _generate_calendar_day(self, year: int, month: int, index: int,
                               is_prev_month: bool = False, is_next_month: bool = False) -> CalendarDay:
        """
        Build the grid cell for day `index + 1` of (year, month).

        Indices outside the month roll over into the neighbouring month, so
        the cell describes the date that actually results.
        """
        week = Week.from_value(year, month, index + 1, mode=self._mode)
        value = week.value

        return CalendarDay(
            month_index=value.month - 1,
            month=value.month,
            year=value.year,
            day=value.day,
            is_today=is_today(value, self.clock),
            is_weekbegin=week.is_weekbegin(),
            is_weekend=week.is_weekend(),
            is_prev_month=is_prev_month,
            is_next_month=is_next_month,
            week_of_years=week.week_of_year(),
            week_of_months=week.week_of_month(),
            day_of_week=week.day_of_week(),
        )

    def _padding_counts(self, start_at_week: int, end_at_week: int) -> Tuple[int, int]:
        begin = Week.get_begin(self._mode)
        if self.config.legacy_padding:
            return start_at_week - begin, DAYS_IN_WEEK - end_at_week - abs(begin - 1)
        return (start_at_week - begin) % DAYS_IN_WEEK, (begin - end_at_week) % DAYS_IN_WEEK

    def _legacy_padding(self, count: int) -> List[CalendarDay]:
        # Rows are taken from the start of the current month, flags left off
        return [self._generate_calendar_day(self.year, self.month, index) for index in range(count)]

    def _adjacent_padding(self, indices: Iterable[int], is_prev_month: bool = False,
                          is_next_month: bool = False) -> List[CalendarDay]:
        # Cells before 0001-01-01 or after 9999-12-31 are left out of the row
        days = []
        for index in indices:
            try:
                days.append(self._generate_calendar_day(self.year, self.month, index,
                                                        is_prev_month=is_prev_month, is_next_month=is_next_month))
            except InvalidDateError:
                logger.debug(f"Dropping padding day {index + 1} of {self.year}-{self.month + 1:02d}, "
                             f"outside the supported date range")
        return days

    def build(self) -> CalendarObject:
        """
        Build the month grid.

        Returns:
            CalendarObject with the month's days, the leading days of the
            previous month and the trailing days of the next month

        Raises:
            InvalidDateError: If the year is outside 1..9999, the years a
                `datetime.date` can hold
        """
        year = self.year
        if not date.min.year <= year <= date.max.year:
            raise InvalidDateError(f"Invalid date: year {year} is outside the supported range "
                                   f"{date.min.year}..{date.max.year}")

        month = self.month
        start_at_week = self.start_at_week
        end_at_week = self.end_at_week
        days_of_month = self.days_in_month()

        logger.debug(f"Building calendar for {year}-{month + 1:02d}, mode={self._mode.value}, "
                     f"startAtWeek={start_at_week}, endAtWeek={end_at_week}, days={days_of_month}")

        days_in_month = [self._generate_calendar_day(year, month, index) for index in range(days_of_month)]

        num_prev, num_next = self._padding_counts(start_at_week, end_at_week)
        logger.debug(f"Padding: {num_prev} day(s) before, {num_next} day(s) after")

        if num_prev <= 0:
            days_in_prev_month = []
        elif self.config.legacy_padding:
            days_in_prev_month = self._legacy_padding(num_prev)
        else:
            days_in_prev_month = self._adjacent_padding(range(-num_prev, 0), is_prev_month=True)

        if num_next <= 0:
            days_in_next_month = []
        elif self.config.legacy_padding:
            days_in_next_month = self._legacy_padding(num_next)
        else:
            days_in_next_month = self._adjacent_padding(
                range(days_of_month, days_of_month + num_next), is_next_month=True)

        return CalendarObject(
            days_in_prev_month=days_in_prev_month,
            days_in_month=days_in_month,
            days_in_next_month=days_in_next_month,
            start_at_week=start_at_week,
            end_at_week=end_at_week,
            days_of_month=days_of_month,
        )

    initialize = build


def build_calendar(options: Union[CalendarOptions, Dict[str, Any], None] = None,
                   clock: Optional[Clock] = None,
                   config: Optional[CalendarConfig] = None) -> CalendarObject:
    """
    Build the grid for a month.

    Args:
        options: CalendarOptions, or a dict with optional `month` (zero-based),
            `year` and `mode` ("sun"/"mon")
        clock: Time source for "current" defaults and today flags
        config: Overrides the global CalendarConfig

    Returns:
        CalendarObject for the requested month

    Raises:
        pydantic.ValidationError: If the options dict is malformed
    """
    if options is None or isinstance(options, dict):
        options = CalendarOptions.model_validate(options or {})
    return CalendarService(options, clock=clock, config=config).build()
