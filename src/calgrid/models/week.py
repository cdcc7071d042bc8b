"""
Week model.

Per-date week metadata under a week-start mode. Weekday indices are native:
0 = Sunday through 6 = Saturday.
"""
import logging
import math
from datetime import date, timedelta
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from calgrid.utils.clock import Clock, get_current_date
from calgrid.utils.date_utils import DAYS_IN_WEEK, InvalidDateError, native_weekday, to_date

logger = logging.getLogger(__name__)


class WeekMode(str, Enum):
    """Which weekday starts a week."""
    SUN = "sun"
    MON = "mon"


class Week(BaseModel):
    """
    A calendar date viewed through a week-start mode.

    Instances are immutable; `with_mode` returns a new Week. Use `from_value`
    to build one from loosely typed input, it raises InvalidDateError for
    anything that is not a valid date.

    Mode bounds (`begin`, `end`):
    - SUN: (0, 6), Sunday through Saturday
    - MON: (1, 0), Monday through Sunday

    `is_weekend` compares the weekday against `begin` and `is_weekbegin`
    against `end`. Under MON this flags Monday as "weekend" and Sunday as
    "weekbegin"; existing consumers depend on that pairing.
    """
    value: date
    mode: WeekMode = WeekMode.SUN

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_value(cls, value: Any = None, month: Optional[int] = None, day: Optional[int] = None,
                   mode: WeekMode = WeekMode.SUN, clock: Optional[Clock] = None) -> Self:
        """
        Build a Week the way a native date constructor would.

        Args:
            value: date/datetime, ISO string, epoch milliseconds, or a year
                when `month` is given. None means the current date.
            month: Zero-based month, overflow rolls into the next year
            day: Day of month, overflow rolls into the next month
            mode: Week-start mode
            clock: Time source used when `value` is None

        Raises:
            InvalidDateError: If the input does not describe a valid date
        """
        if value is None and month is None and day is None:
            return cls(value=get_current_date(clock), mode=mode)
        try:
            return cls(value=to_date(value, month, day), mode=mode)
        except InvalidDateError:
            logger.debug(f"Cannot build a week from value={value!r}, month={month}, day={day}")
            raise

    @staticmethod
    def get_begin(mode: WeekMode) -> int:
        return 0 if mode == WeekMode.SUN else 1

    @staticmethod
    def get_end(mode: WeekMode) -> int:
        return 6 if mode == WeekMode.SUN else 0

    @property
    def begin(self) -> int:
        return Week.get_begin(self.mode)

    @property
    def end(self) -> int:
        return Week.get_end(self.mode)

    def with_mode(self, mode: WeekMode) -> Self:
        return self.model_copy(update={'mode': WeekMode(mode)})

    set_mode = with_mode

    def is_weekend(self) -> bool:
        return self.day_of_week() == self.begin

    def is_weekbegin(self) -> bool:
        return self.day_of_week() == self.end

    def start_week(self) -> date:
        """The date whose weekday is `begin`, within the same Sunday-first week."""
        return self.value + timedelta(days=self.begin - self.day_of_week())

    def end_week(self) -> date:
        """The date whose weekday is `end`, within the same Sunday-first week."""
        return self.value + timedelta(days=self.end - self.day_of_week())

    def week_of_month(self) -> int:
        """
        1-based week of the month.

        Counts the days of the month plus the days of the first week that
        fall before the 1st under the current mode, in blocks of seven.
        """
        start_of_month_weekday = native_weekday(self.value.replace(day=1))
        days_before_first = start_of_month_weekday - self.begin
        return math.ceil((self.value.day + days_before_first) / DAYS_IN_WEEK)

    def week_of_year(self) -> int:
        """
        Week of the year by a plain day count from January 1st.

        Not ISO 8601: no Thursday anchoring and no week belonging to the
        adjacent year.
        """
        days_since_new_year = (self.value - date(self.value.year, 1, 1)).days
        return math.ceil((days_since_new_year + self.begin) / DAYS_IN_WEEK)

    def day_of_week(self) -> int:
        return native_weekday(self.value)
