"""
Month value model.
"""
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from calgrid.models.year import Year
from calgrid.utils.clock import Clock, get_current_month
from calgrid.utils.date_utils import compose_date
from calgrid.utils.numeric import in_range_inclusive

logger = logging.getLogger(__name__)


class Month(BaseModel):
    """
    A normalized, zero-based month together with the year it belongs to.

    Out-of-range months are not clamped: they fall back to the current month.
    """
    value: int
    year: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, month: Optional[int] = None, year: Optional[int] = None,
           clock: Optional[Clock] = None) -> Self:
        return cls(value=cls.normalize(month, clock=clock), year=Year.normalize(year, clock))

    @staticmethod
    def min(zero_based: bool = True) -> int:
        return 0 if zero_based else 1

    @staticmethod
    def max(zero_based: bool = True) -> int:
        return 11 if zero_based else 12

    @staticmethod
    def current(zero_based: bool = True, clock: Optional[Clock] = None) -> int:
        return get_current_month(zero_based, clock)

    @staticmethod
    def normalize(month: Optional[int] = None, zero_based: bool = True,
                  clock: Optional[Clock] = None) -> int:
        """
        Validate a month against the range for the requested base.

        Args:
            month: Month to check, or None for the current month
            zero_based: True for 0-11, False for 1-12
            clock: Time source for the current month

        Returns:
            The month itself when in range, otherwise the current month in
            the requested base
        """
        if month is None:
            return Month.current(zero_based, clock)
        if in_range_inclusive(month, Month.min(zero_based), Month.max(zero_based)):
            return month

        current = Month.current(zero_based, clock)
        logger.debug(f"Month {month} outside {Month.min(zero_based)}..{Month.max(zero_based)}, "
                     f"falling back to current month {current}")
        return current

    fix = normalize

    @staticmethod
    def days_in_month(month: Optional[int] = None, year: Optional[int] = None,
                      clock: Optional[Clock] = None) -> int:
        """Number of days in a zero-based month, read as day 0 of the month after it."""
        month = Month.normalize(month, clock=clock)
        year = Year.normalize(year, clock)
        return compose_date(year, month + 1, 0).day

    def number_of_days(self) -> int:
        return Month.days_in_month(self.value, self.year)
