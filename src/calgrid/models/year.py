"""
Year value model.
"""
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from calgrid.utils.clock import Clock, get_current_year

logger = logging.getLogger(__name__)

YEAR_MIN = 0
YEAR_MAX = 9999


class Year(BaseModel):
    """
    A normalized calendar year.

    The logical range is [YEAR_MIN, YEAR_MAX] but normalization does not
    enforce it: only a missing year is replaced (by the current one).
    """
    value: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, year: Optional[int] = None, clock: Optional[Clock] = None) -> Self:
        return cls(value=cls.normalize(year, clock))

    @staticmethod
    def min() -> int:
        """
        Lower bound of the logical year range.

        Year 0 has no `datetime.date`; building a grid for it raises
        InvalidDateError. The earliest buildable year is 1.
        """
        return YEAR_MIN

    @staticmethod
    def max() -> int:
        return YEAR_MAX

    @staticmethod
    def current(clock: Optional[Clock] = None) -> int:
        return get_current_year(clock)

    @staticmethod
    def normalize(year: Optional[int] = None, clock: Optional[Clock] = None) -> int:
        """Return the year unchanged, or the current year when it is None."""
        if year is None:
            current = get_current_year(clock)
            logger.debug(f"No year given, using current year {current}")
            return current
        return year

    fix = normalize

    @staticmethod
    def is_leap(year: Optional[int] = None, clock: Optional[Clock] = None) -> bool:
        """Gregorian leap year rule, applied to the normalized year."""
        year = Year.normalize(year, clock)
        return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)

    @property
    def leap(self) -> bool:
        return Year.is_leap(self.value)
