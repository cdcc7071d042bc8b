"""
Time source used for every "current" default in the package.

Components never call `date.today()` themselves; they ask a Clock. Tests pin
time with FixedClock.
"""
from datetime import date, datetime
from typing import Optional, Union


class Clock:
    """Clock backed by the local system date."""

    def today(self) -> date:
        return date.today()

    def year(self) -> int:
        return self.today().year

    def month(self, zero_based: bool = True) -> int:
        """Current month, zero-based (0-11) by default or one-based (1-12)."""
        return self.today().month - 1 if zero_based else self.today().month


class FixedClock(Clock):
    """Clock that always reports the same day."""

    def __init__(self, fixed: Union[date, datetime]):
        if isinstance(fixed, datetime):
            fixed = fixed.date()
        self._fixed = fixed

    def today(self) -> date:
        return self._fixed

    def __repr__(self) -> str:
        return f"FixedClock({self._fixed.isoformat()})"


system_clock = Clock()


def resolve_clock(clock: Optional[Clock] = None) -> Clock:
    return clock if clock is not None else system_clock


def get_current_date(clock: Optional[Clock] = None) -> date:
    return resolve_clock(clock).today()


def get_current_year(clock: Optional[Clock] = None) -> int:
    return resolve_clock(clock).year()


def get_current_month(zero_based: bool = True, clock: Optional[Clock] = None) -> int:
    return resolve_clock(clock).month(zero_based)
