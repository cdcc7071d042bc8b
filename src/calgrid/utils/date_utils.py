"""
Date Field Utility Functions.

Helpers for building calendar dates the way a native calendar constructor
does (month and day overflow roll into the next month/year), converting
loosely typed input into `datetime.date`, and comparing/formatting dates.

Naming Conventions:
- to_X: Convert TO a type (e.g., to_date)
- X_as_string: Format a value as a string (e.g., date_as_string)
"""
import calendar
import logging
import math
from datetime import date, datetime
from typing import Any, Optional

from calgrid.utils.clock import Clock, get_current_date

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7

_DAYS_BEFORE_MONTH = [0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334]


class InvalidDateError(ValueError):
    """Raised when a value cannot be turned into a calendar date."""
    pass


def native_weekday(value: date) -> int:
    """Weekday index with 0 = Sunday through 6 = Saturday."""
    return value.isoweekday() % DAYS_IN_WEEK


def _ordinal(year: int, month_index: int, day: int) -> int:
    # Proleptic Gregorian ordinal (0001-01-01 is 1), valid for any year
    previous_year = year - 1
    days_before_year = previous_year * 365 + previous_year // 4 - previous_year // 100 + previous_year // 400
    leap_day = 1 if month_index > 1 and calendar.isleap(year) else 0
    return days_before_year + _DAYS_BEFORE_MONTH[month_index] + leap_day + day


def compose_date(year: int, month: int, day: int = 1) -> date:
    """
    Compose a date from a year, a zero-based month and a day of month.

    Out-of-range months and days roll over instead of failing: month 12 is
    January of the following year, day 0 is the last day of the previous
    month, day 32 of January is the 1st of February.

    Args:
        year: Calendar year
        month: Zero-based month index, any integer
        day: Day of month, any integer

    Returns:
        The resulting date

    Raises:
        InvalidDateError: If the resulting date falls outside what `date` can hold
            (0001-01-01 through 9999-12-31); intermediate months may lie outside it
    """
    try:
        year_offset, month_index = divmod(int(month), 12)
        return date.fromordinal(_ordinal(int(year) + year_offset, month_index, int(day)))
    except (ValueError, OverflowError, TypeError) as e:
        raise InvalidDateError(f"Invalid date: year={year}, month={month}, day={day}") from e


def _parse_date_string(value: str) -> date:
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise InvalidDateError(f"Invalid date: {value!r}") from e


def _from_epoch_millis(value: float) -> date:
    if not math.isfinite(value):
        raise InvalidDateError(f"Invalid date: {value}")
    try:
        return datetime.fromtimestamp(value / 1000).date()
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDateError(f"Invalid date: {value}") from e


def to_date(value: Any, month: Optional[int] = None, day: Optional[int] = None) -> date:
    """
    Convert input into a `date`.

    Accepts:
    - `date` / `datetime` (the calendar date part is used)
    - ISO 8601 strings, date-only or with a time component
    - a number alone, read as epoch milliseconds in local time
    - a year plus month (zero-based), optionally plus day, composed with
      rollover (see `compose_date`)

    Raises:
        InvalidDateError: For unparseable input, unsupported types, or a day
            given without a month
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_date_string(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDateError(f"Invalid date: unsupported type {type(value).__name__}")

    if month is None and day is None:
        return _from_epoch_millis(value)
    if month is None:
        raise InvalidDateError("Invalid arguments: day given without month")
    if not math.isfinite(value):
        raise InvalidDateError(f"Invalid date: {value}")
    return compose_date(int(value), month, 1 if day is None else day)


def date_as_string(value: Any) -> str:
    """
    Format a date as `YYYY-MM-DD`.

    Returns an empty string instead of raising when the value is not a
    valid date.
    """
    try:
        return to_date(value).isoformat()
    except InvalidDateError:
        logger.debug(f"Cannot format {value!r} as a date")
        return ""


def is_same_date(first: Any, second: Any) -> bool:
    """True when both values are valid dates on the same calendar day."""
    first_as_string = date_as_string(first)
    return first_as_string != "" and first_as_string == date_as_string(second)


def is_today(value: Any, clock: Optional[Clock] = None) -> bool:
    return is_same_date(value, get_current_date(clock))


def today_as_string(clock: Optional[Clock] = None) -> str:
    return date_as_string(get_current_date(clock))


def day_of_week(day: int, month: int, year: int) -> int:
    """Native weekday of (year, zero-based month, day), with rollover."""
    return native_weekday(compose_date(year, month, day))
