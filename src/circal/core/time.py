from __future__ import annotations
from datetime import date, datetime, timedelta
import calendar as pycal

from .errors import InvalidDateError, InvalidMonthIndexError


def start_of_day(value: date) -> date:
    """Strip time-of-day. Accepts ``date`` or ``datetime``; anything else is rejected."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidDateError(f"Expected a date, got {type(value).__name__}: {value!r}")

def is_leap_year(year: int) -> bool:
    """Gregorian rule: every 4th year, except centuries not divisible by 400."""
    return (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)

def days_in_month(month_index: int, year: int) -> int:
    """Number of days in a month. ``month_index`` is 0-based (0=January)."""
    if not 0 <= month_index <= 11:
        raise InvalidMonthIndexError(f"Invalid month index: {month_index}. Must be 0-11.")
    return pycal.monthrange(year, month_index + 1)[1]

def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)

def to_iso_date(d: date) -> str:
    """YYYY-MM-DD for the calendar day of ``d``."""
    d = start_of_day(d)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"

def is_same_day(a: date, b: date) -> bool:
    return start_of_day(a) == start_of_day(b)

def weekday_sun0(d: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday (Python's own weekday() is 0=Monday)."""
    return (d.weekday() + 1) % 7
