from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..core.time import start_of_day
from ..i18n.locale import DEFAULT_LOCALE, format_date


@dataclass(frozen=True)
class DateRange:
    """Inclusive on both ends."""
    start: date
    end: date

    def __contains__(self, d: date) -> bool:
        return start_of_day(self.start) <= start_of_day(d) <= start_of_day(self.end)

@dataclass(frozen=True)
class DateValidation:
    valid: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid


def validate_date(
    d,
    *,
    min_date: Optional[date] = None,
    max_date: Optional[date] = None,
    allow_past: bool = True,
    disabled_dates: Iterable[date] = (),
    disabled_ranges: Iterable[DateRange] = (),
    today: Optional[date] = None,
    locale: str = DEFAULT_LOCALE,
) -> DateValidation:
    """Check ``d`` against the restrictions; the first failing rule wins."""
    if not isinstance(d, date):
        return DateValidation(False, "Invalid date")
    day = start_of_day(d)

    if not allow_past:
        ref = start_of_day(today if today is not None else date.today())
        if day < ref:
            return DateValidation(False, "Past dates are not allowed")

    if min_date is not None and day < start_of_day(min_date):
        return DateValidation(False, f"Date must be after {format_date(min_date, locale)}")

    if max_date is not None and day > start_of_day(max_date):
        return DateValidation(False, f"Date must be before {format_date(max_date, locale)}")

    if any(day == start_of_day(x) for x in disabled_dates):
        return DateValidation(False, "This date is not available")

    if any(day in r for r in disabled_ranges):
        return DateValidation(False, "This date is not available")

    return DateValidation(True)

def is_date_restricted(d, **options) -> bool:
    return not validate_date(d, **options).valid

def validate_time(hour: int, minute: int, *, use_12_hour: bool = False, meridiem: Optional[str] = None) -> DateValidation:
    if use_12_hour:
        if not 1 <= hour <= 12:
            return DateValidation(False, "Hour must be between 1 and 12")
        if not meridiem:
            return DateValidation(False, "Meridiem (AM/PM) is required for 12-hour format")
        if meridiem not in ("AM", "PM"):
            return DateValidation(False, "Meridiem must be AM or PM")
    elif not 0 <= hour <= 23:
        return DateValidation(False, "Hour must be between 0 and 23")
    if not 0 <= minute <= 59:
        return DateValidation(False, "Minute must be between 0 and 59")
    return DateValidation(True)
