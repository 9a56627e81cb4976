"""
circal.i18n.locale
------------------
Month/weekday names and date strings via Babel (CLDR data).

Locale lookup is a two-step resolution: the requested identifier if CLDR
knows it, otherwise ``DEFAULT_LOCALE``. The outcome is a ``ResolvedLocale``
record, so callers can see whether the fallback was taken.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from babel import Locale
from babel.core import default_locale
from babel.dates import format_date as _babel_format_date
from babel.dates import format_skeleton
from babel.localedata import normalize_locale

from ..core.errors import InvalidDateError, InvalidMonthIndexError, InvalidWeekdayIndexError

log = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-GB"
RTL_LANGUAGES = ("ar", "he", "fa", "ur", "yi")


@dataclass(frozen=True)
class ResolvedLocale:
    requested: str
    identifier: str  # BCP 47 style, e.g. "en-GB"
    locale: Locale
    fell_back: bool


def _lookup(identifier: str) -> Optional[str]:
    """CLDR identifier (``en_GB``) for a BCP 47 tag, or None when unknown."""
    if not isinstance(identifier, str) or not identifier.strip():
        return None
    return normalize_locale(identifier.strip().replace("-", "_"))

@functools.lru_cache(maxsize=64)
def resolve_locale(identifier: Optional[str] = None) -> ResolvedLocale:
    requested = identifier or DEFAULT_LOCALE
    found = _lookup(requested)
    fell_back = found is None
    if fell_back:
        log.debug("locale %r not available, using %s", requested, DEFAULT_LOCALE)
        found = _lookup(DEFAULT_LOCALE)
    loc = Locale.parse(found)
    return ResolvedLocale(
        requested=requested,
        identifier=str(loc).replace("_", "-"),
        locale=loc,
        fell_back=fell_back,
    )

def get_default_locale() -> str:
    """Locale from the process environment (LANG and friends), else DEFAULT_LOCALE."""
    found = default_locale()
    if not found:
        return DEFAULT_LOCALE
    return found.replace("_", "-")

def is_rtl(locale: str) -> bool:
    return locale.split("-")[0].split("_")[0].lower() in RTL_LANGUAGES

# ------------------------------------------------------------
# Names
# ------------------------------------------------------------

def _check_month(month_index: int) -> None:
    if not isinstance(month_index, int) or not 0 <= month_index <= 11:
        raise InvalidMonthIndexError(f"Invalid month index: {month_index}. Must be 0-11.")

def _check_weekday(weekday_index: int) -> None:
    if not isinstance(weekday_index, int) or not 0 <= weekday_index <= 6:
        raise InvalidWeekdayIndexError(f"Invalid weekday index: {weekday_index}. Must be 0-6.")

def month_name(month_index: int, locale: str = DEFAULT_LOCALE) -> str:
    """Short month name; month_index is 0-based."""
    _check_month(month_index)
    return resolve_locale(locale).locale.months["format"]["abbreviated"][month_index + 1]

def full_month_name(month_index: int, locale: str = DEFAULT_LOCALE) -> str:
    _check_month(month_index)
    return resolve_locale(locale).locale.months["format"]["wide"][month_index + 1]

def month_names(locale: str = DEFAULT_LOCALE) -> Tuple[str, ...]:
    return tuple(month_name(i, locale) for i in range(12))

def full_month_names(locale: str = DEFAULT_LOCALE) -> Tuple[str, ...]:
    return tuple(full_month_name(i, locale) for i in range(12))

def weekday_name(weekday_index: int, locale: str = DEFAULT_LOCALE) -> str:
    """Short weekday name; 0=Sunday .. 6=Saturday."""
    _check_weekday(weekday_index)
    # CLDR day keys run 0=Monday .. 6=Sunday
    return resolve_locale(locale).locale.days["format"]["abbreviated"][(weekday_index + 6) % 7]

def weekday_names(locale: str = DEFAULT_LOCALE) -> Tuple[str, ...]:
    """Sunday first."""
    return tuple(weekday_name(i, locale) for i in range(7))

# ------------------------------------------------------------
# Dates
# ------------------------------------------------------------

def _require_date(d) -> None:
    if not isinstance(d, date):
        raise InvalidDateError(f"Invalid date provided: {d!r}")

def format_month_year(d: date, locale: str = DEFAULT_LOCALE) -> str:
    """Long month and numeric year, e.g. 'January 2026' in en-GB."""
    _require_date(d)
    return format_skeleton("yMMMM", d, locale=resolve_locale(locale).locale)

def format_date(d: date, locale: str = DEFAULT_LOCALE) -> str:
    """Long form, e.g. '15 January 2024' in en-GB."""
    _require_date(d)
    return _babel_format_date(d, format="long", locale=resolve_locale(locale).locale)

def format_date_short(d: date, locale: str = DEFAULT_LOCALE) -> str:
    """Two-digit day and month with the full year, e.g. '15/01/2024' in en-GB."""
    _require_date(d)
    return format_skeleton("yMMdd", d, locale=resolve_locale(locale).locale)

def format_time(dt: datetime, *, use_12_hour: bool = True) -> str:
    """'2:30 PM' or '14:30'."""
    if not isinstance(dt, datetime):
        raise InvalidDateError(f"Invalid datetime provided: {dt!r}")
    hours, minutes = dt.hour, dt.minute
    if use_12_hour:
        hour12 = 12 if hours == 0 else (hours - 12 if hours > 12 else hours)
        meridiem = "PM" if hours >= 12 else "AM"
        return f"{hour12}:{minutes:02d} {meridiem}"
    return f"{hours:02d}:{minutes:02d}"

def format_date_with_time(dt: datetime, *, use_12_hour: bool = True, locale: str = DEFAULT_LOCALE) -> str:
    return f"{format_date(dt, locale)}, {format_time(dt, use_12_hour=use_12_hour)}"

@dataclass(frozen=True)
class LocaleConfig:
    locale: str
    rtl: bool
    date_format: str

def locale_config(locale: Optional[str] = None) -> LocaleConfig:
    effective = locale or get_default_locale()
    if effective.startswith("en-US"):
        date_format = "MM/DD/YYYY"
    elif effective.startswith("en-CA") or effective.startswith("ja") or effective.startswith("zh"):
        date_format = "YYYY-MM-DD"
    else:
        date_format = "DD/MM/YYYY"
    return LocaleConfig(locale=effective, rtl=is_rtl(effective), date_format=date_format)
