from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Tuple

from ..core.errors import InvalidDateError, InvalidWeekdayIndexError
from ..core.time import add_days, is_same_day, start_of_day, to_iso_date, weekday_sun0
from ..core.types import DayCell, MonthViewModel
from ..i18n.locale import DEFAULT_LOCALE, format_month_year, resolve_locale

log = logging.getLogger(__name__)

GRID_WEEKS = 6
GRID_DAYS = GRID_WEEKS * 7

# 1 Nov 2021 was a Monday
_REFERENCE_MONDAY = date(2021, 11, 1)


def weekday_labels(week_starts_on: int = 1, locale: str = DEFAULT_LOCALE) -> Tuple[str, ...]:
    """Seven short weekday names starting at ``week_starts_on`` (0=Sunday)."""
    _check_week_start(week_starts_on)
    days = resolve_locale(locale).locale.days["format"]["abbreviated"]
    monday_based = [days[add_days(_REFERENCE_MONDAY, i).weekday()] for i in range(7)]
    shift = (week_starts_on + 6) % 7
    return tuple(monday_based[shift:] + monday_based[:shift])

def _check_week_start(week_starts_on: int) -> None:
    if not isinstance(week_starts_on, int) or not 0 <= week_starts_on <= 6:
        raise InvalidWeekdayIndexError(f"Invalid week start: {week_starts_on}. Must be 0-6 (0=Sunday).")

def _check_grid_range(first_of_month: date, week_starts_on: int) -> None:
    offset = (weekday_sun0(first_of_month) - week_starts_on + 7) % 7
    lo = first_of_month.toordinal() - offset
    hi = lo + GRID_DAYS - 1
    if lo < date.min.toordinal() or hi > date.max.toordinal():
        raise InvalidDateError(
            f"Month grid for {first_of_month.year:04d}-{first_of_month.month:02d} falls outside "
            f"the supported range {date.min.isoformat()}..{date.max.isoformat()}"
        )

def grid_start(first_of_month: date, week_starts_on: int = 1) -> date:
    """First date shown: the week-start day on or before the 1st."""
    offset = (weekday_sun0(first_of_month) - week_starts_on + 7) % 7
    return add_days(first_of_month, -offset)

def build_month_view_model(
    selected_date: date,
    *,
    week_starts_on: int = 1,
    today: Optional[date] = None,
    locale: str = DEFAULT_LOCALE,
) -> MonthViewModel:
    """
    6x7 grid for the month containing ``selected_date``.

    Leading and trailing cells borrow days from the neighbouring months, so
    every week is complete and the grid height never changes.
    """
    _check_week_start(week_starts_on)
    selected = start_of_day(selected_date)
    today_day = start_of_day(today if today is not None else date.today())

    first = selected.replace(day=1)
    _check_grid_range(first, week_starts_on)
    start = grid_start(first, week_starts_on)
    log.debug("month grid %04d-%02d starts %s", first.year, first.month, start)

    cells = []
    for i in range(GRID_DAYS):
        d = add_days(start, i)
        cells.append(DayCell(
            date=d,
            iso_date=to_iso_date(d),
            day_number=d.day,
            in_month=(d.month == first.month and d.year == first.year),
            is_today=is_same_day(d, today_day),
            is_selected=is_same_day(d, selected),
        ))

    weeks = tuple(tuple(cells[w * 7:(w + 1) * 7]) for w in range(GRID_WEEKS))
    resolved = resolve_locale(locale)
    return MonthViewModel(
        month_label=format_month_year(first, resolved.identifier),
        weekday_labels=weekday_labels(week_starts_on, resolved.identifier),
        weeks=weeks,
        year=first.year,
        month=first.month,
        locale=resolved.identifier,
    )
