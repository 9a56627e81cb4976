from __future__ import annotations

from datetime import date
from typing import Tuple

from ..core.time import add_days, start_of_day


def week_start_date(d: date) -> date:
    """Monday of the ISO week containing ``d``."""
    d = start_of_day(d)
    return add_days(d, -d.weekday())

def week_dates(week_start: date) -> Tuple[date, ...]:
    start = start_of_day(week_start)
    return tuple(add_days(start, i) for i in range(7))
