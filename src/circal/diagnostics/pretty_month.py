from __future__ import annotations

from datetime import date
import argparse

import circal
from circal.core.types import DayCell, MonthViewModel


def cell(c: DayCell, w: int = 4) -> str:
    """Day number, bracketed when selected, starred when today, dimmed (parenthesised) outside the month."""
    s = f"{c.day_number:d}"
    if not c.in_month:
        s = f"({s})"
    if c.is_selected:
        s = f"[{s}]"
    if c.is_today:
        s += "*"
    return s.rjust(w)


def render(vm: MonthViewModel, w: int = 6) -> str:
    header = " ".join(lbl[:w].rjust(w) for lbl in vm.weekday_labels)
    lines = [vm.month_label, header, "-" * len(header)]
    for wk in vm.weeks:
        lines.append(" ".join(cell(c, w) for c in wk))
    return "\n".join(lines)


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="circal month",
        description="Print the 6x7 month grid for a selected date.",
    )
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (default: today)")
    p.add_argument("--week-start", type=int, default=1, help="0=Sunday .. 6=Saturday (default: 1)")
    p.add_argument("--today", help="YYYY-MM-DD used for the 'today' marker")
    p.add_argument("--locale", default="en-GB")
    args = p.parse_args(argv)

    selected = _parse_ymd(args.date) if args.date else date.today()
    today = _parse_ymd(args.today) if args.today else None

    vm = circal.month_view(selected, week_starts_on=args.week_start, today=today, locale=args.locale)
    print(render(vm))
    print()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
