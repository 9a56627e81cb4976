# tests/test_week_view.py

from datetime import date, datetime

from circal.grid.week_view import week_dates, week_start_date


def test_week_starts_on_monday():
    assert week_start_date(date(2026, 1, 15)) == date(2026, 1, 12)
    assert week_start_date(date(2026, 1, 12)) == date(2026, 1, 12)
    assert week_start_date(date(2026, 1, 18)) == date(2026, 1, 12)
    assert week_start_date(datetime(2026, 1, 1, 8, 0)) == date(2025, 12, 29)

def test_week_dates():
    days = week_dates(date(2025, 12, 29))
    assert len(days) == 7
    assert days[0] == date(2025, 12, 29)
    assert days[-1] == date(2026, 1, 4)
