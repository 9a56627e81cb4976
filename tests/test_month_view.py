# tests/test_month_view.py

from datetime import date, datetime

import pytest

from circal.core.errors import InvalidDateError, InvalidWeekdayIndexError
from circal.grid.month_view import build_month_view_model, grid_start, weekday_labels


def test_january_2026_monday_start():
    vm = build_month_view_model(date(2026, 1, 15), week_starts_on=1, today=date(2026, 1, 20))

    assert vm.month_label == "January 2026"
    assert (vm.year, vm.month) == (2026, 1)
    assert vm.weekday_labels == ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

    first = vm.weeks[0][0]
    assert first.iso_date == "2025-12-29"
    assert first.day_number == 29
    assert not first.in_month

    assert vm.today_cell.iso_date == "2026-01-20"
    assert vm.selected_cell.iso_date == "2026-01-15"

def test_grid_is_always_six_full_weeks():
    for month in range(1, 13):
        vm = build_month_view_model(date(2025, month, 1), today=date(2000, 1, 1))
        assert len(vm.weeks) == 6
        assert all(len(w) == 7 for w in vm.weeks)
        assert len(vm.cells) == 42

def test_cells_are_consecutive_days():
    vm = build_month_view_model(date(2026, 3, 10), today=date(2026, 3, 10))
    cells = vm.cells
    for a, b in zip(cells, cells[1:]):
        assert (b.date - a.date).days == 1

def test_exactly_one_selected_cell():
    vm = build_month_view_model(date(2026, 1, 31), today=date(2026, 1, 1))
    assert sum(c.is_selected for c in vm.cells) == 1
    assert vm.selected_cell.in_month

def test_today_outside_grid():
    vm = build_month_view_model(date(2026, 1, 15), today=date(2027, 6, 1))
    assert vm.today_cell is None

def test_in_month_days_are_one_to_n():
    vm = build_month_view_model(date(2026, 4, 5), today=date(2026, 4, 5))
    assert [c.day_number for c in vm.in_month_cells()] == list(range(1, 31))

def test_leap_february():
    leap = build_month_view_model(date(2024, 2, 10), today=date(2024, 2, 10))
    assert len(leap.in_month_cells()) == 29
    assert leap.in_month_cells()[-1].iso_date == "2024-02-29"

    common = build_month_view_model(date(2023, 2, 10), today=date(2023, 2, 10))
    assert len(common.in_month_cells()) == 28
    assert not any(c.in_month and c.day_number == 29 for c in common.cells)

def test_sunday_start():
    vm = build_month_view_model(date(2026, 1, 15), week_starts_on=0, today=date(2026, 1, 15))
    assert vm.weekday_labels[0] == "Sun"
    assert vm.weekday_labels[-1] == "Sat"
    # 1 Jan 2026 is a Thursday
    assert vm.weeks[0][0].iso_date == "2025-12-28"

@pytest.mark.parametrize("week_start", range(7))
def test_first_cell_falls_on_week_start(week_start):
    vm = build_month_view_model(date(2026, 5, 20), week_starts_on=week_start, today=date(2026, 5, 20))
    first = vm.weeks[0][0].date
    assert (first.weekday() + 1) % 7 == week_start
    assert first <= date(2026, 5, 1)
    assert (date(2026, 5, 1) - first).days < 7

def test_month_starting_on_week_start_has_no_leading_days():
    # 1 June 2026 is a Monday
    vm = build_month_view_model(date(2026, 6, 18), week_starts_on=1, today=date(2026, 6, 18))
    assert vm.weeks[0][0].iso_date == "2026-06-01"
    assert vm.weeks[0][0].in_month

def test_year_boundary_trailing_cells():
    vm = build_month_view_model(date(2025, 12, 10), today=date(2025, 12, 10))
    last = vm.weeks[-1][-1]
    assert last.date.year == 2026
    assert not last.in_month

def test_datetime_input_is_truncated():
    vm = build_month_view_model(datetime(2026, 1, 15, 23, 59), today=datetime(2026, 1, 20, 0, 1))
    assert vm.selected_cell.iso_date == "2026-01-15"
    assert vm.today_cell.iso_date == "2026-01-20"

def test_invalid_week_start():
    with pytest.raises(InvalidWeekdayIndexError):
        build_month_view_model(date(2026, 1, 15), week_starts_on=7)
    with pytest.raises(ValueError):
        weekday_labels(-1)

def test_invalid_date():
    with pytest.raises(InvalidDateError):
        build_month_view_model("2026-01-15", today=date(2026, 1, 1))

def test_grid_past_last_supported_date():
    with pytest.raises(InvalidDateError, match="supported range"):
        build_month_view_model(date(9999, 12, 15), today=date(9999, 12, 15))

def test_grid_before_first_supported_date():
    # 1 Jan 0001 is a Monday, so a Sunday start needs 31 Dec 0000
    with pytest.raises(InvalidDateError, match="supported range"):
        build_month_view_model(date(1, 1, 5), week_starts_on=0, today=date(1, 1, 5))
    vm = build_month_view_model(date(1, 1, 5), week_starts_on=1, today=date(1, 1, 5))
    assert vm.weeks[0][0].iso_date == "0001-01-01"

def test_unknown_locale_falls_back():
    vm = build_month_view_model(date(2026, 1, 15), today=date(2026, 1, 15), locale="xx-YY")
    assert vm.locale == "en-GB"
    assert vm.month_label == "January 2026"

def test_french_labels():
    vm = build_month_view_model(date(2026, 1, 15), today=date(2026, 1, 15), locale="fr-FR")
    assert vm.locale == "fr-FR"
    assert "janvier" in vm.month_label
    assert "2026" in vm.month_label

def test_grid_start():
    assert grid_start(date(2026, 1, 1), 1) == date(2025, 12, 29)
    assert grid_start(date(2026, 1, 1), 4) == date(2026, 1, 1)
