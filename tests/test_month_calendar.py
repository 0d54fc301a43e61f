"""Unit tests for calendar helpers."""
from datetime import date
from types import SimpleNamespace

from menucost.services.month_calendar import (
    add_months,
    business_days,
    index_by_date,
    month_bounds,
    month_days,
    sorted_months,
)


def test_month_bounds_is_half_open():
    assert month_bounds(2026, 3) == (date(2026, 3, 1), date(2026, 4, 1))


def test_month_bounds_december_rolls_into_next_year():
    assert month_bounds(2026, 12) == (date(2026, 12, 1), date(2027, 1, 1))


def test_month_days_full_month():
    days = month_days(2024, 2)
    assert len(days) == 29
    assert days[0] == date(2024, 2, 1)
    assert days[-1] == date(2024, 2, 29)


def test_weekday_grid_drops_weekends():
    # March 2026 starts on a Sunday
    days = month_days(2026, 3, weekdays_only=True)
    assert date(2026, 3, 1) not in days
    assert date(2026, 3, 7) not in days
    assert days[0] == date(2026, 3, 2)
    assert all(d.weekday() < 5 for d in days)
    assert len(days) == 22


def test_business_days():
    assert business_days(2026, 3) == 22
    assert business_days(2026, 2) == 20


def test_add_months_clamps_day():
    assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
    assert add_months(date(2026, 1, 15), -1) == date(2025, 12, 15)


def test_index_by_date_keys_iso_strings():
    a = SimpleNamespace(menu_date=date(2026, 3, 2))
    b = SimpleNamespace(menu_date=date(2026, 3, 3))
    index = index_by_date([a, b])
    assert index == {"2026-03-02": a, "2026-03-03": b}
    assert "2026-03-04" not in index


def test_index_by_date_accepts_string_dates():
    menu = SimpleNamespace(menu_date="2026-03-02")
    assert index_by_date([menu]) == {"2026-03-02": menu}


def test_sorted_months_puts_current_first():
    today = date(2026, 6, 10)
    months = sorted_months(date(2026, 5, 20), span=2, today=today)
    assert months[0] == date(2026, 5, 1)
    assert months[1:] == [
        date(2026, 4, 1),
        date(2026, 6, 1),
        date(2026, 7, 1),
        date(2026, 8, 1),
    ]


def test_sorted_months_covers_span_around_today():
    months = sorted_months(date(2026, 6, 1), span=12, today=date(2026, 6, 10))
    assert len(months) == 25
    assert months[0] == date(2026, 6, 1)
    assert min(months) == date(2025, 6, 1)
    assert max(months) == date(2027, 6, 1)
