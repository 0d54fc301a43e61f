from calendar import monthrange
from datetime import date
from typing import Dict, Iterable, List, Optional


def month_bounds(year: int, month: int):
    """Half-open range [first day, first day of next month)."""
    start = date(year, month, 1)
    if month == 12:
        end = date(year + 1, 1, 1)
    else:
        end = date(year, month + 1, 1)
    return start, end


def year_bounds(year: int):
    return date(year, 1, 1), date(year + 1, 1, 1)


def add_months(d: date, months: int) -> date:
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(d.day, monthrange(year, month)[1]))


def month_days(year: int, month: int, weekdays_only: bool = False) -> List[date]:
    """Dates shown on the calendar grid; weekends are dropped for weekday-only grids."""
    days = [date(year, month, d) for d in range(1, monthrange(year, month)[1] + 1)]
    if weekdays_only:
        days = [d for d in days if d.weekday() < 5]
    return days


def business_days(year: int, month: int) -> int:
    return len(month_days(year, month, weekdays_only=True))


def date_key(value) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)[:10]


def index_by_date(menus: Iterable) -> Dict[str, object]:
    """
    Map "YYYY-MM-DD" -> menu.

    Expects menus from a single-type query, which holds at most one menu per
    date; a later duplicate date replaces an earlier one.
    """
    return {date_key(menu.menu_date): menu for menu in menus}


def sorted_months(current: date, span: int = 12, today: Optional[date] = None) -> List[date]:
    """
    First-of-month dates from ``today - span`` to ``today + span`` months,
    with the month of ``current`` first and the rest in chronological order.
    """
    today = today or date.today()
    anchor = date(today.year, today.month, 1)
    months = [add_months(anchor, offset) for offset in range(-span, span + 1)]
    current_key = (current.year, current.month)
    return sorted(months, key=lambda m: ((m.year, m.month) != current_key, m))
