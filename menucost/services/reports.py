"""
Report aggregations over loaded daily menus.

Pure functions: they take menus (``menu_date``, ``menu_type_id``,
``total_cost``, ``description``, ``ingredients``, ``kits``) and return plain
dicts shaped like the schemas in ``menucost.schemas.report``.

"Days planned" always means menus whose total_cost is greater than zero, and
averages divide by that count.
"""
import calendar as _calendar
from collections import OrderedDict
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from menucost.core.constants import (
    DEFAULT_KIT_LABEL,
    INGREDIENTS_LABEL,
    NO_DESCRIPTION_LABEL,
    NO_TYPE_LABEL,
    UNCATEGORIZED_LABEL,
)
from menucost.services.month_calendar import business_days
from menucost.services.costing import ZERO, is_planned, quantize_cost, to_decimal

HUNDRED = Decimal("100")


def _cost(menu) -> Decimal:
    return to_decimal(getattr(menu, "total_cost", None))


def _average(total: Decimal, days: int) -> Decimal:
    return quantize_cost(total / days) if days > 0 else ZERO


def _share(value: Decimal, total: Decimal) -> Optional[Decimal]:
    if total <= ZERO:
        return None
    return (value / total * HUNDRED).quantize(Decimal("0.1"))


def summarize(menus: Iterable) -> Dict:
    """Total, planned-day count and average over any menu list."""
    total = ZERO
    days = 0
    for menu in menus:
        total += _cost(menu)
        if is_planned(menu):
            days += 1
    return {
        "total_cost": quantize_cost(total),
        "days_planned": days,
        "average_cost": _average(total, days),
    }


def monthly_stats(menus: Sequence, year: int, month: int) -> Dict:
    summary = summarize(menus)
    return {
        "total_cost": summary["total_cost"],
        "average_cost": summary["average_cost"],
        "days_planned": summary["days_planned"],
        "business_days": business_days(year, month),
    }


def daily_series(menus: Iterable, limit: int = 15) -> List[Dict]:
    rows = [
        {
            "menu_date": menu.menu_date,
            "cost": _cost(menu),
            "description": menu.description or NO_DESCRIPTION_LABEL,
        }
        for menu in menus
        if is_planned(menu)
    ]
    return rows[:limit]


def _ranked(totals: Dict[str, Decimal], period_total: Decimal) -> List[Dict]:
    rows = [
        {"name": name, "value": quantize_cost(value), "share": _share(value, period_total)}
        for name, value in totals.items()
    ]
    return sorted(rows, key=lambda r: r["value"], reverse=True)


def line_item_breakdown(menus: Sequence) -> List[Dict]:
    """Ingredient costs under one label, plus one entry per kit name."""
    totals: Dict[str, Decimal] = OrderedDict()
    for menu in menus:
        for ingredient in getattr(menu, "ingredients", None) or []:
            totals[INGREDIENTS_LABEL] = totals.get(INGREDIENTS_LABEL, ZERO) + to_decimal(ingredient.cost)
        for link in getattr(menu, "kits", None) or []:
            kit = getattr(link, "kit", None)
            name = getattr(kit, "name", None) or DEFAULT_KIT_LABEL
            totals[name] = totals.get(name, ZERO) + to_decimal(link.cost)
    return _ranked(totals, sum(totals.values(), ZERO))


def _category_name(ingredient) -> str:
    product = getattr(ingredient, "product", None)
    category = getattr(product, "category", None)
    return getattr(category, "name", None) or UNCATEGORIZED_LABEL


def category_breakdown(menus: Sequence) -> List[Dict]:
    """Ingredient cost per product category, highest first."""
    totals: Dict[str, Decimal] = OrderedDict()
    for menu in menus:
        for ingredient in getattr(menu, "ingredients", None) or []:
            name = _category_name(ingredient)
            totals[name] = totals.get(name, ZERO) + to_decimal(ingredient.cost)
    period_total = summarize(menus)["total_cost"]
    return _ranked(totals, period_total)


def type_comparison(menus: Sequence, menu_types: Sequence) -> List[Dict]:
    """
    Total, planned days and average per menu type, plus a bucket for menus
    without a type. Types with no planned day are left out.
    """
    buckets: Dict[Optional[str], Dict] = OrderedDict()
    for menu_type in menu_types:
        buckets[menu_type.id] = {"menu_type_id": menu_type.id, "name": menu_type.name, "menus": []}
    buckets[None] = {"menu_type_id": None, "name": NO_TYPE_LABEL, "menus": []}

    for menu in menus:
        bucket = buckets.get(menu.menu_type_id)
        if bucket is not None:
            bucket["menus"].append(menu)

    rows = []
    for bucket in buckets.values():
        summary = summarize(bucket["menus"])
        if summary["days_planned"] == 0:
            continue
        rows.append({"menu_type_id": bucket["menu_type_id"], "name": bucket["name"], **summary})
    return rows


def _by_month(menus: Iterable) -> Dict[int, List]:
    grouped: Dict[int, List] = {m: [] for m in range(1, 13)}
    for menu in menus:
        grouped[menu.menu_date.month].append(menu)
    return grouped


def monthly_breakdown(menus: Sequence) -> List[Dict]:
    """Twelve rows (January first) with month-over-month variation of the average."""
    rows = []
    previous = None
    for month, month_menus in _by_month(menus).items():
        row = {"month": month, "name": _calendar.month_name[month], **summarize(month_menus)}
        if previous is not None and previous["average_cost"] > ZERO:
            change = (row["average_cost"] - previous["average_cost"]) / previous["average_cost"] * HUNDRED
            row["variation"] = change.quantize(Decimal("0.1"))
        else:
            row["variation"] = None
        rows.append(row)
        previous = row
    return rows


def extreme_months(rows: Sequence[Dict]):
    """(most expensive, cheapest) by average among months with a planned day."""
    with_data = [r for r in rows if r["days_planned"] > 0]
    if not with_data:
        return None, None
    most_expensive = with_data[0]
    cheapest = with_data[0]
    for row in with_data[1:]:
        if row["average_cost"] > most_expensive["average_cost"]:
            most_expensive = row
        if row["average_cost"] < cheapest["average_cost"]:
            cheapest = row
    return most_expensive, cheapest


def annual_stats(menus: Sequence) -> Dict:
    months = monthly_breakdown(menus)
    total = sum((m["total_cost"] for m in months), ZERO)
    days = sum(m["days_planned"] for m in months)
    most_expensive, cheapest = extreme_months(months)
    return {
        "total_cost": quantize_cost(total),
        "days_planned": days,
        "average_cost": _average(total, days),
        "most_expensive": most_expensive,
        "cheapest": cheapest,
        "months": months,
    }


def type_comparison_by_month(
    menus: Sequence,
    menu_types: Sequence,
    selected_type_ids: Optional[Sequence[str]] = None,
) -> List[Dict]:
    """Average cost of each selected type (default: all) for each month."""
    if selected_type_ids:
        wanted = set(selected_type_ids)
        types = [t for t in menu_types if t.id in wanted]
    else:
        types = list(menu_types)

    rows = []
    for month, month_menus in _by_month(menus).items():
        averages = {}
        for menu_type in types:
            typed = [m for m in month_menus if m.menu_type_id == menu_type.id]
            averages[menu_type.name] = summarize(typed)["average_cost"]
        rows.append({"month": month, "name": _calendar.month_abbr[month], "averages": averages})
    return rows


def recent_menus(menus: Iterable, limit: int = 5) -> List:
    planned = [m for m in menus if is_planned(m)]
    planned.sort(key=lambda m: m.menu_date, reverse=True)
    return planned[:limit]
