"""
Per-capita cost arithmetic.

Line-item costs are frozen when the item is created; a menu's total is always
the sum of its frozen line-item costs, never below zero.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from menucost.config import settings

ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 0.1 from dragging binary noise along
    return Decimal(str(value))


def quantize_cost(value, scale: Optional[int] = None) -> Decimal:
    scale = settings.cost_scale if scale is None else scale
    return to_decimal(value).quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)


def ingredient_cost(per_capita, price) -> Decimal:
    """Frozen cost of one ingredient line: per-capita quantity x current price."""
    return quantize_cost(to_decimal(per_capita) * to_decimal(price))


def kit_cost(price) -> Decimal:
    return quantize_cost(price)


def clamp_non_negative(value) -> Decimal:
    value = to_decimal(value)
    return value if value > ZERO else ZERO


def compute_total(ingredient_costs: Iterable, kit_costs: Iterable) -> Decimal:
    total = sum((to_decimal(c) for c in ingredient_costs), ZERO)
    total += sum((to_decimal(c) for c in kit_costs), ZERO)
    return quantize_cost(clamp_non_negative(total))


def menu_total(menu) -> Decimal:
    """Total of a loaded menu (``ingredients`` and ``kits`` with ``cost``)."""
    return compute_total(
        (i.cost for i in (getattr(menu, "ingredients", None) or [])),
        (k.cost for k in (getattr(menu, "kits", None) or [])),
    )


def is_planned(menu) -> bool:
    """A menu counts as planned once it carries any cost."""
    return to_decimal(getattr(menu, "total_cost", None)) > ZERO
