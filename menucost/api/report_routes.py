from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import date
from typing import List, Optional

from menucost.schemas import MonthlyReport, AnnualReport, Dashboard, DailyMenuRead, KitRead
from menucost.crud import daily_menu, menu_type, product, kit
from menucost.db import get_db
from menucost.auth.policy import Action, require
from menucost.core.cache import query_cache
from menucost.core.constants import SCOPE_MENUS
from menucost.services import reports
from menucost.services.month_calendar import month_days, sorted_months

router = APIRouter()


@router.get("/monthly", response_model=MonthlyReport)
async def monthly_report(
    year: int,
    month: int = Query(ge=1, le=12),
    menu_type_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    """Stats, daily costs, breakdowns and type comparison for one month"""
    key = (SCOPE_MENUS, "report", "monthly", year, month, menu_type_id)
    cached = query_cache.get(key)
    if cached is not None:
        return cached

    all_menus = await daily_menu.get_month_menus(db, year, month)
    if menu_type_id:
        menus = [m for m in all_menus if m.menu_type_id == menu_type_id]
    else:
        menus = all_menus
    types = await menu_type.get_menu_types(db)

    report = MonthlyReport(
        year=year,
        month=month,
        menu_type_id=menu_type_id,
        stats=reports.monthly_stats(menus, year, month),
        daily=reports.daily_series(menus),
        breakdown=reports.line_item_breakdown(menus),
        categories=reports.category_breakdown(menus),
        comparison=reports.type_comparison(all_menus, types)
    )
    query_cache.set(key, report)
    return report


@router.get("/annual", response_model=AnnualReport)
async def annual_report(
    year: int,
    menu_type_id: Optional[str] = None,
    compare: Optional[List[str]] = Query(None),
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    """
    Twelve monthly rows with extremes and variation. ``compare`` picks the
    menu types of the per-month comparison (all types when omitted).
    """
    key = (SCOPE_MENUS, "report", "annual", year, menu_type_id, tuple(compare or ()))
    cached = query_cache.get(key)
    if cached is not None:
        return cached

    all_menus = await daily_menu.get_year_menus(db, year)
    if menu_type_id:
        menus = [m for m in all_menus if m.menu_type_id == menu_type_id]
    else:
        menus = all_menus
    types = await menu_type.get_menu_types(db)

    report = AnnualReport(
        year=year,
        menu_type_id=menu_type_id,
        categories=reports.category_breakdown(menus),
        comparison=reports.type_comparison_by_month(all_menus, types, compare),
        **reports.annual_stats(menus)
    )
    query_cache.set(key, report)
    return report


@router.get("/dashboard", response_model=Dashboard)
async def dashboard(
    year: Optional[int] = None,
    month: Optional[int] = Query(None, ge=1, le=12),
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    """Current month overview (or the given month)"""
    today = date.today()
    year = year or today.year
    month = month or today.month

    menus = await daily_menu.get_month_menus(db, year, month)
    summary = reports.summarize(menus)

    return Dashboard(
        year=year,
        month=month,
        total_products=await product.count_products(db),
        days_in_month=len(month_days(year, month)),
        recent_menus=[DailyMenuRead.model_validate(m) for m in reports.recent_menus(menus)],
        default_kits=[KitRead.model_validate(k) for k in await kit.get_kits(db, default_only=True)],
        **summary
    )


@router.get("/months", response_model=List[date])
async def month_options(
    year: Optional[int] = None,
    month: Optional[int] = Query(None, ge=1, le=12),
    span: int = Query(12, ge=0, le=60),
    user=Depends(require(Action.view))
):
    """Month selector: the selected month first, then -span..+span months around today"""
    today = date.today()
    current = date(year or today.year, month or today.month, 1)
    return sorted_months(current, span, today)
