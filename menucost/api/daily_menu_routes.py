from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from menucost.schemas import (
    DailyMenuCreate,
    DailyMenuUpdate,
    DailyMenuRead,
    MenuIngredientCreate,
    CalendarDay,
    CalendarMonth,
    DuplicateMenuRequest,
    DuplicateMenuTypeRequest,
    DuplicationReport,
)
from menucost.crud import daily_menu, menu_line
from menucost.db import get_db
from menucost.auth.policy import Action, require
from menucost.config import settings
from menucost.core.cache import query_cache
from menucost.core.constants import SCOPE_MENUS
from menucost.services.duplication import MenuDuplicator
from menucost.services.month_calendar import index_by_date, month_days, date_key

router = APIRouter()


def _serialize(menus) -> List[DailyMenuRead]:
    return [DailyMenuRead.model_validate(m) for m in menus]


# ---------- Listings ----------
# Static paths are declared before "/{menu_id}" so they are not shadowed.

@router.get("/", response_model=List[DailyMenuRead])
async def list_month_menus(
    year: int,
    month: int = Query(ge=1, le=12),
    menu_type_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    """Menus of a month, ordered by date"""
    key = (SCOPE_MENUS, "month", year, month, menu_type_id)
    cached = query_cache.get(key)
    if cached is not None:
        return cached

    menus = _serialize(await daily_menu.get_month_menus(db, year, month, menu_type_id))
    query_cache.set(key, menus)
    return menus


@router.get("/calendar", response_model=CalendarMonth)
async def month_calendar(
    year: int,
    month: int = Query(ge=1, le=12),
    menu_type_id: Optional[str] = None,
    weekdays_only: Optional[bool] = None,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    """Calendar grid of a month with the menu planned on each day (if any)"""
    if weekdays_only is None:
        weekdays_only = settings.weekdays_only

    menus = await daily_menu.get_month_menus(db, year, month, menu_type_id)
    by_date = index_by_date(menus)

    days = []
    for day in month_days(year, month, weekdays_only):
        menu = by_date.get(date_key(day))
        days.append(CalendarDay(
            day=day,
            weekday=day.weekday(),
            menu=DailyMenuRead.model_validate(menu) if menu else None
        ))

    return CalendarMonth(
        year=year,
        month=month,
        menu_type_id=menu_type_id,
        weekdays_only=weekdays_only,
        days=days
    )


@router.get("/year/{year}", response_model=List[DailyMenuRead])
async def list_year_menus(
    year: int,
    menu_type_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    key = (SCOPE_MENUS, "year", year, menu_type_id)
    cached = query_cache.get(key)
    if cached is not None:
        return cached

    menus = _serialize(await daily_menu.get_year_menus(db, year, menu_type_id))
    query_cache.set(key, menus)
    return menus


@router.post("/duplicate-type", response_model=DuplicationReport)
async def duplicate_menu_type(
    payload: DuplicateMenuTypeRequest,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    """Copy every menu of one type in a month onto another type"""
    duplicator = MenuDuplicator(db, created_by=user.id)
    report = await duplicator.duplicate_menu_type(
        payload.source_menu_type_id,
        payload.target_menu_type_id,
        payload.year,
        payload.month
    )
    query_cache.invalidate(SCOPE_MENUS)
    return report


# ---------- Single menu ----------

@router.post("/", response_model=DailyMenuRead)
async def create_menu(
    payload: DailyMenuCreate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    """Create the menu of a day; 409 if the day already has one for that type"""
    created = await daily_menu.create_menu(db, payload, created_by=user.id)
    query_cache.invalidate(SCOPE_MENUS)
    return created


@router.get("/{menu_id}", response_model=DailyMenuRead)
async def get_menu(
    menu_id: str,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    menu = await daily_menu.get_menu(db, menu_id)
    if not menu:
        raise HTTPException(status_code=404, detail="Menu not found")
    return menu


@router.put("/{menu_id}", response_model=DailyMenuRead)
async def update_menu(
    menu_id: str,
    updates: DailyMenuUpdate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    menu = await daily_menu.update_menu(db, menu_id, updates)
    if not menu:
        raise HTTPException(status_code=404, detail="Menu not found")
    query_cache.invalidate(SCOPE_MENUS)
    return menu


@router.delete("/{menu_id}")
async def delete_menu(
    menu_id: str,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    menu = await daily_menu.delete_menu(db, menu_id)
    if not menu:
        raise HTTPException(status_code=404, detail="Menu not found")
    query_cache.invalidate(SCOPE_MENUS)
    return {"message": "Menu deleted"}


@router.post("/{menu_id}/ingredients", response_model=DailyMenuRead)
async def add_ingredient(
    menu_id: str,
    payload: MenuIngredientCreate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    """Add a product at its current price; the menu total follows"""
    menu = await menu_line.add_ingredient(db, menu_id, payload)
    query_cache.invalidate(SCOPE_MENUS)
    return menu


@router.delete("/{menu_id}/ingredients/{ingredient_id}", response_model=DailyMenuRead)
async def remove_ingredient(
    menu_id: str,
    ingredient_id: str,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    menu = await menu_line.remove_ingredient(db, menu_id, ingredient_id)
    query_cache.invalidate(SCOPE_MENUS)
    return menu


@router.post("/{menu_id}/kits/{kit_id}/toggle", response_model=DailyMenuRead)
async def toggle_kit(
    menu_id: str,
    kit_id: str,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    """Link the kit to the menu, or unlink it if already linked"""
    menu, _linked = await menu_line.toggle_kit(db, menu_id, kit_id)
    query_cache.invalidate(SCOPE_MENUS)
    return menu


@router.post("/{menu_id}/duplicate", response_model=DailyMenuRead)
async def duplicate_menu(
    menu_id: str,
    payload: DuplicateMenuRequest,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    """Copy a menu, line items included, to another date (and optionally type)"""
    duplicator = MenuDuplicator(db, created_by=user.id)
    menu = await duplicator.duplicate_menu(
        menu_id,
        payload.target_date,
        payload.target_menu_type_id
    )
    query_cache.invalidate(SCOPE_MENUS)
    return menu
