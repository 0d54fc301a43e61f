from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from menucost.schemas import MenuTypeCreate, MenuTypeUpdate, MenuTypeRead
from menucost.crud import menu_type
from menucost.db import get_db
from menucost.auth.policy import Action, require
from menucost.core.cache import query_cache
from menucost.core.constants import SCOPE_MENU_TYPES, SCOPE_MENUS

router = APIRouter()


@router.get("/", response_model=List[MenuTypeRead])
async def list_menu_types(
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    """Menu types, oldest first (the first one is the default)"""
    key = (SCOPE_MENU_TYPES, "all")
    cached = query_cache.get(key)
    if cached is not None:
        return cached

    types = [MenuTypeRead.model_validate(t) for t in await menu_type.get_menu_types(db)]
    query_cache.set(key, types)
    return types


@router.post("/", response_model=MenuTypeRead)
async def create_menu_type(
    payload: MenuTypeCreate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    created = await menu_type.create_menu_type(db, payload, created_by=user.id)
    query_cache.invalidate(SCOPE_MENU_TYPES, SCOPE_MENUS)
    return created


@router.put("/{menu_type_id}", response_model=MenuTypeRead)
async def update_menu_type(
    menu_type_id: str,
    updates: MenuTypeUpdate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_menus))
):
    mt = await menu_type.update_menu_type(db, menu_type_id, updates)
    if not mt:
        raise HTTPException(status_code=404, detail="Menu type not found")
    query_cache.invalidate(SCOPE_MENU_TYPES, SCOPE_MENUS)
    return mt


@router.delete("/{menu_type_id}")
async def delete_menu_type(
    menu_type_id: str,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.delete_menu_type))
):
    """Delete a menu type; refused with 409 while menus still use it"""
    mt = await menu_type.delete_menu_type(db, menu_type_id)
    if not mt:
        raise HTTPException(status_code=404, detail="Menu type not found")
    query_cache.invalidate(SCOPE_MENU_TYPES, SCOPE_MENUS)
    return {"message": "Menu type deleted"}
