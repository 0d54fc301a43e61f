from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from menucost.schemas import KitCreate, KitUpdate, KitRead
from menucost.crud import kit
from menucost.db import get_db
from menucost.auth.policy import Action, require
from menucost.core.cache import query_cache
from menucost.core.constants import SCOPE_KITS, SCOPE_MENUS

router = APIRouter()


@router.get("/", response_model=List[KitRead])
async def list_kits(
    default_only: bool = False,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    key = (SCOPE_KITS, "default" if default_only else "all")
    cached = query_cache.get(key)
    if cached is not None:
        return cached

    kits = [KitRead.model_validate(k) for k in await kit.get_kits(db, default_only)]
    query_cache.set(key, kits)
    return kits


@router.post("/", response_model=KitRead)
async def create_kit(
    payload: KitCreate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_catalog))
):
    created = await kit.create_kit(db, payload)
    query_cache.invalidate(SCOPE_KITS)
    return created


@router.put("/{kit_id}", response_model=KitRead)
async def update_kit(
    kit_id: str,
    updates: KitUpdate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_catalog))
):
    """Update a kit (price, name, default flag); linked menus keep their frozen cost"""
    k = await kit.update_kit(db, kit_id, updates)
    if not k:
        raise HTTPException(status_code=404, detail="Kit not found")
    query_cache.invalidate(SCOPE_KITS, SCOPE_MENUS)
    return k


@router.delete("/{kit_id}")
async def delete_kit(
    kit_id: str,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.delete_catalog))
):
    k = await kit.delete_kit(db, kit_id)
    if not k:
        raise HTTPException(status_code=404, detail="Kit not found")
    query_cache.invalidate(SCOPE_KITS)
    return {"message": "Kit deleted"}
