from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from menucost.schemas import CategoryCreate, CategoryUpdate, CategoryRead
from menucost.crud import category
from menucost.db import get_db
from menucost.auth.policy import Action, require
from menucost.core.cache import query_cache
from menucost.core.constants import SCOPE_CATEGORIES, SCOPE_MENUS, SCOPE_PRODUCTS

router = APIRouter()


@router.get("/", response_model=List[CategoryRead])
async def list_categories(
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    key = (SCOPE_CATEGORIES, "all")
    cached = query_cache.get(key)
    if cached is not None:
        return cached

    categories = [CategoryRead.model_validate(c) for c in await category.get_categories(db)]
    query_cache.set(key, categories)
    return categories


@router.post("/", response_model=CategoryRead)
async def create_category(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_catalog))
):
    created = await category.create_category(db, payload)
    query_cache.invalidate(SCOPE_CATEGORIES)
    return created


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: str,
    updates: CategoryUpdate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_catalog))
):
    cat = await category.update_category(db, category_id, updates)
    if not cat:
        raise HTTPException(status_code=404, detail="Category not found")
    query_cache.invalidate(SCOPE_CATEGORIES, SCOPE_PRODUCTS, SCOPE_MENUS)
    return cat


@router.delete("/{category_id}")
async def delete_category(
    category_id: str,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.delete_catalog))
):
    cat = await category.delete_category(db, category_id)
    if not cat:
        raise HTTPException(status_code=404, detail="Category not found")
    query_cache.invalidate(SCOPE_CATEGORIES, SCOPE_PRODUCTS, SCOPE_MENUS)
    return {"message": "Category deleted"}
