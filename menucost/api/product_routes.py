from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from menucost.schemas import ProductCreate, ProductUpdate, ProductRead
from menucost.crud import product
from menucost.db import get_db
from menucost.auth.policy import Action, require
from menucost.core.cache import query_cache
from menucost.core.constants import SCOPE_MENUS, SCOPE_PRODUCTS

router = APIRouter()


@router.get("/", response_model=List[ProductRead])
async def list_products(
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    """All products with their category, by name"""
    key = (SCOPE_PRODUCTS, "all")
    cached = query_cache.get(key)
    if cached is not None:
        return cached

    products = [ProductRead.model_validate(p) for p in await product.get_products(db)]
    query_cache.set(key, products)
    return products


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.view))
):
    prod = await product.get_product(db, product_id)
    if not prod:
        raise HTTPException(status_code=404, detail="Product not found")
    return prod


@router.post("/", response_model=ProductRead)
async def create_product(
    payload: ProductCreate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_catalog))
):
    created = await product.create_product(db, payload)
    query_cache.invalidate(SCOPE_PRODUCTS)
    return created


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: str,
    updates: ProductUpdate,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.edit_catalog))
):
    """Update a product; a new price only affects ingredients added afterwards"""
    prod = await product.update_product(db, product_id, updates)
    if not prod:
        raise HTTPException(status_code=404, detail="Product not found")
    query_cache.invalidate(SCOPE_PRODUCTS, SCOPE_MENUS)
    return prod


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.delete_catalog))
):
    prod = await product.delete_product(db, product_id)
    if not prod:
        raise HTTPException(status_code=404, detail="Product not found")
    query_cache.invalidate(SCOPE_PRODUCTS)
    return {"message": "Product deleted"}
