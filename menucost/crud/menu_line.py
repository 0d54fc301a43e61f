"""
Menu line items: ingredients and kits.

Every write here recomputes the owning menu's total_cost in the same
transaction and commits once.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError
from menucost.models import DailyMenu, MenuIngredient, MenuKit, Product, Kit
from menucost.schemas import MenuIngredientCreate
from menucost.core.errors import NotFoundError
from menucost.crud.daily_menu import get_menu, recompute_total
from menucost.services import costing
import uuid
import logging

log = logging.getLogger(__name__)


async def _get_menu_or_raise(db: AsyncSession, menu_id: str) -> DailyMenu:
    menu = await db.get(DailyMenu, menu_id)
    if not menu:
        raise NotFoundError("Menu not found")
    return menu


async def _commit_with_total(db: AsyncSession, menu: DailyMenu):
    try:
        await db.flush()
        await recompute_total(db, menu)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        raise


async def add_ingredient(db: AsyncSession, menu_id: str, ingredient: MenuIngredientCreate):
    """Add a product to a menu; cost = per_capita x product price right now"""
    menu = await _get_menu_or_raise(db, menu_id)
    product = await db.get(Product, ingredient.product_id)
    if not product:
        raise NotFoundError("Product not found")

    line = MenuIngredient(
        id=str(uuid.uuid4()),
        menu_id=menu.id,
        product_id=product.id,
        per_capita=ingredient.per_capita,
        cost=costing.ingredient_cost(ingredient.per_capita, product.price)
    )
    db.add(line)
    await _commit_with_total(db, menu)

    log.info("ingredient added: menu=%s product=%s cost=%s total=%s",
             menu.id, product.id, line.cost, menu.total_cost)
    return await get_menu(db, menu.id)


async def remove_ingredient(db: AsyncSession, menu_id: str, ingredient_id: str):
    menu = await _get_menu_or_raise(db, menu_id)
    result = await db.execute(
        select(MenuIngredient).where(
            MenuIngredient.id == ingredient_id,
            MenuIngredient.menu_id == menu_id
        )
    )
    line = result.scalar_one_or_none()
    if not line:
        raise NotFoundError("Ingredient not found on this menu")

    await db.delete(line)
    await _commit_with_total(db, menu)

    log.info("ingredient removed: menu=%s ingredient=%s total=%s",
             menu.id, ingredient_id, menu.total_cost)
    return await get_menu(db, menu.id)


async def get_menu_kit(db: AsyncSession, menu_id: str, kit_id: str):
    result = await db.execute(
        select(MenuKit).where(MenuKit.menu_id == menu_id, MenuKit.kit_id == kit_id)
    )
    return result.scalar_one_or_none()


async def toggle_kit(db: AsyncSession, menu_id: str, kit_id: str):
    """
    Unlink the kit if the menu already has it, otherwise link it at the kit's
    current price. Returns (menu, linked).
    """
    menu = await _get_menu_or_raise(db, menu_id)
    kit = await db.get(Kit, kit_id)
    if not kit:
        raise NotFoundError("Kit not found")

    link = await get_menu_kit(db, menu_id, kit_id)
    if link:
        await db.delete(link)
        linked = False
    else:
        db.add(MenuKit(
            id=str(uuid.uuid4()),
            menu_id=menu.id,
            kit_id=kit.id,
            cost=costing.kit_cost(kit.price)
        ))
        linked = True

    await _commit_with_total(db, menu)

    log.info("kit %s: menu=%s kit=%s total=%s",
             "linked" if linked else "unlinked", menu.id, kit.id, menu.total_cost)
    return await get_menu(db, menu.id), linked
