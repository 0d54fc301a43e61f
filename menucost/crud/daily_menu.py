from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from menucost.models import DailyMenu, MenuIngredient, MenuKit, MenuType, Product
from menucost.schemas import DailyMenuCreate, DailyMenuUpdate
from menucost.core.errors import ConflictError, NotFoundError
from menucost.config import settings
from menucost.crud import menu_type as menu_type_crud
from menucost.crud import kit as kit_crud
from menucost.services import costing
from menucost.services.month_calendar import month_bounds, year_bounds
from datetime import date
import uuid
import logging

log = logging.getLogger(__name__)


def menu_query():
    """Daily menus with ingredients -> product -> category, kits -> kit and type"""
    return select(DailyMenu).options(
        selectinload(DailyMenu.ingredients).selectinload(MenuIngredient.product).selectinload(Product.category),
        selectinload(DailyMenu.kits).selectinload(MenuKit.kit),
        selectinload(DailyMenu.menu_type),
    )


async def get_menus_between(db: AsyncSession, start: date, end: date, menu_type_id: str = None):
    """Menus with start <= menu_date < end, optionally for one menu type"""
    query = menu_query().where(DailyMenu.menu_date >= start, DailyMenu.menu_date < end)

    if menu_type_id:
        query = query.where(DailyMenu.menu_type_id == menu_type_id)

    result = await db.execute(query.order_by(DailyMenu.menu_date, DailyMenu.created_at))
    return result.scalars().all()


async def get_month_menus(db: AsyncSession, year: int, month: int, menu_type_id: str = None):
    start, end = month_bounds(year, month)
    return await get_menus_between(db, start, end, menu_type_id)


async def get_year_menus(db: AsyncSession, year: int, menu_type_id: str = None):
    start, end = year_bounds(year)
    return await get_menus_between(db, start, end, menu_type_id)


async def get_menu(db: AsyncSession, menu_id: str):
    """Get a menu with all line items freshly loaded"""
    result = await db.execute(
        menu_query()
        .where(DailyMenu.id == menu_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def find_menu_at(db: AsyncSession, menu_date: date, menu_type_id: str = None):
    """The menu planned on a date for a type (menus without type are their own scope)"""
    query = select(DailyMenu).where(DailyMenu.menu_date == menu_date)

    if menu_type_id is None:
        query = query.where(DailyMenu.menu_type_id.is_(None))
    else:
        query = query.where(DailyMenu.menu_type_id == menu_type_id)

    result = await db.execute(query.limit(1))
    return result.scalars().first()


async def describe_slot(db: AsyncSession, menu_date: date, menu_type_id: str = None) -> str:
    """Human readable "date / type" used in conflict messages"""
    if menu_type_id is None:
        return f"{menu_date.isoformat()} (no type)"
    menu_type = await db.get(MenuType, menu_type_id)
    name = menu_type.name if menu_type else menu_type_id
    return f"{menu_date.isoformat()} ({name})"


async def ensure_slot_free(db: AsyncSession, menu_date: date, menu_type_id: str = None):
    if await find_menu_at(db, menu_date, menu_type_id):
        slot = await describe_slot(db, menu_date, menu_type_id)
        raise ConflictError(f"A menu already exists on {slot}")


async def recompute_total(db: AsyncSession, menu: DailyMenu):
    """
    Set menu.total_cost from its persisted line items. Runs inside the caller's
    transaction so the line-item write and the new total commit together.
    """
    ingredient_costs = await db.execute(
        select(MenuIngredient.cost).where(MenuIngredient.menu_id == menu.id)
    )
    kit_costs = await db.execute(
        select(MenuKit.cost).where(MenuKit.menu_id == menu.id)
    )
    menu.total_cost = costing.compute_total(
        ingredient_costs.scalars().all(),
        kit_costs.scalars().all()
    )
    await db.flush()
    return menu.total_cost


async def create_menu(db: AsyncSession, menu: DailyMenuCreate, created_by: str = None):
    """
    Create the menu of a calendar day. Without a type it lands on the default
    menu type; default kits are linked at their current price.
    """
    menu_type_id = menu.menu_type_id
    if menu_type_id is None:
        default_type = await menu_type_crud.get_default_menu_type(db)
        menu_type_id = default_type.id if default_type else None
    elif not await menu_type_crud.get_menu_type(db, menu_type_id):
        raise NotFoundError("Menu type not found")

    await ensure_slot_free(db, menu.menu_date, menu_type_id)

    new_menu = DailyMenu(
        id=str(uuid.uuid4()),
        menu_date=menu.menu_date,
        menu_type_id=menu_type_id,
        description=menu.description,
        total_cost=costing.ZERO,
        created_by=created_by
    )
    db.add(new_menu)

    try:
        await db.flush()
        if settings.apply_default_kits and menu.apply_default_kits:
            for kit in await kit_crud.get_kits(db, default_only=True):
                db.add(MenuKit(
                    id=str(uuid.uuid4()),
                    menu_id=new_menu.id,
                    kit_id=kit.id,
                    cost=costing.kit_cost(kit.price)
                ))
        await recompute_total(db, new_menu)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        slot = await describe_slot(db, menu.menu_date, menu_type_id)
        raise ConflictError(f"A menu already exists on {slot}")
    except SQLAlchemyError:
        await db.rollback()
        raise

    log.info("menu created: id=%s date=%s type=%s total=%s",
             new_menu.id, new_menu.menu_date, menu_type_id, new_menu.total_cost)
    return await get_menu(db, new_menu.id)


async def update_menu(db: AsyncSession, menu_id: str, updates: DailyMenuUpdate):
    """Update the free-text part of a menu; total_cost only follows line items"""
    menu = await get_menu(db, menu_id)
    if not menu:
        return None

    update_data = updates.model_dump(exclude_unset=True)
    if "description" in update_data:
        menu.description = update_data["description"]

    await db.commit()
    return await get_menu(db, menu_id)


async def delete_menu(db: AsyncSession, menu_id: str):
    """Delete a menu and all its line items"""
    menu = await get_menu(db, menu_id)
    if menu:
        await db.delete(menu)
        await db.commit()
        log.info("menu deleted: id=%s date=%s", menu.id, menu.menu_date)
    return menu
