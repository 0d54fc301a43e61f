from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from menucost.models import MenuType, DailyMenu
from menucost.schemas import MenuTypeCreate, MenuTypeUpdate
from menucost.core.errors import MenuTypeInUseError
import uuid
import logging

log = logging.getLogger(__name__)


async def create_menu_type(db: AsyncSession, menu_type: MenuTypeCreate, created_by: str = None):
    new_type = MenuType(
        id=str(uuid.uuid4()),
        name=menu_type.name,
        description=menu_type.description,
        created_by=created_by
    )
    db.add(new_type)
    await db.commit()
    await db.refresh(new_type)
    return new_type


async def get_menu_types(db: AsyncSession):
    """All menu types, oldest first"""
    result = await db.execute(
        select(MenuType).order_by(MenuType.created_at.asc(), MenuType.name)
    )
    return result.scalars().all()


async def get_menu_type(db: AsyncSession, menu_type_id: str):
    result = await db.execute(select(MenuType).where(MenuType.id == menu_type_id))
    return result.scalar_one_or_none()


async def get_default_menu_type(db: AsyncSession):
    """The default menu type is the earliest one created"""
    result = await db.execute(
        select(MenuType).order_by(MenuType.created_at.asc(), MenuType.name).limit(1)
    )
    return result.scalar_one_or_none()


async def update_menu_type(db: AsyncSession, menu_type_id: str, updates: MenuTypeUpdate):
    menu_type = await get_menu_type(db, menu_type_id)
    if not menu_type:
        return None

    for key, value in updates.model_dump(exclude_unset=True).items():
        setattr(menu_type, key, value)

    await db.commit()
    await db.refresh(menu_type)
    return menu_type


async def has_menus(db: AsyncSession, menu_type_id: str) -> bool:
    result = await db.execute(
        select(DailyMenu.id).where(DailyMenu.menu_type_id == menu_type_id).limit(1)
    )
    return result.first() is not None


async def delete_menu_type(db: AsyncSession, menu_type_id: str):
    """Delete a menu type. Refused while any daily menu still uses it."""
    menu_type = await get_menu_type(db, menu_type_id)
    if not menu_type:
        return None

    if await has_menus(db, menu_type_id):
        raise MenuTypeInUseError(
            f"Menu type '{menu_type.name}' still has menus. Remove its menus before deleting it."
        )

    await db.delete(menu_type)
    await db.commit()
    log.info("menu type deleted: id=%s name=%s", menu_type.id, menu_type.name)
    return menu_type
