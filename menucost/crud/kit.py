from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from menucost.models import Kit
from menucost.schemas import KitCreate, KitUpdate
import uuid


async def create_kit(db: AsyncSession, kit: KitCreate):
    new_kit = Kit(
        id=str(uuid.uuid4()),
        name=kit.name,
        price=kit.price,
        is_default=kit.is_default
    )
    db.add(new_kit)
    await db.commit()
    await db.refresh(new_kit)
    return new_kit


async def get_kits(db: AsyncSession, default_only: bool = False):
    query = select(Kit)

    if default_only:
        query = query.where(Kit.is_default == True)

    result = await db.execute(query.order_by(Kit.name))
    return result.scalars().all()


async def get_kit(db: AsyncSession, kit_id: str):
    result = await db.execute(select(Kit).where(Kit.id == kit_id))
    return result.scalar_one_or_none()


async def update_kit(db: AsyncSession, kit_id: str, updates: KitUpdate):
    """Update a kit. Menus already linked keep the cost frozen at link time."""
    kit = await get_kit(db, kit_id)
    if not kit:
        return None

    for key, value in updates.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(kit, key, value)

    await db.commit()
    await db.refresh(kit)
    return kit


async def delete_kit(db: AsyncSession, kit_id: str):
    kit = await get_kit(db, kit_id)
    if kit:
        await db.delete(kit)
        await db.commit()
    return kit
