from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from menucost.models import Category
from menucost.schemas import CategoryCreate, CategoryUpdate
import uuid


async def create_category(db: AsyncSession, category: CategoryCreate):
    """Create a new product category"""
    new_category = Category(
        id=str(uuid.uuid4()),
        name=category.name,
        description=category.description
    )
    db.add(new_category)
    await db.commit()
    await db.refresh(new_category)
    return new_category


async def get_categories(db: AsyncSession):
    result = await db.execute(select(Category).order_by(Category.name))
    return result.scalars().all()


async def get_category(db: AsyncSession, category_id: str):
    result = await db.execute(select(Category).where(Category.id == category_id))
    return result.scalar_one_or_none()


async def update_category(db: AsyncSession, category_id: str, updates: CategoryUpdate):
    category = await get_category(db, category_id)
    if not category:
        return None

    for key, value in updates.model_dump(exclude_unset=True).items():
        setattr(category, key, value)

    await db.commit()
    await db.refresh(category)
    return category


async def delete_category(db: AsyncSession, category_id: str):
    """Delete a category; its products become uncategorized"""
    category = await get_category(db, category_id)
    if category:
        await db.delete(category)
        await db.commit()
    return category
