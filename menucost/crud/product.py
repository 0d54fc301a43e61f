from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from sqlalchemy import func
from menucost.models import Product
from menucost.schemas import ProductCreate, ProductUpdate
import uuid
from datetime import datetime


async def create_product(db: AsyncSession, product: ProductCreate):
    """Create a new product"""
    new_product = Product(
        id=str(uuid.uuid4()),
        name=product.name,
        category_id=product.category_id,
        unit=product.unit,
        price=product.price,
        price_updated_at=datetime.utcnow()
    )
    db.add(new_product)
    await db.commit()
    return await get_product(db, new_product.id)


async def get_products(db: AsyncSession):
    """Get all products with their category, by name"""
    result = await db.execute(
        select(Product)
        .options(selectinload(Product.category))
        .order_by(Product.name)
    )
    return result.scalars().all()


async def count_products(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(Product.id)))
    return result.scalar_one()


async def get_product(db: AsyncSession, product_id: str):
    result = await db.execute(
        select(Product)
        .where(Product.id == product_id)
        .options(selectinload(Product.category))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def update_product(db: AsyncSession, product_id: str, updates: ProductUpdate):
    """
    Update a product. A price change stamps price_updated_at; menus already
    using the product keep their frozen ingredient costs.
    """
    product = await get_product(db, product_id)
    if not product:
        return None

    update_data = updates.model_dump(exclude_unset=True)
    if "price" in update_data:
        if update_data["price"] is None:
            del update_data["price"]
        else:
            product.price_updated_at = datetime.utcnow()

    for key, value in update_data.items():
        setattr(product, key, value)

    await db.commit()
    return await get_product(db, product_id)


async def delete_product(db: AsyncSession, product_id: str):
    product = await get_product(db, product_id)
    if product:
        await db.delete(product)
        await db.commit()
    return product
