# scripts/seed_catalog.py
"""
Seed the catalog with food groups, the standard kits and a default menu type.

Safe to run repeatedly: rows are matched by name and never duplicated.

    python -m scripts.seed_catalog
    python -m scripts.seed_catalog --menu-type "Elementary"
"""
import asyncio
import argparse
from decimal import Decimal
from sqlalchemy.future import select
from menucost.db import async_session
from menucost.models import Category, Kit, MenuType
import uuid

CATEGORIES = [
    {"name": "Grains", "description": "Rice, pasta, bread, cereals"},
    {"name": "Proteins", "description": "Meat, poultry, fish, eggs, legumes"},
    {"name": "Vegetables", "description": None},
    {"name": "Fruits", "description": None},
    {"name": "Dairy", "description": "Milk, yogurt, cheese"},
    {"name": "Seasonings", "description": "Oil, salt, spices"},
]

KITS = [
    {"name": "Bread", "price": Decimal("0.3500"), "is_default": True},
    {"name": "Milk", "price": Decimal("0.6000"), "is_default": True},
    {"name": "Disposables", "price": Decimal("0.1200"), "is_default": False},
]


async def seed_catalog(menu_type_name: str):
    async with async_session() as session:
        for data in CATEGORIES:
            result = await session.execute(select(Category).where(Category.name == data["name"]))
            if result.scalar_one_or_none():
                print(f"⚠️  Category '{data['name']}' already exists. Skipping.")
                continue
            session.add(Category(id=str(uuid.uuid4()), **data))
            print(f"✅ Category: {data['name']}")

        for data in KITS:
            result = await session.execute(select(Kit).where(Kit.name == data["name"]))
            if result.scalar_one_or_none():
                print(f"⚠️  Kit '{data['name']}' already exists. Skipping.")
                continue
            session.add(Kit(id=str(uuid.uuid4()), **data))
            print(f"✅ Kit: {data['name']} ({data['price']}, default={data['is_default']})")

        result = await session.execute(select(MenuType).limit(1))
        if result.scalars().first():
            print("🍽️  A menu type already exists. Default type left as is.")
        else:
            session.add(MenuType(id=str(uuid.uuid4()), name=menu_type_name))
            print(f"🍽️  Default menu type: {menu_type_name}")

        await session.commit()
        print("✅ Done seeding catalog.\n")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed menu cost catalog")
    parser.add_argument("--menu-type", type=str, default="Standard",
                        help="Name of the default menu type to create when none exists")
    args = parser.parse_args()

    asyncio.run(seed_catalog(args.menu_type))
