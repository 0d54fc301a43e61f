"""
Shared fixtures: an in-memory SQLite database, an HTTP client over the app,
and helpers to seed catalog rows and sign users in.

DATABASE_URL must be set before ``menucost.db`` is imported.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import uuid
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import menucost.models  # noqa: F401  registers every table
from menucost.models import Base, Category, Product, Kit, MenuType, DailyMenu, Profile, UserRole
from menucost.auth.dependencies import get_current_user
from menucost.core.cache import query_cache
from menucost.crud import user as user_crud
from menucost.db import get_db
from menucost.main import app


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture(autouse=True)
def _clear_cache():
    query_cache.clear()
    yield
    query_cache.clear()


@pytest_asyncio.fixture
async def client(session_factory):
    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def login(db):
    """``await login("pcp")`` signs a new profile in with that role (None: no role)."""
    async def _login(role=None):
        user_id = str(uuid.uuid4())
        db.add(Profile(id=user_id, full_name=f"{role or 'guest'} user", email=f"{user_id}@school.test"))
        if role:
            db.add(UserRole(id=str(uuid.uuid4()), user_id=user_id, role=role))
        await db.commit()
        profile = await user_crud.get_profile(db, user_id)
        app.dependency_overrides[get_current_user] = lambda: profile
        return profile
    return _login


# ---------- Seed helpers ----------

@pytest.fixture
def make_product(db):
    async def _make(name="Rice", price="5.00", category=None, unit="kg"):
        product = Product(
            id=str(uuid.uuid4()),
            name=name,
            unit=unit,
            price=Decimal(price),
            category_id=category.id if category else None,
        )
        db.add(product)
        await db.commit()
        return product
    return _make


@pytest.fixture
def make_category(db):
    async def _make(name="Grains"):
        category = Category(id=str(uuid.uuid4()), name=name)
        db.add(category)
        await db.commit()
        return category
    return _make


@pytest.fixture
def make_kit(db):
    async def _make(name="Bread", price="0.50", is_default=False):
        kit = Kit(id=str(uuid.uuid4()), name=name, price=Decimal(price), is_default=is_default)
        db.add(kit)
        await db.commit()
        return kit
    return _make


@pytest.fixture
def make_menu_type(db):
    async def _make(name="Elementary"):
        menu_type = MenuType(id=str(uuid.uuid4()), name=name)
        db.add(menu_type)
        await db.commit()
        return menu_type
    return _make


@pytest.fixture
def make_menu(db):
    """Bare menu row; line items go through the crud layer."""
    async def _make(menu_date=date(2026, 3, 2), menu_type=None, description=None, total_cost="0"):
        menu = DailyMenu(
            id=str(uuid.uuid4()),
            menu_date=menu_date,
            menu_type_id=menu_type.id if menu_type else None,
            description=description,
            total_cost=Decimal(total_cost),
        )
        db.add(menu)
        await db.commit()
        return menu
    return _make
