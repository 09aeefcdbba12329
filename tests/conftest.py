import asyncio
import os
from decimal import Decimal

# Keep the module-level engine off the production database during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from order_placement.database import Base, build_engine, get_db
from order_placement.main import app
from order_placement.models import Customer, Item


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def engine(tmp_path):
    # NullPool: every asyncio.run / TestClient loop opens its own connection
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}", poolclass=NullPool)

    async def setup():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with AsyncSession(engine) as session:
            session.add_all([
                Customer(id="C001", name="Tharindu"),
                Customer(id="C002", name="Kasun"),
                Item(code="I001", description="Pen", qty=10, unit_price=Decimal("100.00")),
                Item(code="I002", description="Book", qty=5, unit_price=Decimal("50.00")),
                Item(code="I003", description="Ruler", qty=20, unit_price=Decimal("12.50")),
                Item(code="I004", description="Eraser", qty=100, unit_price=Decimal("19.99")),
                Item(code="I005", description="Clip", qty=50, unit_price=Decimal("0.10")),
            ])
            await session.commit()

    run(setup())
    yield engine
    run(engine.dispose())


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db(engine):
    """Small synchronous helpers for asserting on table contents"""

    class Helper:
        def item_qty(self, code):
            async def query():
                async with AsyncSession(engine) as session:
                    result = await session.execute(select(Item.qty).where(Item.code == code))
                    return result.scalar_one()
            return run(query())

        def count(self, model):
            async def query():
                async with AsyncSession(engine) as session:
                    result = await session.execute(select(func.count()).select_from(model))
                    return result.scalar_one()
            return run(query())

        def rows(self, model):
            async def query():
                async with AsyncSession(engine) as session:
                    result = await session.execute(select(model))
                    return result.scalars().all()
            return run(query())

        def execute(self, statement):
            async def apply():
                async with engine.begin() as conn:
                    await conn.execute(text(statement))
            run(apply())

    return Helper()
