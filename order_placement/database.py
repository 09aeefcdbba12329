from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings


def build_engine(database_url: str, **overrides: Any) -> AsyncEngine:
    """Creates the async engine with the pool options from settings"""
    options: Dict[str, Any] = {"echo": settings.debug, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    if settings.db_isolation_level:
        options["isolation_level"] = settings.db_isolation_level
    options.update(overrides)
    return create_async_engine(database_url, **options)


engine = build_engine(settings.database_url)

AsyncSessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Base class for the ORM models
Base = declarative_base()


async def get_db():
    """Dependency yielding one database session per request"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def check_connection(session: AsyncSession) -> bool:
    """Runs a trivial query to confirm the database is reachable"""
    result = await session.execute(text("SELECT 1"))
    return result.scalar() == 1
