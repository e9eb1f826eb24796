from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.persistence.models import table_registry

_engine: Optional[AsyncEngine] = None


def build_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    settings = settings or Settings()
    return create_async_engine(settings.DATABASE_URL, pool_pre_ping=True)


def set_engine(engine: AsyncEngine) -> None:
    global _engine
    _engine = engine


def get_engine() -> AsyncEngine:
    """Return the process-wide engine, building it from settings on first use."""
    if _engine is None:
        set_engine(build_engine())
    return _engine


async def get_session() -> AsyncIterator[AsyncSession]:
    async with AsyncSession(get_engine(), expire_on_commit=False) as session:
        yield session


async def create_tables(engine: AsyncEngine) -> None:
    # No migrations: the schema is created straight from the mapped tables.
    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)


async def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
