"""
Engine, session factory and the declarative ``Base`` shared by all models.

``get_session`` is the FastAPI dependency; seeds and tests build their own
sessions from ``async_session_maker`` or from an engine made with
``make_engine``.
"""
from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from airline.config import settings


class Base(DeclarativeBase):
    pass


def make_engine(url: str | None = None, **kwargs) -> AsyncEngine:
    # echo only in development, SQL lines are too noisy elsewhere
    return create_async_engine(
        url or settings.database_url,
        echo=(settings.app_env == "development"),
        **kwargs,
    )


async def create_tables(bind: AsyncEngine) -> None:
    """Create every table registered on ``Base`` (no-op for existing ones)."""
    import airline.models  # noqa: F401  registers every model with Base

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


engine = make_engine()

async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


async def get_session() -> AsyncIterator[AsyncSession]:
    async with async_session_maker() as session:
        yield session
