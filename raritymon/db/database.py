"""
Database engine and session management.

Provides the async SQLAlchemy engine and session factory backing the cache.
Engines are created explicitly and owned by the cache store rather than held
as module globals, so the app lifespan and tests control their lifetime.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from raritymon.models.db import Base


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Usage:
        engine = create_engine("sqlite+aiosqlite:///raritymon.db")
    """
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to an engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """
    Initialize database tables.

    Creates all tables defined in the ORM models if they do not exist.
    Safe to call more than once.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

