"""Database configuration and connection management."""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from .config import Settings


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def normalize_database_url(url: str) -> str:
    """Select the async driver for plain PostgreSQL and SQLite URLs."""
    if not url:
        raise ValueError(
            "Database URL is not set. Please set TELEPROMPTER_DATABASE_URL environment variable."
        )

    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        # asyncpg handles SSL differently
        if "?sslmode=" in url:
            url = url.split("?sslmode=")[0]
    elif url.startswith("sqlite://"):
        url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by the settings."""
    url = normalize_database_url(settings.database_url)
    kwargs = {"echo": settings.log_level.upper() == "DEBUG"}
    if not url.startswith("sqlite"):
        kwargs["pool_size"] = settings.database_pool_size
        kwargs["max_overflow"] = settings.database_max_overflow
    return create_async_engine(url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session maker bound to an engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """Initialize database by creating all tables."""
    # Register the mapped tables on Base.metadata
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
