"""Database connection and session management.

Provides the async engine (connection pool), session factory, and pool
warm-up for PostgreSQL.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL and pool limits

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        hide_parameters=True,  # Bound values (search patterns) stay out of logs
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        pool_timeout=settings.database.pool_timeout,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@asynccontextmanager
async def get_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session with automatic cleanup.

    The session's connection goes back to the pool on every exit path,
    including errors and cancellation.

    Args:
        session_factory: Factory for creating sessions

    Yields:
        Database session
    """
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def warm_pool(engine: AsyncEngine, count: int) -> int:
    """Open connections up front so the first requests skip the connect cost.

    Failures are logged and do not stop startup.

    Args:
        engine: Database engine
        count: Number of connections to open concurrently

    Returns:
        Number of connections that were opened successfully
    """
    if count <= 0:
        return 0

    async def _open_one() -> bool:
        try:
            async with engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logfire.warn("Failed to warm connection", error=str(e))
            return False

    with logfire.span("database.warm_pool", count=count):
        results = await asyncio.gather(*(_open_one() for _ in range(count)))
        ready = sum(results)
        logfire.info("Pool warmed", ready=ready, requested=count)
        return ready
