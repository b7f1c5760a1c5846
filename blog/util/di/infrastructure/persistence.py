"""Persistence providers: connection pool, sessions and repositories."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from blog.config import Settings
from blog.domain.repository import PostRepository, TagRepository
from blog.persistence.database import (
    create_engine,
    create_session_factory,
    get_session,
    warm_pool,
)
from blog.persistence.repository import PostgresPostRepository, PostgresTagRepository
from blog.util.di.base import ProviderBase
from blog.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable persistence component (PostgreSQL or in-memory)."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories over a pooled asyncpg engine."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine (the connection pool).

        The pool is warmed on creation and disposed when the app container closes.
        """
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        await warm_pool(
            engine,
            min(settings.database.warm_connections, settings.database.pool_size),
        )
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Sessions are bound to the shared engine."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open one session per request.

        All queries are reads, so nothing is committed. The session's
        connection returns to the pool when the request scope closes.
        """
        async with get_session(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Post reads run on the request session."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Tag reads share the request session with post reads."""
        return PostgresTagRepository(session)
