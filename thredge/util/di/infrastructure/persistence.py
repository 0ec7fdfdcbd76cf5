"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from thredge.config import Settings
from thredge.domain.repository import EntryRepository, ThreadRepository
from thredge.persistence.database import create_engine, create_session_factory
from thredge.persistence.repository import (
    PostgresEntryRepository,
    PostgresThreadRepository,
)
from thredge.util.di.base import ProviderBase
from thredge.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Commits at the end of the request if no exception occurred, rolls
        back otherwise. A rejected move therefore leaves nothing behind.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, session: AsyncSession) -> ThreadRepository:
        """Provide Thread repository."""
        return PostgresThreadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_entry_repository(self, session: AsyncSession) -> EntryRepository:
        """Provide Entry repository."""
        return PostgresEntryRepository(session)
