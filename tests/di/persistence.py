"""Mock persistence providers for testing."""

from dishka import Scope, provide

from thredge.domain.repository import EntryRepository, ThreadRepository
from thredge.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryEntryRepository,
    InMemoryThreadRepository,
)
from thredge.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The storage is APP-scoped, so it lives as long as the container: every
    request made through one test client sees the same data, while each
    test builds its own container and starts empty.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory tables."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, database: InMemoryDatabase) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_entry_repository(self, database: InMemoryDatabase) -> EntryRepository:
        """Provide in-memory entry repository."""
        return InMemoryEntryRepository(database)
