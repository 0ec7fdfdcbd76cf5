"""PostgreSQL repository implementations."""

from thredge.persistence.repository.entry import PostgresEntryRepository
from thredge.persistence.repository.thread import PostgresThreadRepository

__all__ = [
    "PostgresThreadRepository",
    "PostgresEntryRepository",
]
