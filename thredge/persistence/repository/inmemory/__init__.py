"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .entry import InMemoryEntryRepository
from .thread import InMemoryThreadRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryEntryRepository",
    "InMemoryThreadRepository",
]
