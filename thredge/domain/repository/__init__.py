"""Repository interfaces for the Thredge domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from thredge.domain.repository.entry import EntryRepository
from thredge.domain.repository.thread import ThreadRepository

__all__ = [
    "ThreadRepository",
    "EntryRepository",
]
