"""Domain services."""

from .base import Service
from .entry_service import EntryService
from .thread_service import ThreadService, ThreadTree

__all__ = [
    "EntryService",
    "Service",
    "ThreadService",
    "ThreadTree",
]
