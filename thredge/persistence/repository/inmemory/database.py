"""Shared storage for the in-memory repositories."""

from thredge.domain.model import Entry, Thread
from thredge.domain.value import EntryId, ThreadId


class InMemoryDatabase:
    """Tables for in-memory repositories.

    One instance is shared by every repository built for the same
    container, so data written in one request is visible in the next.
    """

    def __init__(self) -> None:
        self.threads: dict[ThreadId, Thread] = {}
        self.entries: dict[EntryId, Entry] = {}
