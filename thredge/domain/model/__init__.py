"""Domain model entities for Thredge."""

from thredge.domain.model.entry import Entry
from thredge.domain.model.thread import Thread, derive_title

__all__ = [
    "Thread",
    "Entry",
    "derive_title",
]
