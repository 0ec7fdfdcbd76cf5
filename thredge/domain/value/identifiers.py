"""Strongly typed identifiers for Thredge domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

ThreadId = NewType("ThreadId", UUID)
EntryId = NewType("EntryId", UUID)
