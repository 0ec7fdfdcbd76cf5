"""Entry entity.

Entries are the nodes of a thread's reply tree. The tree is stored as
parent pointers plus a sibling ordering key; depth is never stored and is
always derived from the parent chain.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from thredge.domain.model.common import DomainModel
from thredge.domain.value import EntryId, ThreadId


class Entry(DomainModel):
    """Entry entity.

    Represents a post in a thread or a reply to another entry.

    Threading is managed through:
    - parent_entry_id: Direct parent entry (None for a root entry)
    - order_index: Position among siblings (ties broken by created_at)

    Entries are never physically deleted; hidden marks a tombstone.
    """

    id: EntryId
    thread_id: ThreadId
    body: str = Field(min_length=1, max_length=20000)
    parent_entry_id: Optional[EntryId] = None
    order_index: int = 0
    hidden: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
