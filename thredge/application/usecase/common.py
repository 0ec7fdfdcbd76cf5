"""Response items shared by thread and entry use cases."""

from datetime import datetime

from pydantic import BaseModel

from thredge.domain.model import Entry, Thread


class ThreadItem(BaseModel):
    """Thread as returned to clients."""

    thread_id: str
    title: str
    body: str | None
    hidden: bool
    pinned: bool
    created_at: datetime
    updated_at: datetime
    last_activity_at: datetime

    @classmethod
    def from_thread(cls, thread: Thread) -> "ThreadItem":
        return cls(
            thread_id=str(thread.id),
            title=thread.title,
            body=thread.body,
            hidden=thread.hidden,
            pinned=thread.pinned,
            created_at=thread.created_at,
            updated_at=thread.updated_at,
            last_activity_at=thread.last_activity_at,
        )


class EntryItem(BaseModel):
    """Entry as returned to clients.

    depth is only set where the whole tree was loaded (thread detail).
    """

    entry_id: str
    thread_id: str
    parent_entry_id: str | None
    order_index: int
    body: str
    hidden: bool
    depth: int | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entry(cls, entry: Entry, depth: int | None = None) -> "EntryItem":
        return cls(
            entry_id=str(entry.id),
            thread_id=str(entry.thread_id),
            parent_entry_id=str(entry.parent_entry_id) if entry.parent_entry_id else None,
            order_index=entry.order_index,
            body=entry.body,
            hidden=entry.hidden,
            depth=depth,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )
