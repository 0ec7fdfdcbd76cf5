"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through an ORM. Column names differ from field names for the
boolean flags (is_hidden, is_pinned).
"""

from typing import Any, Dict
from uuid import UUID

from thredge.domain.model import Entry, Thread
from thredge.domain.value import EntryId, ThreadId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        title=row["title"],
        body=row.get("body"),
        hidden=row["is_hidden"],
        pinned=row["is_pinned"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_activity_at=row["last_activity_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to a dict of column values."""
    return {
        "id": thread.id,
        "title": thread.title,
        "body": thread.body,
        "is_hidden": thread.hidden,
        "is_pinned": thread.pinned,
        "created_at": thread.created_at,
        "updated_at": thread.updated_at,
        "last_activity_at": thread.last_activity_at,
    }


def row_to_entry(row: Dict[str, Any]) -> Entry:
    """Convert database row to Entry domain model.

    Args:
        row: Database row as dict

    Returns:
        Entry domain model
    """
    parent_entry_id = row.get("parent_entry_id")
    return Entry(
        id=EntryId(_uuid(row["id"])),
        thread_id=ThreadId(_uuid(row["thread_id"])),
        parent_entry_id=EntryId(_uuid(parent_entry_id)) if parent_entry_id else None,
        order_index=row["order_index"],
        body=row["body"],
        hidden=row["is_hidden"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def entry_to_dict(entry: Entry) -> Dict[str, Any]:
    """Convert Entry domain model to a dict of column values."""
    return {
        "id": entry.id,
        "thread_id": entry.thread_id,
        "parent_entry_id": entry.parent_entry_id,
        "order_index": entry.order_index,
        "body": entry.body,
        "is_hidden": entry.hidden,
        "created_at": entry.created_at,
        "updated_at": entry.updated_at,
    }
