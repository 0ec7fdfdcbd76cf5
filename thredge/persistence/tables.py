"""SQLAlchemy table definitions for Thredge.

These tables match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String(200), nullable=False),
    Column("body", Text, nullable=True),
    Column("is_hidden", Boolean, nullable=False, server_default="false"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "last_activity_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

Index("idx_threads_hidden_activity", threads_table.c.is_hidden, threads_table.c.last_activity_at)

# ============================================================================
# ENTRIES TABLE
# ============================================================================
# parent_entry_id has no foreign key: a reply may outlive the visibility of
# its parent, and the tree engine treats unknown parents as roots.
entries_table = Table(
    "entries",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False
    ),
    Column("parent_entry_id", UUID, nullable=True),
    Column("order_index", Integer, nullable=False, server_default="0"),
    Column("body", Text, nullable=False),
    Column("is_hidden", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_entries_thread_created", entries_table.c.thread_id, entries_table.c.created_at)
Index(
    "idx_entries_thread_hidden_created",
    entries_table.c.thread_id,
    entries_table.c.is_hidden,
    entries_table.c.created_at,
)
Index("idx_entries_parent_entry_id", entries_table.c.parent_entry_id)
