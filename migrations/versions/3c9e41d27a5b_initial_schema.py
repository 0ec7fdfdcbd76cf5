"""initial_schema

Create the schema for Thredge:
- Threads (soft-hidden, pinnable, ordered by last activity)
- Entries (reply tree stored as parent pointer plus sibling order index)

Revision ID: 3c9e41d27a5b
Revises:
Create Date: 2025-11-02 10:14:52.418305

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9e41d27a5b"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # THREADS table
    # ========================================================================
    op.create_table(
        "threads",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("is_hidden", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_pinned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "last_activity_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_threads_hidden_activity", "threads", ["is_hidden", "last_activity_at"]
    )

    # ========================================================================
    # ENTRIES table
    # ========================================================================
    # No foreign key on parent_entry_id: replies of a hidden entry stay put
    # and are rendered as top-level entries.
    op.create_table(
        "entries",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("thread_id", sa.UUID(), nullable=False),
        sa.Column("parent_entry_id", sa.UUID(), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("is_hidden", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_entries_thread_created", "entries", ["thread_id", "created_at"])
    op.create_index(
        "idx_entries_thread_hidden_created",
        "entries",
        ["thread_id", "is_hidden", "created_at"],
    )
    op.create_index("idx_entries_parent_entry_id", "entries", ["parent_entry_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_entries_parent_entry_id", table_name="entries")
    op.drop_index("idx_entries_thread_hidden_created", table_name="entries")
    op.drop_index("idx_entries_thread_created", table_name="entries")
    op.drop_table("entries")

    op.drop_index("idx_threads_hidden_activity", table_name="threads")
    op.drop_table("threads")

    # Extension is left in place, other schemas may share it
