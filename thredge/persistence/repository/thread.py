"""PostgreSQL implementation of Thread repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from thredge.domain.model import Thread
from thredge.domain.repository import ThreadRepository
from thredge.domain.value import ThreadId
from thredge.persistence.mappers import row_to_thread, thread_to_dict
from thredge.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, thread_id: ThreadId, include_hidden: bool = False
    ) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        if not include_hidden:
            stmt = stmt.where(threads_table.c.is_hidden.is_(False))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_all(
        self,
        include_hidden: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Thread]:
        """List threads, pinned first, then most recently active."""
        stmt = select(threads_table)
        if not include_hidden:
            stmt = stmt.where(threads_table.c.is_hidden.is_(False))
        stmt = (
            stmt.order_by(
                desc(threads_table.c.is_pinned),
                desc(threads_table.c.last_activity_at),
                desc(threads_table.c.created_at),
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_thread(row._asdict()) for row in result.fetchall()]

    async def count(self, include_hidden: bool = False) -> int:
        stmt = select(func.count()).select_from(threads_table)
        if not include_hidden:
            stmt = stmt.where(threads_table.c.is_hidden.is_(False))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def lock_for_update(self, thread_id: ThreadId) -> Optional[Thread]:
        """Load a thread with SELECT ... FOR UPDATE."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.id == thread_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        existing = await self.find_by_id(thread.id, include_hidden=True)
        values = thread_to_dict(thread)

        if existing:
            stmt = (
                threads_table.update()
                .where(threads_table.c.id == thread.id)
                .values(**values)
            )
        else:
            stmt = threads_table.insert().values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return thread

    async def touch(self, thread_id: ThreadId, at: datetime) -> None:
        stmt = (
            threads_table.update()
            .where(threads_table.c.id == thread_id)
            .values(last_activity_at=at)
        )
        await self.session.execute(stmt)
        await self.session.flush()
