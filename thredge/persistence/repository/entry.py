"""PostgreSQL implementation of Entry repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from thredge.domain.model import Entry
from thredge.domain.repository import EntryRepository
from thredge.domain.value import EntryId, ThreadId
from thredge.persistence.mappers import entry_to_dict, row_to_entry
from thredge.persistence.tables import entries_table


class PostgresEntryRepository(EntryRepository):
    """PostgreSQL implementation of EntryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, entry_id: EntryId, include_hidden: bool = False
    ) -> Optional[Entry]:
        """Find an entry by ID."""
        stmt = select(entries_table).where(entries_table.c.id == entry_id)
        if not include_hidden:
            stmt = stmt.where(entries_table.c.is_hidden.is_(False))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_entry(row._asdict()) if row else None

    async def find_by_thread(
        self, thread_id: ThreadId, include_hidden: bool = False
    ) -> List[Entry]:
        """Find all entries of a thread."""
        stmt = select(entries_table).where(entries_table.c.thread_id == thread_id)
        if not include_hidden:
            stmt = stmt.where(entries_table.c.is_hidden.is_(False))
        stmt = stmt.order_by(entries_table.c.order_index, entries_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_entry(row._asdict()) for row in result.fetchall()]

    async def find_hidden(self, limit: int = 30, offset: int = 0) -> List[Entry]:
        """List hidden entries of every thread, oldest first."""
        stmt = (
            select(entries_table)
            .where(entries_table.c.is_hidden.is_(True))
            .order_by(entries_table.c.created_at, entries_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_entry(row._asdict()) for row in result.fetchall()]

    async def count_hidden(self) -> int:
        stmt = (
            select(func.count())
            .select_from(entries_table)
            .where(entries_table.c.is_hidden.is_(True))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def max_order_index(
        self, thread_id: ThreadId, parent_entry_id: Optional[EntryId]
    ) -> Optional[int]:
        """Highest order_index among siblings, hidden ones included."""
        stmt = select(func.max(entries_table.c.order_index)).where(
            entries_table.c.thread_id == thread_id
        )
        if parent_entry_id is None:
            stmt = stmt.where(entries_table.c.parent_entry_id.is_(None))
        else:
            stmt = stmt.where(entries_table.c.parent_entry_id == parent_entry_id)
        result = await self.session.execute(stmt)
        return result.scalar()

    async def _write(self, entry: Entry) -> None:
        exists = await self.session.execute(
            select(entries_table.c.id).where(entries_table.c.id == entry.id)
        )
        values = entry_to_dict(entry)
        if exists.first():
            stmt = (
                entries_table.update()
                .where(entries_table.c.id == entry.id)
                .values(**values)
            )
        else:
            stmt = entries_table.insert().values(**values)
        await self.session.execute(stmt)

    async def save(self, entry: Entry) -> Entry:
        """Save an entry (create or update)."""
        await self._write(entry)
        await self.session.flush()
        return entry

    async def save_all(self, entries: Sequence[Entry]) -> List[Entry]:
        """Save several entries, flushing once."""
        for entry in entries:
            await self._write(entry)
        await self.session.flush()
        return list(entries)
