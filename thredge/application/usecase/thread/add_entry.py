"""Add entry use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from thredge.application.usecase.common import EntryItem
from thredge.domain.service import ThreadService
from thredge.domain.value import EntryId, ThreadId


class AddEntryRequest(BaseModel):
    """Add entry request."""

    thread_id: str  # UUID string
    body: str = Field(min_length=1, max_length=20000)
    parent_entry_id: str | None = None  # None for a top-level entry


class AddEntryResponse(BaseModel):
    """Add entry response."""

    entry: EntryItem


class AddEntryUseCase:
    """Use case for posting an entry or a reply into a thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize add entry use case.

        Args:
            thread_service: Thread service
        """
        self.thread_service = thread_service

    async def execute(self, request: AddEntryRequest) -> AddEntryResponse:
        """Append the entry last among its siblings.

        Raises:
            NotFoundError: If the thread does not exist or is hidden
            ValidationError: If the parent is not an entry of this thread
            DepthLimitExceededError: If the parent is already at max depth
            CycleDetectedError: If the parent's reply chain is corrupted
            ValueError: If an ID is not a UUID
        """
        parent_entry_id = (
            EntryId(UUID(request.parent_entry_id)) if request.parent_entry_id else None
        )
        entry = await self.thread_service.add_entry(
            ThreadId(UUID(request.thread_id)),
            request.body,
            parent_entry_id=parent_entry_id,
        )
        return AddEntryResponse(entry=EntryItem.from_entry(entry))
