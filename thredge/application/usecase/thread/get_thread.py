"""Get thread use case."""

from uuid import UUID

from pydantic import BaseModel

from thredge.application.usecase.common import EntryItem, ThreadItem
from thredge.domain.service import ThreadService
from thredge.domain.value import ThreadId


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str  # UUID string
    include_hidden: bool = False


class GetThreadResponse(BaseModel):
    """Thread with its visible entries in render order."""

    thread: ThreadItem
    entries: list[EntryItem]


class GetThreadUseCase:
    """Use case for loading a thread and its reply tree."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Load a thread with entries linearized and annotated with depth.

        Raises:
            NotFoundError: If the thread does not exist or is hidden
            ValueError: If the thread ID is not a UUID
        """
        thread_id = ThreadId(UUID(request.thread_id))
        tree = await self.thread_service.get_thread(thread_id, request.include_hidden)
        return GetThreadResponse(
            thread=ThreadItem.from_thread(tree.thread),
            entries=[
                EntryItem.from_entry(entry, depth=tree.depths.get(entry.id, 1))
                for entry in tree.entries
            ],
        )
