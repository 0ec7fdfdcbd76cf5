"""Update thread use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from thredge.application.usecase.common import ThreadItem
from thredge.domain.service import ThreadService
from thredge.domain.value import ThreadId


class UpdateThreadRequest(BaseModel):
    """Update thread request.

    Fields left as None are not changed.
    """

    thread_id: str  # UUID string
    body: str | None = Field(default=None, max_length=20000)
    title: str | None = Field(default=None, max_length=200)
    pinned: bool | None = None


class UpdateThreadResponse(BaseModel):
    """Update thread response."""

    thread: ThreadItem


class UpdateThreadUseCase:
    """Use case for editing a thread's body, title or pin."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: UpdateThreadRequest) -> UpdateThreadResponse:
        """Apply the requested changes.

        Raises:
            NotFoundError: If the thread does not exist or is hidden
            ValidationError: If body or title is blank
            ValueError: If the thread ID is not a UUID
        """
        thread = await self.thread_service.update_thread(
            ThreadId(UUID(request.thread_id)),
            body=request.body,
            title=request.title,
            pinned=request.pinned,
        )
        return UpdateThreadResponse(thread=ThreadItem.from_thread(thread))
