"""Hide and restore thread use case."""

from uuid import UUID

from pydantic import BaseModel

from thredge.application.usecase.common import ThreadItem
from thredge.domain.service import ThreadService
from thredge.domain.value import ThreadId


class SetThreadVisibilityRequest(BaseModel):
    """Hide (hidden=True) or restore (hidden=False) a thread."""

    thread_id: str  # UUID string
    hidden: bool


class SetThreadVisibilityResponse(BaseModel):
    """Set thread visibility response."""

    thread: ThreadItem


class SetThreadVisibilityUseCase:
    """Use case for hiding and restoring threads."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(
        self, request: SetThreadVisibilityRequest
    ) -> SetThreadVisibilityResponse:
        """Hide or restore a thread.

        Raises:
            NotFoundError: If the thread does not exist or is already in
                the requested state
        """
        thread_id = ThreadId(UUID(request.thread_id))
        if request.hidden:
            thread = await self.thread_service.hide_thread(thread_id)
        else:
            thread = await self.thread_service.restore_thread(thread_id)
        return SetThreadVisibilityResponse(thread=ThreadItem.from_thread(thread))
