"""Create thread use case."""

from pydantic import BaseModel, Field

from thredge.application.usecase.common import ThreadItem
from thredge.domain.service import ThreadService


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    body: str = Field(min_length=1, max_length=20000)


class CreateThreadResponse(BaseModel):
    """Create thread response."""

    thread: ThreadItem


class CreateThreadUseCase:
    """Use case for starting a new thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        """Create a thread titled after the first line of its body.

        Raises:
            ValidationError: If the body is blank
        """
        thread = await self.thread_service.create_thread(request.body)
        return CreateThreadResponse(thread=ThreadItem.from_thread(thread))
