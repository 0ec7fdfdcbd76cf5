"""List threads use case."""

from pydantic import BaseModel, Field

from thredge.application.usecase.common import ThreadItem
from thredge.domain.service import ThreadService


class ListThreadsRequest(BaseModel):
    """List threads request."""

    include_hidden: bool = False
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[ThreadItem]
    total: int
    limit: int
    offset: int


class ListThreadsUseCase:
    """Use case for listing threads, pinned first."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        threads, total = await self.thread_service.list_threads(
            include_hidden=request.include_hidden,
            limit=request.limit,
            offset=request.offset,
        )
        return ListThreadsResponse(
            threads=[ThreadItem.from_thread(thread) for thread in threads],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
