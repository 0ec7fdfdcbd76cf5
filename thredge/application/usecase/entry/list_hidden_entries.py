"""List hidden entries use case."""

from pydantic import BaseModel, Field

from thredge.application.usecase.common import EntryItem
from thredge.domain.service import EntryService


class ListHiddenEntriesRequest(BaseModel):
    """List hidden entries request."""

    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListHiddenEntriesResponse(BaseModel):
    """List hidden entries response."""

    entries: list[EntryItem]
    total: int
    limit: int
    offset: int


class ListHiddenEntriesUseCase:
    """Use case for the archive of hidden entries."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self, request: ListHiddenEntriesRequest) -> ListHiddenEntriesResponse:
        entries, total = await self.entry_service.list_hidden(
            limit=request.limit, offset=request.offset
        )
        return ListHiddenEntriesResponse(
            entries=[EntryItem.from_entry(entry) for entry in entries],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
