"""Update entry use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from thredge.application.usecase.common import EntryItem
from thredge.domain.service import EntryService
from thredge.domain.value import EntryId


class UpdateEntryRequest(BaseModel):
    """Update entry request."""

    entry_id: str  # UUID string
    body: str = Field(min_length=1, max_length=20000)


class UpdateEntryResponse(BaseModel):
    """Update entry response."""

    entry: EntryItem


class UpdateEntryUseCase:
    """Use case for editing an entry's body."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self, request: UpdateEntryRequest) -> UpdateEntryResponse:
        entry = await self.entry_service.update_entry(
            EntryId(UUID(request.entry_id)), request.body
        )
        return UpdateEntryResponse(entry=EntryItem.from_entry(entry))
