"""Hide and restore entry use case."""

from uuid import UUID

from pydantic import BaseModel

from thredge.application.usecase.common import EntryItem
from thredge.domain.service import EntryService
from thredge.domain.value import EntryId


class SetEntryVisibilityRequest(BaseModel):
    """Hide (hidden=True) or restore (hidden=False) an entry."""

    entry_id: str  # UUID string
    hidden: bool


class SetEntryVisibilityResponse(BaseModel):
    """Set entry visibility response."""

    entry: EntryItem


class SetEntryVisibilityUseCase:
    """Use case for hiding and restoring entries."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(
        self, request: SetEntryVisibilityRequest
    ) -> SetEntryVisibilityResponse:
        """Hide or restore an entry.

        Raises:
            NotFoundError: If the entry does not exist or is already in the
                requested state
        """
        entry_id = EntryId(UUID(request.entry_id))
        if request.hidden:
            entry = await self.entry_service.hide_entry(entry_id)
        else:
            entry = await self.entry_service.restore_entry(entry_id)
        return SetEntryVisibilityResponse(entry=EntryItem.from_entry(entry))
