"""Move entry use cases.

Two ways to move an entry: one step up or down through the rendered
thread, or a drag and drop relative to another entry.
"""

from uuid import UUID

from pydantic import BaseModel

from thredge.application.usecase.base import BaseUseCase
from thredge.application.usecase.common import EntryItem
from thredge.domain.service import EntryService
from thredge.domain.value import (
    DirectionalMove,
    DropPosition,
    EntryId,
    MoveDirection,
    TargetedMove,
)


class MoveEntryRequest(BaseModel):
    """Move an entry one step up or down."""

    entry_id: str  # UUID string
    direction: MoveDirection


class MoveEntryToRequest(BaseModel):
    """Drop an entry before, after, or as the first reply of a target."""

    entry_id: str  # UUID string
    target_entry_id: str  # UUID string
    position: DropPosition


class MoveEntryResponse(BaseModel):
    """The moved entry with its new parent and order index."""

    entry: EntryItem


class MoveEntryUseCase(BaseUseCase):
    """Use case for one-step moves."""

    def __init__(self, entry_service: EntryService) -> None:
        """Initialize move entry use case.

        Args:
            entry_service: Entry service
        """
        self.entry_service = entry_service

    async def execute(self, request: MoveEntryRequest) -> MoveEntryResponse:
        """Move the entry one step.

        Raises:
            NotFoundError: If the entry does not exist or is hidden
            EntryLockedError: If the entry is a reply with replies
            SelfContainmentError: If the step would land inside itself
            DepthLimitExceededError: If the step would nest too deep
        """
        entry = await self.entry_service.move_entry(
            EntryId(UUID(request.entry_id)),
            DirectionalMove(direction=request.direction),
        )
        return MoveEntryResponse(entry=EntryItem.from_entry(entry))


class MoveEntryToUseCase(BaseUseCase):
    """Use case for drag and drop moves."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self, request: MoveEntryToRequest) -> MoveEntryResponse:
        """Drop the entry next to or under the target.

        Raises:
            NotFoundError: If the entry does not exist or is hidden
            TargetNotFoundError: If the target is gone or hidden
            SelfContainmentError: If the target is the entry or one of its replies
            DepthLimitExceededError: If the moved subtree would nest too deep
        """
        proposal = TargetedMove(
            target_entry_id=EntryId(UUID(request.target_entry_id)),
            position=request.position,
        )
        entry = await self.entry_service.move_entry(
            EntryId(UUID(request.entry_id)), proposal
        )
        return MoveEntryResponse(entry=EntryItem.from_entry(entry))
