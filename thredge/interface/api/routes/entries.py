"""Entry routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from thredge.application.usecase.entry import (
    ListHiddenEntriesRequest,
    ListHiddenEntriesResponse,
    ListHiddenEntriesUseCase,
    MoveEntryRequest,
    MoveEntryResponse,
    MoveEntryToRequest,
    MoveEntryToUseCase,
    MoveEntryUseCase,
    SetEntryVisibilityRequest,
    SetEntryVisibilityResponse,
    SetEntryVisibilityUseCase,
    UpdateEntryRequest,
    UpdateEntryResponse,
    UpdateEntryUseCase,
)
from thredge.domain.error import DomainError
from thredge.domain.value import DropPosition, MoveDirection
from thredge.interface.error import to_http_exception

router = APIRouter(prefix="/entries", tags=["entries"], route_class=DishkaRoute)


class UpdateEntryAPIRequest(BaseModel):
    """API request for editing an entry."""

    body: str = Field(min_length=1, max_length=20000)


class MoveEntryAPIRequest(BaseModel):
    """API request for a one-step move."""

    direction: MoveDirection


class MoveEntryToAPIRequest(BaseModel):
    """API request for a drag and drop move."""

    target_entry_id: str
    position: DropPosition


@router.get("/hidden", response_model=ListHiddenEntriesResponse)
async def list_hidden_entries(
    list_hidden_use_case: FromDishka[ListHiddenEntriesUseCase],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListHiddenEntriesResponse:
    """List hidden entries of every thread, oldest first."""
    return await list_hidden_use_case.execute(
        ListHiddenEntriesRequest(limit=limit, offset=offset)
    )


@router.patch("/{entry_id}", response_model=UpdateEntryResponse)
async def update_entry(
    entry_id: str,
    request: UpdateEntryAPIRequest,
    update_entry_use_case: FromDishka[UpdateEntryUseCase],
) -> UpdateEntryResponse:
    """Edit an entry's body."""
    try:
        return await update_entry_use_case.execute(
            UpdateEntryRequest(entry_id=entry_id, body=request.body)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{entry_id}", response_model=SetEntryVisibilityResponse)
async def hide_entry(
    entry_id: str,
    set_visibility_use_case: FromDishka[SetEntryVisibilityUseCase],
) -> SetEntryVisibilityResponse:
    """Hide an entry. Its replies stay and show as top-level entries."""
    try:
        return await set_visibility_use_case.execute(
            SetEntryVisibilityRequest(entry_id=entry_id, hidden=True)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/{entry_id}/restore", response_model=SetEntryVisibilityResponse)
async def restore_entry(
    entry_id: str,
    set_visibility_use_case: FromDishka[SetEntryVisibilityUseCase],
) -> SetEntryVisibilityResponse:
    """Restore a hidden entry."""
    try:
        return await set_visibility_use_case.execute(
            SetEntryVisibilityRequest(entry_id=entry_id, hidden=False)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/{entry_id}/move", response_model=MoveEntryResponse)
async def move_entry(
    entry_id: str,
    request: MoveEntryAPIRequest,
    move_entry_use_case: FromDishka[MoveEntryUseCase],
) -> MoveEntryResponse:
    """Move an entry one step up or down through the rendered thread.

    Raises:
        HTTPException: 400 if the move is not allowed, 404 if the entry is
            missing
    """
    try:
        return await move_entry_use_case.execute(
            MoveEntryRequest(entry_id=entry_id, direction=request.direction)
        )
    except (DomainError, ValueError) as e:
        logfire.info("Move refused", entry_id=entry_id, reason=str(e))
        raise to_http_exception(e)


@router.post("/{entry_id}/move-to", response_model=MoveEntryResponse)
async def move_entry_to(
    entry_id: str,
    request: MoveEntryToAPIRequest,
    move_entry_to_use_case: FromDishka[MoveEntryToUseCase],
) -> MoveEntryResponse:
    """Drop an entry before, after, or as the first reply of another entry.

    Raises:
        HTTPException: 400 if the drop is not allowed, 404 if the entry is
            missing, 409 if the target disappeared (refresh and retry)
    """
    try:
        return await move_entry_to_use_case.execute(
            MoveEntryToRequest(
                entry_id=entry_id,
                target_entry_id=request.target_entry_id,
                position=request.position,
            )
        )
    except (DomainError, ValueError) as e:
        logfire.info("Move refused", entry_id=entry_id, reason=str(e))
        raise to_http_exception(e)
