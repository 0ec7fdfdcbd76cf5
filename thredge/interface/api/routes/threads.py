"""Thread routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from thredge.application.usecase.thread import (
    AddEntryRequest,
    AddEntryResponse,
    AddEntryUseCase,
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsResponse,
    ListThreadsUseCase,
    SetThreadVisibilityRequest,
    SetThreadVisibilityResponse,
    SetThreadVisibilityUseCase,
    UpdateThreadRequest,
    UpdateThreadResponse,
    UpdateThreadUseCase,
)
from thredge.domain.error import DomainError
from thredge.interface.error import to_http_exception

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class UpdateThreadAPIRequest(BaseModel):
    """API request for updating a thread."""

    body: str | None = Field(default=None, max_length=20000)
    title: str | None = Field(default=None, max_length=200)
    pinned: bool | None = None


class AddEntryAPIRequest(BaseModel):
    """API request for adding an entry to a thread."""

    body: str = Field(min_length=1, max_length=20000)
    parent_entry_id: str | None = None  # Parent entry ID for replies


@router.post("", response_model=CreateThreadResponse, status_code=status.HTTP_201_CREATED)
async def create_thread(
    request: CreateThreadRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
) -> CreateThreadResponse:
    """Start a thread; its title is the first line of the body."""
    try:
        return await create_thread_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("", response_model=ListThreadsResponse)
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    include_hidden: bool = Query(default=False),
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListThreadsResponse:
    """List threads, pinned first, then by latest activity."""
    return await list_threads_use_case.execute(
        ListThreadsRequest(include_hidden=include_hidden, limit=limit, offset=offset)
    )


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    include_hidden: bool = Query(default=False),
) -> GetThreadResponse:
    """Get a thread with its entries in render order.

    Each entry carries its depth so the client can indent it without
    rebuilding the tree.

    Raises:
        HTTPException: 404 if the thread does not exist or is hidden
    """
    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(thread_id=thread_id, include_hidden=include_hidden)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.patch("/{thread_id}", response_model=UpdateThreadResponse)
async def update_thread(
    thread_id: str,
    request: UpdateThreadAPIRequest,
    update_thread_use_case: FromDishka[UpdateThreadUseCase],
) -> UpdateThreadResponse:
    """Edit a thread's body, title or pin."""
    try:
        return await update_thread_use_case.execute(
            UpdateThreadRequest(
                thread_id=thread_id,
                body=request.body,
                title=request.title,
                pinned=request.pinned,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{thread_id}", response_model=SetThreadVisibilityResponse)
async def hide_thread(
    thread_id: str,
    set_visibility_use_case: FromDishka[SetThreadVisibilityUseCase],
) -> SetThreadVisibilityResponse:
    """Hide a thread. Threads are never physically deleted."""
    try:
        return await set_visibility_use_case.execute(
            SetThreadVisibilityRequest(thread_id=thread_id, hidden=True)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/{thread_id}/restore", response_model=SetThreadVisibilityResponse)
async def restore_thread(
    thread_id: str,
    set_visibility_use_case: FromDishka[SetThreadVisibilityUseCase],
) -> SetThreadVisibilityResponse:
    """Restore a hidden thread."""
    try:
        return await set_visibility_use_case.execute(
            SetThreadVisibilityRequest(thread_id=thread_id, hidden=False)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post(
    "/{thread_id}/entries",
    response_model=AddEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_entry(
    thread_id: str,
    request: AddEntryAPIRequest,
    add_entry_use_case: FromDishka[AddEntryUseCase],
) -> AddEntryResponse:
    """Add an entry to a thread, or a reply to one of its entries.

    Raises:
        HTTPException: 404 if the thread is missing, 400 if the parent is
            invalid or already at the maximum depth
    """
    try:
        return await add_entry_use_case.execute(
            AddEntryRequest(
                thread_id=thread_id,
                body=request.body,
                parent_entry_id=request.parent_entry_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
