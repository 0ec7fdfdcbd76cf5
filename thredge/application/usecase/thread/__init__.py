"""Thread use cases."""

from .add_entry import AddEntryRequest, AddEntryResponse, AddEntryUseCase
from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .set_thread_visibility import (
    SetThreadVisibilityRequest,
    SetThreadVisibilityResponse,
    SetThreadVisibilityUseCase,
)
from .update_thread import (
    UpdateThreadRequest,
    UpdateThreadResponse,
    UpdateThreadUseCase,
)

__all__ = [
    "AddEntryRequest",
    "AddEntryResponse",
    "AddEntryUseCase",
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "SetThreadVisibilityRequest",
    "SetThreadVisibilityResponse",
    "SetThreadVisibilityUseCase",
    "UpdateThreadRequest",
    "UpdateThreadResponse",
    "UpdateThreadUseCase",
]
