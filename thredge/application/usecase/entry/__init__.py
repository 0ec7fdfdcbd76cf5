"""Entry use cases."""

from .list_hidden_entries import (
    ListHiddenEntriesRequest,
    ListHiddenEntriesResponse,
    ListHiddenEntriesUseCase,
)
from .move_entry import (
    MoveEntryRequest,
    MoveEntryResponse,
    MoveEntryToRequest,
    MoveEntryToUseCase,
    MoveEntryUseCase,
)
from .set_entry_visibility import (
    SetEntryVisibilityRequest,
    SetEntryVisibilityResponse,
    SetEntryVisibilityUseCase,
)
from .update_entry import UpdateEntryRequest, UpdateEntryResponse, UpdateEntryUseCase

__all__ = [
    "ListHiddenEntriesRequest",
    "ListHiddenEntriesResponse",
    "ListHiddenEntriesUseCase",
    "MoveEntryRequest",
    "MoveEntryResponse",
    "MoveEntryToRequest",
    "MoveEntryToUseCase",
    "MoveEntryUseCase",
    "SetEntryVisibilityRequest",
    "SetEntryVisibilityResponse",
    "SetEntryVisibilityUseCase",
    "UpdateEntryRequest",
    "UpdateEntryResponse",
    "UpdateEntryUseCase",
]
