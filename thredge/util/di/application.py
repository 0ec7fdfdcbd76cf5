"""Application layer DI providers."""

from dishka import Scope, provide

from thredge.application.usecase.entry import (
    ListHiddenEntriesUseCase,
    MoveEntryToUseCase,
    MoveEntryUseCase,
    SetEntryVisibilityUseCase,
    UpdateEntryUseCase,
)
from thredge.application.usecase.thread import (
    AddEntryUseCase,
    CreateThreadUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
    SetThreadVisibilityUseCase,
    UpdateThreadUseCase,
)
from thredge.domain.service import EntryService, ThreadService
from thredge.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    scope = Scope.REQUEST

    # Thread use cases
    @provide
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide
    def get_get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide
    def get_list_threads_use_case(
        self, thread_service: ThreadService
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(thread_service=thread_service)

    @provide
    def get_update_thread_use_case(
        self, thread_service: ThreadService
    ) -> UpdateThreadUseCase:
        """Provide update thread use case."""
        return UpdateThreadUseCase(thread_service=thread_service)

    @provide
    def get_set_thread_visibility_use_case(
        self, thread_service: ThreadService
    ) -> SetThreadVisibilityUseCase:
        """Provide hide/restore thread use case."""
        return SetThreadVisibilityUseCase(thread_service=thread_service)

    @provide
    def get_add_entry_use_case(self, thread_service: ThreadService) -> AddEntryUseCase:
        """Provide add entry use case."""
        return AddEntryUseCase(thread_service=thread_service)

    # Entry use cases
    @provide
    def get_list_hidden_entries_use_case(
        self, entry_service: EntryService
    ) -> ListHiddenEntriesUseCase:
        """Provide hidden entries archive use case."""
        return ListHiddenEntriesUseCase(entry_service=entry_service)

    @provide
    def get_update_entry_use_case(self, entry_service: EntryService) -> UpdateEntryUseCase:
        """Provide update entry use case."""
        return UpdateEntryUseCase(entry_service=entry_service)

    @provide
    def get_set_entry_visibility_use_case(
        self, entry_service: EntryService
    ) -> SetEntryVisibilityUseCase:
        """Provide hide/restore entry use case."""
        return SetEntryVisibilityUseCase(entry_service=entry_service)

    @provide
    def get_move_entry_use_case(self, entry_service: EntryService) -> MoveEntryUseCase:
        """Provide one-step move use case."""
        return MoveEntryUseCase(entry_service=entry_service)

    @provide
    def get_move_entry_to_use_case(
        self, entry_service: EntryService
    ) -> MoveEntryToUseCase:
        """Provide drag and drop move use case."""
        return MoveEntryToUseCase(entry_service=entry_service)
