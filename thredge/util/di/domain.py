"""Domain layer DI providers."""

from dishka import Scope, provide

from thredge.config import TreeSettings
from thredge.domain.repository import EntryRepository, ThreadRepository
from thredge.domain.service import EntryService, ThreadService
from thredge.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to share the request's repositories and
    therefore its transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        entry_repository: EntryRepository,
        tree_settings: TreeSettings,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            entry_repository=entry_repository,
            tree_settings=tree_settings,
        )

    @provide
    def get_entry_service(
        self,
        entry_repository: EntryRepository,
        thread_repository: ThreadRepository,
        tree_settings: TreeSettings,
    ) -> EntryService:
        """Provide entry domain service."""
        return EntryService(
            entry_repository=entry_repository,
            thread_repository=thread_repository,
            tree_settings=tree_settings,
        )
