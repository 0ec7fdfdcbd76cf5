"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from thredge.config import Settings, TreeSettings
from thredge.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings are loaded from environment variables and the .env file.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_tree_settings(self, settings: Settings) -> TreeSettings:
        """Provide reply tree limits."""
        return settings.tree
