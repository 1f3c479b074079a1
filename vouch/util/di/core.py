"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from vouch.config import KeySettings, Settings, StorageSettings
from vouch.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide storage settings."""
        return settings.storage

    @provide(scope=Scope.APP)
    def provide_key_settings(self, settings: Settings) -> KeySettings:
        """Provide key store settings."""
        return settings.keys
