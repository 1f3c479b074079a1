"""Crypto infrastructure providers."""

from dishka import Scope, provide

from vouch.config import KeySettings
from vouch.crypto import KeyManager, KeyStore, create_key_store
from vouch.util.di.base import ProviderBase


class ProdCryptoProvider(ProviderBase):
    """Key store and signing provider - concrete, use ":memory:" in tests."""

    @provide(scope=Scope.APP)
    def get_key_store(self, key_settings: KeySettings) -> KeyStore:
        """Provide the configured key store."""
        return create_key_store(key_settings.path)

    @provide(scope=Scope.APP)
    def get_key_manager(self, key_store: KeyStore) -> KeyManager:
        """Provide the signing key manager."""
        return KeyManager(key_store)
