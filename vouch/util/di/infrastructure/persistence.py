"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire

from vouch.config import Settings
from vouch.domain.repository import Storage, TransactionRepository
from vouch.persistence.storage import SqlStorage
from vouch.util.di.base import ProviderBase
from vouch.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the configured SQL backend."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_storage(self, settings: Settings) -> AsyncIterator[Storage]:
        """Provide storage for the application lifetime.

        Tables are created before the storage is handed out; the pool is
        disposed when the container closes.
        """
        storage = await SqlStorage.from_settings(settings.storage, echo=settings.debug)
        instrument_sqlalchemy(storage.engine)
        try:
            yield storage
        finally:
            await storage.close()
            logfire.info("Persistence provider closed")

    @provide(scope=Scope.APP)
    def get_transaction_repository(self, storage: Storage) -> TransactionRepository:
        """Provide the transaction log."""
        return storage
