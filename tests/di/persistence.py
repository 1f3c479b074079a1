"""Mock persistence providers for testing."""

from dishka import Scope, provide

from vouch.domain.repository import Storage, TransactionRepository
from vouch.persistence.repository.inmemory import InMemoryStorage
from vouch.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory storage.

    Uses REQUEST scope to ensure test isolation - each test gets fresh storage.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_storage(self) -> Storage:
        """Provide in-memory storage."""
        return InMemoryStorage()

    @provide(scope=Scope.REQUEST)
    def get_transaction_repository(self, storage: Storage) -> TransactionRepository:
        """Provide the in-memory transaction log."""
        return storage
