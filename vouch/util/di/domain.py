"""Domain layer DI providers."""

from dishka import Scope, provide

from vouch.domain.repository import TransactionRepository
from vouch.domain.service import TransactionService
from vouch.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_transaction_service(
        self, transaction_repository: TransactionRepository
    ) -> TransactionService:
        """Provide transaction idempotency service."""
        return TransactionService(transaction_repository=transaction_repository)
