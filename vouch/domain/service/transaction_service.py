"""Transaction idempotency domain service."""

from collections.abc import Awaitable, Callable

import logfire

from vouch.domain.model.common import utcnow
from vouch.domain.repository import TransactionRepository
from vouch.domain.error import StorageInvariantError

from .base import Service


class TransactionService(Service):
    """Domain service that processes each external transaction once.

    The transaction log is the gate: a stored record means the transaction
    was already processed and its stored result is replayed.
    """

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        """Initialize transaction service.

        Args:
            transaction_repository: Transaction log
        """
        self.transaction_repository = transaction_repository

    async def get_result(self, localpart: str, transaction_id: str) -> str | None:
        """Get the stored result of a processed transaction.

        Args:
            localpart: Owning actor
            transaction_id: Transaction ID

        Returns:
            Serialized result if already processed, None otherwise
        """
        record = await self.transaction_repository.get_transaction(
            localpart, transaction_id
        )
        return record.result if record else None

    async def run_once(
        self,
        localpart: str,
        transaction_id: str,
        produce: Callable[[], Awaitable[str]],
    ) -> str:
        """Process a transaction unless it was already processed.

        The result is recorded only after ``produce`` succeeded. If another
        caller records the same transaction first, its result wins.

        Args:
            localpart: Owning actor
            transaction_id: Transaction ID
            produce: Coroutine factory doing the work and returning the
                serialized result

        Returns:
            Serialized result, fresh or replayed

        Raises:
            StorageInvariantError: If recording failed and no record exists
        """
        with logfire.span(
            "transaction_service.run_once",
            localpart=localpart,
            transaction_id=transaction_id,
        ):
            existing = await self.get_result(localpart, transaction_id)
            if existing is not None:
                logfire.info(
                    "Transaction already processed",
                    localpart=localpart,
                    transaction_id=transaction_id,
                )
                return existing

            result = await produce()

            try:
                await self.transaction_repository.record_transaction(
                    localpart, transaction_id, utcnow(), result
                )
            except StorageInvariantError:
                winner = await self.get_result(localpart, transaction_id)
                if winner is None:
                    raise
                logfire.warn(
                    "Transaction recorded concurrently",
                    localpart=localpart,
                    transaction_id=transaction_id,
                )
                return winner

            logfire.info(
                "Transaction recorded",
                localpart=localpart,
                transaction_id=transaction_id,
            )
            return result
