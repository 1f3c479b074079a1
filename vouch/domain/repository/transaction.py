"""Transaction log repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from vouch.domain.model.transaction import TransactionRecord


class TransactionRepository(ABC):
    """Repository for TransactionRecord entity.

    The log is the idempotency gate for external transaction delivery:
    callers look a transaction up before processing it, and record it only
    once processing produced a result.
    """

    @abstractmethod
    async def record_transaction(
        self,
        localpart: str,
        transaction_id: str,
        completed_at: datetime,
        result: str,
    ) -> TransactionRecord:
        """Record a completed transaction.

        Args:
            localpart: Owning actor
            transaction_id: Transaction ID chosen by the sender
            completed_at: Completion time
            result: Serialized result payload

        Returns:
            The stored record

        Raises:
            StorageInvariantError: If not exactly one row was written,
                including when the transaction is already recorded
        """
        pass

    @abstractmethod
    async def get_transaction(
        self, localpart: str, transaction_id: str
    ) -> TransactionRecord | None:
        """Find a recorded transaction.

        Returns:
            The record if found, None otherwise

        Raises:
            InternalConsistencyError: If more than one record matches
        """
        pass
