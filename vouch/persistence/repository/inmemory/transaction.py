"""In-memory transaction log for testing."""

from datetime import datetime
from typing import Optional

from vouch.domain.model.transaction import TransactionRecord
from vouch.domain.repository.transaction import TransactionRepository
from vouch.persistence.error import check_row_count


class InMemoryTransactionRepository(TransactionRepository):
    """In-memory implementation of TransactionRepository for testing."""

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], TransactionRecord] = {}

    async def record_transaction(
        self,
        localpart: str,
        transaction_id: str,
        completed_at: datetime,
        result: str,
    ) -> TransactionRecord:
        """Record a completed transaction."""
        key = (localpart, transaction_id)
        check_row_count("record transaction", 0 if key in self._records else 1)
        record = TransactionRecord(
            localpart=localpart,
            transaction_id=transaction_id,
            completed_at=completed_at,
            result=result,
        )
        self._records[key] = record
        return record

    async def get_transaction(
        self, localpart: str, transaction_id: str
    ) -> Optional[TransactionRecord]:
        """Find a recorded transaction."""
        return self._records.get((localpart, transaction_id))
