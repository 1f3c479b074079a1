"""SQL implementation of the transaction log."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from vouch.domain.error import InternalConsistencyError
from vouch.domain.model import TransactionRecord
from vouch.domain.repository import TransactionRepository
from vouch.persistence.error import check_row_count, translate_errors
from vouch.persistence.mappers import row_to_transaction, transaction_to_dict
from vouch.persistence.tables import transactions_table


class SqlTransactionRepository(TransactionRepository):
    """SQL implementation of TransactionRepository.

    The composite primary key makes the backend reject a second record for
    the same (localpart, transaction_id), which surfaces to callers as
    StorageInvariantError.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def record_transaction(
        self,
        localpart: str,
        transaction_id: str,
        completed_at: datetime,
        result: str,
    ) -> TransactionRecord:
        record = TransactionRecord(
            localpart=localpart,
            transaction_id=transaction_id,
            completed_at=completed_at,
            result=result,
        )
        stmt = insert(transactions_table).values(**transaction_to_dict(record))
        async with translate_errors("record transaction"):
            async with self.engine.begin() as conn:
                written = await conn.execute(stmt)
                check_row_count("record transaction", written.rowcount)
        return record

    async def get_transaction(
        self, localpart: str, transaction_id: str
    ) -> Optional[TransactionRecord]:
        stmt = select(transactions_table).where(
            and_(
                transactions_table.c.localpart == localpart,
                transactions_table.c.transaction_id == transaction_id,
            )
        )
        async with translate_errors("get transaction"):
            async with self.engine.connect() as conn:
                result = await conn.execute(stmt)
                rows = result.mappings().all()

            if len(rows) > 1:
                logfire.error(
                    "Duplicate transaction records",
                    localpart=localpart,
                    transaction_id=transaction_id,
                    matches=len(rows),
                )
                raise InternalConsistencyError(
                    f"transaction {transaction_id} for localpart {localpart}", len(rows)
                )

            return row_to_transaction(dict(rows[0])) if rows else None
