"""Transaction record entity."""

from vouch.domain.model.common import DomainModel, UtcDatetime


class TransactionRecord(DomainModel):
    """Idempotency marker for a processed external transaction.

    (localpart, transaction_id) is unique. Records are written once, after
    the transaction completed, and never changed afterwards.
    """

    localpart: str
    transaction_id: str
    completed_at: UtcDatetime
    result: str  # Serialized result payload
