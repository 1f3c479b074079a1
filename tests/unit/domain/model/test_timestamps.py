"""Tests for UTC normalization of record timestamps."""

from datetime import datetime, timedelta, timezone

from vouch.domain.model import TransactionRecord
from tests.conftest import T0, make_session


class TestUtcTimestamps:
    """Every record timestamp is timezone-aware UTC."""

    def test_naive_value_is_taken_as_utc(self):
        record = TransactionRecord(
            localpart="alice",
            transaction_id="txn-1",
            completed_at=T0.replace(tzinfo=None),
            result="x",
        )

        assert record.completed_at == T0
        assert record.completed_at.tzinfo == timezone.utc

    def test_other_zone_is_converted(self):
        plus_two = timezone(timedelta(hours=2))
        local = datetime(2024, 5, 1, 14, 0, tzinfo=plus_two)

        session = make_session().model_copy(update={"expires_at": local})
        rebuilt = type(session).model_validate(session.model_dump())

        assert rebuilt.expires_at == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        assert rebuilt.expires_at.tzinfo == timezone.utc

    def test_optional_timestamps_stay_none(self):
        session = make_session()

        assert session.validated_at is None
        assert session.created_at.tzinfo == timezone.utc
