"""Unit tests for TransactionService."""

import asyncio
from datetime import datetime

import pytest

from vouch.domain.error import StorageInvariantError
from vouch.domain.repository import TransactionRepository
from vouch.domain.service import TransactionService
from vouch.persistence.repository.inmemory import InMemoryTransactionRepository
from tests.conftest import T0
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class FailingTransactionRepository(InMemoryTransactionRepository):
    """Transaction log whose writes always fail without storing anything."""

    async def record_transaction(
        self, localpart: str, transaction_id: str, completed_at: datetime, result: str
    ):
        raise StorageInvariantError("record transaction", 1, 0)


class TestRunOnce:
    """Tests for run_once."""

    @pytest.mark.asyncio
    async def test_first_delivery_produces_and_records(self, unit_env):
        # Arrange
        service = await unit_env.get(TransactionService)
        repository = await unit_env.get(TransactionRepository)
        calls = []

        async def produce() -> str:
            calls.append(1)
            return '{"ok":true}'

        # Act
        result = await service.run_once("alice", "txn-42", produce)

        # Assert
        assert result == '{"ok":true}'
        assert len(calls) == 1
        record = await repository.get_transaction("alice", "txn-42")
        assert record is not None
        assert record.result == '{"ok":true}'

    @pytest.mark.asyncio
    async def test_redelivery_replays_stored_result(self, unit_env):
        # Arrange
        service = await unit_env.get(TransactionService)
        repository = await unit_env.get(TransactionRepository)
        await repository.record_transaction("alice", "txn-42", T0, '{"ok":true}')

        async def produce() -> str:
            raise AssertionError("must not reprocess")

        # Act
        result = await service.run_once("alice", "txn-42", produce)

        # Assert
        assert result == '{"ok":true}'

    @pytest.mark.asyncio
    async def test_losing_a_race_returns_winner_result(self, unit_env):
        # Arrange
        service = await unit_env.get(TransactionService)
        repository = await unit_env.get(TransactionRepository)

        async def produce() -> str:
            # A concurrent delivery completes while this one is working
            await repository.record_transaction("alice", "txn-42", T0, "winner")
            return "loser"

        # Act
        result = await service.run_once("alice", "txn-42", produce)

        # Assert
        assert result == "winner"
        assert (await repository.get_transaction("alice", "txn-42")).result == "winner"

    @pytest.mark.asyncio
    async def test_concurrent_deliveries_agree_on_one_result(self, unit_env):
        # Arrange
        service = await unit_env.get(TransactionService)
        repository = await unit_env.get(TransactionRepository)
        produced = []

        async def produce() -> str:
            produced.append(len(produced))
            await asyncio.sleep(0)
            return f"result-{len(produced)}"

        # Act
        results = await asyncio.gather(
            service.run_once("alice", "txn-7", produce),
            service.run_once("alice", "txn-7", produce),
        )

        # Assert
        stored = await repository.get_transaction("alice", "txn-7")
        assert stored is not None
        assert results == [stored.result, stored.result]

    @pytest.mark.asyncio
    async def test_write_failure_without_record_is_raised(self):
        # Arrange
        service = TransactionService(FailingTransactionRepository())

        async def produce() -> str:
            return "value"

        # Act & Assert
        with pytest.raises(StorageInvariantError):
            await service.run_once("alice", "txn-1", produce)


class TestGetResult:
    """Tests for get_result."""

    @pytest.mark.asyncio
    async def test_unknown_transaction(self, unit_env):
        service = await unit_env.get(TransactionService)

        assert await service.get_result("alice", "missing") is None
