"""Integration tests for the DI container with real SQL storage."""

import pytest

from vouch.crypto import KeyManager, MemoryKeyStore
from vouch.domain.repository import Storage
from vouch.domain.service import TransactionService
from vouch.persistence.storage import SqlStorage
from vouch.util.di.container import create_container
from tests.conftest import make_invite
from tests.harness import create_env_fixture

# Integration test fixture - real persistence on a temporary sqlite file
integration_env = create_env_fixture(unmock={"persistence"})


class TestContainer:
    """Wiring of settings, storage, crypto and services."""

    @pytest.mark.asyncio
    async def test_storage_is_sql_backed(self, integration_env):
        storage = await integration_env.get(Storage)

        assert isinstance(storage, SqlStorage)
        await storage.insert_invite(make_invite())
        assert len(await storage.list_invites()) == 1

    @pytest.mark.asyncio
    async def test_transaction_service_uses_sql_log(self, integration_env):
        service = await integration_env.get(TransactionService)
        storage = await integration_env.get(Storage)

        async def produce() -> str:
            return '{"ok":true}'

        assert await service.run_once("alice", "txn-42", produce) == '{"ok":true}'
        record = await storage.get_transaction("alice", "txn-42")
        assert record is not None

    @pytest.mark.asyncio
    async def test_key_manager_uses_memory_store(self, integration_env):
        manager = await integration_env.get(KeyManager)

        assert isinstance(manager.store, MemoryKeyStore)
        assert manager.verify(b"data", manager.sign(b"data"))


class TestProductionContainer:
    """The production container reads everything from the environment."""

    @pytest.mark.asyncio
    async def test_create_container_opens_configured_storage(self, tmp_path, monkeypatch):
        # Arrange
        db_path = tmp_path / "prod.db"
        monkeypatch.setenv("STORAGE__BACKEND", "sqlite")
        monkeypatch.setenv("STORAGE__PATH", str(db_path))
        monkeypatch.setenv("KEYS__PATH", str(tmp_path / "keys.json"))
        container = create_container()

        # Act
        try:
            storage = await container.get(Storage)
            manager = await container.get(KeyManager)
            invites = await storage.list_invites()
        finally:
            await container.close()

        # Assert
        assert isinstance(storage, SqlStorage)
        assert invites == []
        assert db_path.exists()
        assert manager.public_key_base64()
        assert (tmp_path / "keys.json").read_text()
