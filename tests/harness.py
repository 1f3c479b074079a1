"""Test harness for unit and integration tests.

Integration tests run against a sqlite file created in the test's
temporary directory, so no external service is needed.
"""

import pytest_asyncio

from vouch.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Points storage at a fresh sqlite file and keys at an in-memory store
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container (and its storage) afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory storage
        unit_env = create_env_fixture()

        # Integration tests - real SQL storage on sqlite
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_insert_invite(integration_env):
            storage = await integration_env.get(Storage)
            await storage.insert_invite(invite)
    """

    @pytest_asyncio.fixture
    async def _test_environment(tmp_path, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "test")
        monkeypatch.setenv("STORAGE__BACKEND", "sqlite")
        monkeypatch.setenv("STORAGE__PATH", str(tmp_path / "vouch.db"))
        monkeypatch.setenv("KEYS__PATH", ":memory:")

        container = build_test_container(unmock=unmock or set())
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _test_environment
