"""In-memory repository implementations for testing."""

from .invite import InMemoryInviteRepository
from .session import InMemorySessionRepository
from .storage import InMemoryStorage
from .transaction import InMemoryTransactionRepository

__all__ = [
    "InMemoryInviteRepository",
    "InMemorySessionRepository",
    "InMemoryStorage",
    "InMemoryTransactionRepository",
]
