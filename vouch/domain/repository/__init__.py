"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from vouch.domain.repository.invite import InviteRepository
from vouch.domain.repository.session import SessionRepository
from vouch.domain.repository.storage import Storage
from vouch.domain.repository.transaction import TransactionRepository

__all__ = [
    "InviteRepository",
    "SessionRepository",
    "Storage",
    "TransactionRepository",
]
