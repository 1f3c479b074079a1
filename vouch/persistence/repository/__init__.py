"""SQL repository implementations."""

from vouch.persistence.repository.invite import SqlInviteRepository
from vouch.persistence.repository.session import SqlSessionRepository
from vouch.persistence.repository.transaction import SqlTransactionRepository

__all__ = [
    "SqlInviteRepository",
    "SqlSessionRepository",
    "SqlTransactionRepository",
]
