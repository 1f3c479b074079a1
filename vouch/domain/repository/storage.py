"""Storage contract combining every record kind."""

from abc import abstractmethod

from vouch.domain.repository.invite import InviteRepository
from vouch.domain.repository.session import SessionRepository
from vouch.domain.repository.transaction import TransactionRepository


class Storage(InviteRepository, SessionRepository, TransactionRepository):
    """Single entry point to invites, sessions and the transaction log.

    Implementations own their backend connection; nothing else holds it.
    """

    @abstractmethod
    async def close(self) -> None:
        """Release backend resources."""
        pass
