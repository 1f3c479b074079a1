"""In-memory storage for testing."""

from datetime import datetime
from typing import Optional

from vouch.domain.model import Invite, TransactionRecord, VerificationSession
from vouch.domain.repository import Storage
from vouch.domain.value import InviteId, SessionId, ThreePid

from .invite import InMemoryInviteRepository
from .session import InMemorySessionRepository
from .transaction import InMemoryTransactionRepository


class InMemoryStorage(Storage):
    """In-memory implementation of Storage, composed like SqlStorage."""

    def __init__(self) -> None:
        self.invites = InMemoryInviteRepository()
        self.sessions = InMemorySessionRepository()
        self.transactions = InMemoryTransactionRepository()

    async def list_invites(self) -> list[Invite]:
        return await self.invites.list_invites()

    async def insert_invite(self, invite: Invite) -> Invite:
        return await self.invites.insert_invite(invite)

    async def delete_invite(self, invite_id: InviteId) -> None:
        await self.invites.delete_invite(invite_id)

    async def get_session(self, session_id: SessionId) -> Optional[VerificationSession]:
        return await self.sessions.get_session(session_id)

    async def find_session(
        self, threepid: ThreePid, secret: str
    ) -> Optional[VerificationSession]:
        return await self.sessions.find_session(threepid, secret)

    async def insert_session(self, session: VerificationSession) -> VerificationSession:
        return await self.sessions.insert_session(session)

    async def update_session(self, session: VerificationSession) -> VerificationSession:
        return await self.sessions.update_session(session)

    async def record_transaction(
        self,
        localpart: str,
        transaction_id: str,
        completed_at: datetime,
        result: str,
    ) -> TransactionRecord:
        return await self.transactions.record_transaction(
            localpart, transaction_id, completed_at, result
        )

    async def get_transaction(
        self, localpart: str, transaction_id: str
    ) -> Optional[TransactionRecord]:
        return await self.transactions.get_transaction(localpart, transaction_id)

    async def close(self) -> None:
        pass
