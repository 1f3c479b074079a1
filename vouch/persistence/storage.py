"""SQL storage facade.

Owns the engine and the three stores built on it. Construct it with
``SqlStorage.open``, which validates the descriptor and creates missing
tables before handing the storage out.
"""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from vouch.config import StorageSettings
from vouch.domain.model import Invite, TransactionRecord, VerificationSession
from vouch.domain.repository import Storage
from vouch.domain.value import InviteId, SessionId, ThreePid
from vouch.persistence.database import create_engine, ensure_schema
from vouch.persistence.repository import (
    SqlInviteRepository,
    SqlSessionRepository,
    SqlTransactionRepository,
)
from vouch.persistence.tables import ALL_TABLES


class SqlStorage(Storage):
    """Storage backed by a SQL database."""

    def __init__(self, engine: AsyncEngine) -> None:
        """Wrap an engine whose schema already exists.

        Args:
            engine: SQLAlchemy async engine
        """
        self.engine = engine
        self.invites = SqlInviteRepository(engine)
        self.sessions = SqlSessionRepository(engine)
        self.transactions = SqlTransactionRepository(engine)

    @classmethod
    async def open(
        cls,
        backend: str,
        path: str,
        *,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ) -> "SqlStorage":
        """Connect to the backend and make sure every table exists.

        Args:
            backend: Backend kind, e.g. "sqlite" or "postgresql"
            path: File path or connection string
            echo: Log SQL statements
            pool_size: Connection pool size
            max_overflow: Max connections beyond pool_size

        Returns:
            Ready-to-use storage

        Raises:
            ConfigurationError: If the descriptor is blank or malformed
            BackendIOError: If the backend cannot be reached
        """
        engine = create_engine(
            backend,
            path,
            echo=echo,
            pool_size=pool_size,
            max_overflow=max_overflow,
        )
        try:
            for table in ALL_TABLES:
                await ensure_schema(engine, table)
        except Exception:
            await engine.dispose()
            raise

        logfire.info("Storage opened", backend=backend, dialect=engine.dialect.name)
        return cls(engine)

    @classmethod
    async def from_settings(
        cls, settings: StorageSettings, echo: bool = False
    ) -> "SqlStorage":
        """Open storage from configuration.

        Args:
            settings: Storage settings
            echo: Log SQL statements

        Returns:
            Ready-to-use storage
        """
        return await cls.open(
            settings.backend,
            settings.path,
            echo=echo,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
        )

    async def close(self) -> None:
        """Dispose of the connection pool."""
        await self.engine.dispose()
        logfire.info("Storage closed")

    # Invites

    async def list_invites(self) -> list[Invite]:
        return await self.invites.list_invites()

    async def insert_invite(self, invite: Invite) -> Invite:
        return await self.invites.insert_invite(invite)

    async def delete_invite(self, invite_id: InviteId) -> None:
        await self.invites.delete_invite(invite_id)

    # Verification sessions

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

    # Transaction log

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
