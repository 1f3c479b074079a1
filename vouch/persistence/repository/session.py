"""SQL implementation of VerificationSession repository."""

from typing import Optional

import logfire
from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from vouch.domain.error import InternalConsistencyError
from vouch.domain.model import VerificationSession
from vouch.domain.repository import SessionRepository
from vouch.domain.value import SessionId, ThreePid
from vouch.persistence.error import check_row_count, translate_errors
from vouch.persistence.mappers import row_to_session, session_to_dict
from vouch.persistence.tables import sessions_table


class SqlSessionRepository(SessionRepository):
    """SQL implementation of SessionRepository."""

    def __init__(self, engine: AsyncEngine) -> None:
        """Initialize repository with the shared engine.

        Args:
            engine: SQLAlchemy async engine
        """
        self.engine = engine

    async def get_session(self, session_id: SessionId) -> Optional[VerificationSession]:
        """Find a session by ID.

        Args:
            session_id: Session ID to look up

        Returns:
            Session if found, None otherwise
        """
        stmt = select(sessions_table).where(sessions_table.c.id == session_id)
        async with translate_errors("get session"):
            async with self.engine.connect() as conn:
                result = await conn.execute(stmt)
                row = result.mappings().first()
            return row_to_session(dict(row)) if row else None

    async def find_session(
        self, threepid: ThreePid, secret: str
    ) -> Optional[VerificationSession]:
        """Find the session for a third-party identifier and secret.

        Args:
            threepid: Identifier under verification
            secret: Client secret

        Returns:
            Session if found, None otherwise

        Raises:
            InternalConsistencyError: If several sessions match
        """
        stmt = select(sessions_table).where(
            and_(
                sessions_table.c.medium == threepid.medium.value,
                sessions_table.c.address == threepid.address,
                sessions_table.c.secret == secret,
            )
        )
        async with translate_errors("find session"):
            async with self.engine.connect() as conn:
                result = await conn.execute(stmt)
                rows = result.mappings().all()

            if len(rows) > 1:
                logfire.error(
                    "Duplicate verification sessions",
                    threepid=str(threepid),
                    matches=len(rows),
                )
                raise InternalConsistencyError(f"3PID session {threepid}", len(rows))

            return row_to_session(dict(rows[0])) if rows else None

    async def insert_session(self, session: VerificationSession) -> VerificationSession:
        """Store a new session.

        Args:
            session: Session to store

        Returns:
            Stored session
        """
        stmt = insert(sessions_table).values(**session_to_dict(session))
        async with translate_errors("insert session"):
            async with self.engine.begin() as conn:
                result = await conn.execute(stmt)
                check_row_count("insert session", result.rowcount)
        return session

    async def update_session(self, session: VerificationSession) -> VerificationSession:
        """Replace every column of a stored session.

        Args:
            session: Session with updated fields

        Returns:
            Updated session
        """
        values = session_to_dict(session)
        del values["id"]
        stmt = (
            update(sessions_table)
            .where(sessions_table.c.id == session.id)
            .values(**values)
        )
        async with translate_errors("update session"):
            async with self.engine.begin() as conn:
                result = await conn.execute(stmt)
                check_row_count("update session", result.rowcount)
        return session
