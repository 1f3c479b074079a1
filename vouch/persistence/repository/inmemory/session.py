"""In-memory verification session repository for testing."""

from typing import Optional

from vouch.domain.model.session import VerificationSession
from vouch.domain.repository.session import SessionRepository
from vouch.domain.value import SessionId, ThreePid
from vouch.domain.error import InternalConsistencyError
from vouch.persistence.error import check_row_count


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self) -> None:
        self._sessions: dict[SessionId, VerificationSession] = {}

    async def get_session(self, session_id: SessionId) -> Optional[VerificationSession]:
        """Find a session by ID."""
        return self._sessions.get(session_id)

    async def find_session(
        self, threepid: ThreePid, secret: str
    ) -> Optional[VerificationSession]:
        """Find the session for a third-party identifier and secret."""
        matches = [
            session
            for session in self._sessions.values()
            if session.threepid == threepid and session.secret == secret
        ]
        if len(matches) > 1:
            raise InternalConsistencyError(f"3PID session {threepid}", len(matches))
        return matches[0] if matches else None

    async def insert_session(self, session: VerificationSession) -> VerificationSession:
        """Store a new session."""
        check_row_count("insert session", 0 if session.id in self._sessions else 1)
        self._sessions[session.id] = session
        return session

    async def update_session(self, session: VerificationSession) -> VerificationSession:
        """Replace a stored session."""
        check_row_count("update session", 1 if session.id in self._sessions else 0)
        self._sessions[session.id] = session
        return session
