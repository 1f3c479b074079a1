"""Verification session repository interface."""

from abc import ABC, abstractmethod

from vouch.domain.model.session import VerificationSession
from vouch.domain.value import SessionId, ThreePid


class SessionRepository(ABC):
    """Repository for VerificationSession entity."""

    @abstractmethod
    async def get_session(self, session_id: SessionId) -> VerificationSession | None:
        """Find a session by ID.

        Args:
            session_id: The session's unique identifier

        Returns:
            The session if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_session(
        self, threepid: ThreePid, secret: str
    ) -> VerificationSession | None:
        """Find the session for a third-party identifier and client secret.

        Args:
            threepid: The identifier being verified
            secret: The client secret

        Returns:
            The session if found, None otherwise

        Raises:
            InternalConsistencyError: If more than one session matches
        """
        pass

    @abstractmethod
    async def insert_session(self, session: VerificationSession) -> VerificationSession:
        """Store a new session.

        Raises:
            StorageInvariantError: If not exactly one row was written
        """
        pass

    @abstractmethod
    async def update_session(self, session: VerificationSession) -> VerificationSession:
        """Replace a stored session, keyed by its ID.

        Raises:
            StorageInvariantError: If not exactly one row was changed
        """
        pass
