"""Verification session entity.

A session tracks one proof-of-ownership attempt for a third-party
identifier: a token is sent to the address and the client proves receipt
by presenting it together with its secret.
"""

from typing import Optional

from pydantic import Field

from vouch.domain.model.common import DomainModel, UtcDatetime, utcnow
from vouch.domain.value import SessionId, SessionState, ThreePid


class VerificationSession(DomainModel):
    """Third-party identifier verification session.

    Business rules:
    - At most one session exists per (threepid, secret) pair
    - Sessions are updated as attempts proceed but never deleted here
    """

    id: SessionId
    threepid: ThreePid
    secret: str  # Client-supplied secret
    token: str  # Verification code sent to the address
    state: SessionState = SessionState.PENDING
    attempt: int = 0  # Client send-attempt counter
    send_count: int = 0  # Notifications actually sent
    server: Optional[str] = None  # Origin server name
    next_link: Optional[str] = None  # Redirect after validation
    created_at: UtcDatetime = Field(default_factory=utcnow)
    last_sent_at: Optional[UtcDatetime] = None
    expires_at: Optional[UtcDatetime] = None
    validated_at: Optional[UtcDatetime] = None

    @property
    def is_validated(self) -> bool:
        return self.state == SessionState.VALIDATED
