"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire

from vouch.domain.model import Invite, VerificationSession
from vouch.domain.value import InviteId, SessionId, SessionState, ThreePid, ThreePidMedium

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

T0 = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)


def make_invite(invite_id: str = "inv-1", address: str = "bob@example.com") -> Invite:
    """Helper building an e-mail invite with fixed timestamps."""
    return Invite(
        id=InviteId(invite_id),
        threepid=ThreePid(medium=ThreePidMedium.EMAIL, address=address),
        room_id="!room:example.org",
        sender="@alice:example.org",
        properties={"room_name": "Lobby", "sender_display_name": "Alice"},
        created_at=T0,
    )


def make_session(
    session_id: str = "s1",
    address: str = "a@example.com",
    secret: str = "xyz",
    state: SessionState = SessionState.PENDING,
) -> VerificationSession:
    """Helper building a pending e-mail verification session."""
    return VerificationSession(
        id=SessionId(session_id),
        threepid=ThreePid(medium=ThreePidMedium.EMAIL, address=address),
        secret=secret,
        token="123456",
        state=state,
        attempt=1,
        send_count=1,
        server="example.org",
        created_at=T0,
        last_sent_at=T0,
        expires_at=T0 + timedelta(hours=24),
    )
