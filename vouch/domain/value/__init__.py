"""Domain value objects."""

from vouch.domain.value.identifiers import InviteId, SessionId
from vouch.domain.value.types import SessionState, ThreePid, ThreePidMedium

__all__ = [
    # Identifiers
    "InviteId",
    "SessionId",
    # Types
    "SessionState",
    "ThreePid",
    "ThreePidMedium",
]
