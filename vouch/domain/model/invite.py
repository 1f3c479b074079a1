"""Invite entity.

An invite is issued for a third-party identifier that is not yet bound to
an account. It is consumed (deleted) once the identifier registers, or
deleted when revoked.
"""

from pydantic import Field

from vouch.domain.model.common import DomainModel, UtcDatetime, utcnow
from vouch.domain.value import InviteId, ThreePid


class Invite(DomainModel):
    """Pending third-party identifier invite.

    Business rules:
    - The id is globally unique
    - Invites are never updated, only created, listed and deleted
    """

    id: InviteId
    threepid: ThreePid
    room_id: str  # Target the invitee will join
    sender: str  # Reference of the inviting user
    properties: dict[str, str] = Field(default_factory=dict)  # Opaque metadata
    created_at: UtcDatetime = Field(default_factory=utcnow)
