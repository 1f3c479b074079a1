"""In-memory invite repository for testing."""

from vouch.domain.model.invite import Invite
from vouch.domain.repository.invite import InviteRepository
from vouch.domain.value import InviteId
from vouch.persistence.error import check_row_count


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: dict[InviteId, Invite] = {}

    async def list_invites(self) -> list[Invite]:
        """List every stored invite."""
        return list(self._invites.values())

    async def insert_invite(self, invite: Invite) -> Invite:
        """Store a new invite.

        Raises:
            StorageInvariantError: If the id is already taken
        """
        affected = 0 if invite.id in self._invites else 1
        check_row_count("insert invite", affected)
        self._invites[invite.id] = invite
        return invite

    async def delete_invite(self, invite_id: InviteId) -> None:
        """Delete an invite by ID."""
        check_row_count("delete invite", 1 if invite_id in self._invites else 0)
        del self._invites[invite_id]
