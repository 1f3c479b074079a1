"""Invite repository interface."""

from abc import ABC, abstractmethod

from vouch.domain.model.invite import Invite
from vouch.domain.value import InviteId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Invites are create/read/delete only.
    """

    @abstractmethod
    async def list_invites(self) -> list[Invite]:
        """List every stored invite.

        Returns:
            Fully materialized list of invites, in no particular order
        """
        pass

    @abstractmethod
    async def insert_invite(self, invite: Invite) -> Invite:
        """Store a new invite.

        Args:
            invite: The invite to store

        Returns:
            The stored invite

        Raises:
            StorageInvariantError: If not exactly one row was written,
                including when the id already exists
        """
        pass

    @abstractmethod
    async def delete_invite(self, invite_id: InviteId) -> None:
        """Delete an invite.

        Deleting an unknown invite is a caller bug, not a no-op.

        Args:
            invite_id: The invite's unique identifier

        Raises:
            StorageInvariantError: If not exactly one row was removed
        """
        pass
