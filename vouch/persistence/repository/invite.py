"""SQL implementation of Invite repository."""

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from vouch.domain.model import Invite
from vouch.domain.repository import InviteRepository
from vouch.domain.value import InviteId
from vouch.persistence.error import check_row_count, translate_errors
from vouch.persistence.mappers import invite_to_dict, row_to_invite
from vouch.persistence.tables import invites_table


class SqlInviteRepository(InviteRepository):
    """SQL implementation of InviteRepository."""

    def __init__(self, engine: AsyncEngine) -> None:
        """Initialize repository with the shared engine.

        Args:
            engine: SQLAlchemy async engine
        """
        self.engine = engine

    async def list_invites(self) -> list[Invite]:
        """List every stored invite.

        Rows are fetched completely before the connection is released.

        Returns:
            List of invites
        """
        stmt = select(invites_table)
        async with translate_errors("list invites"):
            async with self.engine.connect() as conn:
                result = await conn.execute(stmt)
                rows = result.mappings().all()
            return [row_to_invite(dict(row)) for row in rows]

    async def insert_invite(self, invite: Invite) -> Invite:
        """Store a new invite.

        Args:
            invite: Invite to store

        Returns:
            Stored invite
        """
        stmt = insert(invites_table).values(**invite_to_dict(invite))
        async with translate_errors("insert invite"):
            async with self.engine.begin() as conn:
                result = await conn.execute(stmt)
                check_row_count("insert invite", result.rowcount)
        return invite

    async def delete_invite(self, invite_id: InviteId) -> None:
        """Delete an invite by ID.

        Args:
            invite_id: Invite ID to delete
        """
        stmt = delete(invites_table).where(invites_table.c.id == invite_id)
        async with translate_errors("delete invite"):
            async with self.engine.begin() as conn:
                result = await conn.execute(stmt)
                check_row_count("delete invite", result.rowcount)
