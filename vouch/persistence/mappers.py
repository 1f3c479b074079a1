"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so mapping is explicit, one
field at a time, rather than through an ORM. Timestamps are normalized
to UTC by the models themselves, so backends that drop the zone (sqlite)
need no special handling here.
"""

from typing import Any, Dict

from vouch.domain.model import Invite, TransactionRecord, VerificationSession
from vouch.domain.value import (
    InviteId,
    SessionId,
    SessionState,
    ThreePid,
    ThreePidMedium,
)


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(row["id"]),
        threepid=ThreePid(medium=ThreePidMedium(row["medium"]), address=row["address"]),
        room_id=row["room_id"],
        sender=row["sender"],
        properties=dict(row["properties"] or {}),
        created_at=row["created_at"],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dictionary for database insertion
    """
    return {
        "id": invite.id,
        "medium": invite.threepid.medium.value,
        "address": invite.threepid.address,
        "room_id": invite.room_id,
        "sender": invite.sender,
        "properties": dict(invite.properties),
        "created_at": invite.created_at,
    }


def row_to_session(row: Dict[str, Any]) -> VerificationSession:
    """Convert database row to VerificationSession domain model."""
    return VerificationSession(
        id=SessionId(row["id"]),
        threepid=ThreePid(medium=ThreePidMedium(row["medium"]), address=row["address"]),
        secret=row["secret"],
        token=row["token"],
        state=SessionState(row["state"]),
        attempt=row["attempt"],
        send_count=row["send_count"],
        server=row.get("server"),
        next_link=row.get("next_link"),
        created_at=row["created_at"],
        last_sent_at=row.get("last_sent_at"),
        expires_at=row.get("expires_at"),
        validated_at=row.get("validated_at"),
    )


def session_to_dict(session: VerificationSession) -> Dict[str, Any]:
    """Convert VerificationSession domain model to database dict."""
    return {
        "id": session.id,
        "medium": session.threepid.medium.value,
        "address": session.threepid.address,
        "secret": session.secret,
        "token": session.token,
        "state": session.state.value,
        "attempt": session.attempt,
        "send_count": session.send_count,
        "server": session.server,
        "next_link": session.next_link,
        "created_at": session.created_at,
        "last_sent_at": session.last_sent_at,
        "expires_at": session.expires_at,
        "validated_at": session.validated_at,
    }


def row_to_transaction(row: Dict[str, Any]) -> TransactionRecord:
    """Convert database row to TransactionRecord domain model."""
    return TransactionRecord(
        localpart=row["localpart"],
        transaction_id=row["transaction_id"],
        completed_at=row["completed_at"],
        result=row["result"],
    )


def transaction_to_dict(record: TransactionRecord) -> Dict[str, Any]:
    """Convert TransactionRecord domain model to database dict."""
    return {
        "localpart": record.localpart,
        "transaction_id": record.transaction_id,
        "completed_at": record.completed_at,
        "result": record.result,
    }
