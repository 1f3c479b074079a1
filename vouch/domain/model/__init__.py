"""Domain model entities."""

from vouch.domain.model.invite import Invite
from vouch.domain.model.session import VerificationSession
from vouch.domain.model.transaction import TransactionRecord

__all__ = [
    "Invite",
    "TransactionRecord",
    "VerificationSession",
]
