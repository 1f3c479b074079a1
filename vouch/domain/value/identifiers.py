"""Strongly typed identifiers for stored records.

Identifiers are opaque strings chosen by the calling workflow.
"""

from typing import NewType

InviteId = NewType("InviteId", str)
SessionId = NewType("SessionId", str)
