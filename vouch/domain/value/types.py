"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules such as address normalization.
"""

import re
from enum import Enum

from pydantic import ValidationInfo, field_validator

from vouch.domain.value.common import ValueObject


class ThreePidMedium(str, Enum):
    """Kind of third-party identifier."""

    EMAIL = "email"
    MSISDN = "msisdn"


class SessionState(str, Enum):
    """Validation state of a verification session."""

    PENDING = "pending"
    VALIDATED = "validated"


class ThreePid(ValueObject):
    """Third-party identifier (e-mail address or phone number).

    Addresses are stored in normalized form so that lookups match
    regardless of how the client typed them:
    - email: surrounding whitespace removed, lower-cased
    - msisdn: digits only, international format without the leading '+'
    """

    medium: ThreePidMedium
    address: str

    @field_validator("address")
    @classmethod
    def normalize_address(cls, v: str, info: ValidationInfo) -> str:
        """Normalize the address for its medium."""
        medium = info.data.get("medium")
        if medium == ThreePidMedium.MSISDN:
            v = re.sub(r"[\s+\-.()]", "", v)
            if not v.isdigit():
                raise ValueError("Phone number must contain digits only")
        else:
            v = v.strip().lower()
        if not v:
            raise ValueError("Address cannot be empty")
        return v

    def __str__(self) -> str:
        return f"{self.medium.value}:{self.address}"
