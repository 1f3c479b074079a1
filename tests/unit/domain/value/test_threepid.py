"""Unit tests for the ThreePid value object."""

import pytest
from pydantic import ValidationError

from vouch.domain.value import ThreePid, ThreePidMedium


class TestThreePidNormalization:
    """Addresses are normalized per medium."""

    def test_email_is_trimmed_and_lowercased(self):
        threepid = ThreePid(medium=ThreePidMedium.EMAIL, address="  Alice@Example.COM ")

        assert threepid.address == "alice@example.com"

    def test_msisdn_keeps_digits_only(self):
        threepid = ThreePid(medium=ThreePidMedium.MSISDN, address="+1 (555) 010-0000")

        assert threepid.address == "15550100000"

    def test_medium_accepts_plain_string(self):
        threepid = ThreePid(medium="email", address="a@example.com")

        assert threepid.medium == ThreePidMedium.EMAIL
        assert str(threepid) == "email:a@example.com"

    def test_normalized_addresses_compare_equal(self):
        assert ThreePid(medium="email", address="A@example.com") == ThreePid(
            medium="email", address="a@example.com"
        )

    def test_msisdn_with_letters_is_rejected(self):
        with pytest.raises(ValidationError):
            ThreePid(medium=ThreePidMedium.MSISDN, address="call-me-maybe")

    def test_blank_address_is_rejected(self):
        with pytest.raises(ValidationError):
            ThreePid(medium=ThreePidMedium.EMAIL, address="   ")

    def test_unknown_medium_is_rejected(self):
        with pytest.raises(ValidationError):
            ThreePid(medium="carrier-pigeon", address="coo")
