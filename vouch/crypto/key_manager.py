"""Signing key management."""

import base64
from typing import Optional

import logfire
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

from vouch.crypto.key_store import KeyStore

DEFAULT_KEY_ID = "ed25519:0"


def _encode(raw: bytes) -> str:
    """Unpadded standard base64."""
    return base64.b64encode(raw).decode("ascii").rstrip("=")


def _decode(value: str) -> bytes:
    return base64.b64decode(value + "=" * (-len(value) % 4))


class KeyManager:
    """Signs data with the server's Ed25519 key.

    The key is loaded from the store on first use, or generated and saved
    when the store does not have it yet.
    """

    def __init__(self, store: KeyStore, key_id: str = DEFAULT_KEY_ID) -> None:
        self.store = store
        self.key_id = key_id
        self._key: Optional[Ed25519PrivateKey] = None

    def _private_key(self) -> Ed25519PrivateKey:
        if self._key is None:
            stored = self.store.get_key(self.key_id)
            if stored is None:
                self._key = Ed25519PrivateKey.generate()
                raw = self._key.private_bytes(
                    Encoding.Raw, PrivateFormat.Raw, NoEncryption()
                )
                self.store.set_key(self.key_id, _encode(raw))
                logfire.info("Signing key generated", key_id=self.key_id)
            else:
                self._key = Ed25519PrivateKey.from_private_bytes(_decode(stored))
        return self._key

    def sign(self, data: bytes) -> bytes:
        """Sign data with the current key."""
        return self._private_key().sign(data)

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Check a signature made with the current key."""
        try:
            self._private_key().public_key().verify(signature, data)
        except InvalidSignature:
            return False
        return True

    def public_key_base64(self) -> str:
        """Public half of the current key, unpadded base64."""
        raw = self._private_key().public_key().public_bytes(
            Encoding.Raw, PublicFormat.Raw
        )
        return _encode(raw)
