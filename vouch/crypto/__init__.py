"""Signing keys and their stores."""

from vouch.crypto.factory import MEMORY_PATH, create_key_manager, create_key_store
from vouch.crypto.key_manager import KeyManager
from vouch.crypto.key_store import FileKeyStore, KeyStore, MemoryKeyStore

__all__ = [
    "MEMORY_PATH",
    "FileKeyStore",
    "KeyManager",
    "KeyStore",
    "MemoryKeyStore",
    "create_key_manager",
    "create_key_store",
]
