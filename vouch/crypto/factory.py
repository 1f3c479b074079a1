"""Construction of key stores and managers from configuration."""

from vouch.config import KeySettings
from vouch.crypto.key_manager import KeyManager
from vouch.crypto.key_store import FileKeyStore, KeyStore, MemoryKeyStore
from vouch.util.error import ConfigurationError

MEMORY_PATH = ":memory:"


def create_key_store(path: str) -> KeyStore:
    """Create the key store for a configured path.

    Args:
        path: ":memory:" for an in-process store, otherwise a key file path

    Returns:
        Key store

    Raises:
        ConfigurationError: If the path is blank or the file is unusable
    """
    if not path or not path.strip():
        raise ConfigurationError("keys.path cannot be empty")
    if path == MEMORY_PATH:
        return MemoryKeyStore()
    return FileKeyStore(path)


def create_key_manager(settings: KeySettings) -> KeyManager:
    """Create the key manager for the configured key store."""
    return KeyManager(create_key_store(settings.path))
