"""Key stores for signing keys.

Keys are kept as base64 strings indexed by key ID. The memory variant is
meant for tests and throwaway servers; the file variant persists a JSON
object and is the default.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import logfire

from vouch.util.error import ConfigurationError


class KeyStore(ABC):
    """Storage for private signing keys."""

    @abstractmethod
    def has_key(self, key_id: str) -> bool:
        pass

    @abstractmethod
    def get_key(self, key_id: str) -> Optional[str]:
        """Return the base64 key material for an ID, or None."""
        pass

    @abstractmethod
    def set_key(self, key_id: str, key: str) -> None:
        pass

    @abstractmethod
    def list_keys(self) -> list[str]:
        pass


class MemoryKeyStore(KeyStore):
    """Key store living only in process memory."""

    def __init__(self) -> None:
        self._keys: dict[str, str] = {}

    def has_key(self, key_id: str) -> bool:
        return key_id in self._keys

    def get_key(self, key_id: str) -> Optional[str]:
        return self._keys.get(key_id)

    def set_key(self, key_id: str, key: str) -> None:
        self._keys[key_id] = key

    def list_keys(self) -> list[str]:
        return list(self._keys)


class FileKeyStore(KeyStore):
    """Key store persisted as a JSON object in a single file.

    A missing file is created empty; an existing file is never truncated.
    An empty file is an empty store.
    """

    def __init__(self, path: str | Path) -> None:
        """Open the key file, creating it if absent.

        Args:
            path: Key file location

        Raises:
            ConfigurationError: If the file cannot be created or parsed
        """
        self.path = Path(path)
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
                logfire.info("Key file created", path=str(self.path))
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot open key file {self.path}: {e}") from e

        self._keys = self._parse(content)

    def _parse(self, content: str) -> dict[str, str]:
        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid key file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid key file {self.path}: expected an object")
        return {str(k): str(v) for k, v in data.items()}

    def has_key(self, key_id: str) -> bool:
        return key_id in self._keys

    def get_key(self, key_id: str) -> Optional[str]:
        return self._keys.get(key_id)

    def set_key(self, key_id: str, key: str) -> None:
        self._keys[key_id] = key
        self.path.write_text(json.dumps(self._keys, indent=2), encoding="utf-8")

    def list_keys(self) -> list[str]:
        return list(self._keys)
