"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseModel):
    """Storage backend configuration.

    The backend kind selects the SQL engine, the path is either a file
    location (sqlite) or a connection string without scheme (postgresql).
    """

    backend: str = "sqlite"
    path: str = "vouch.db"

    # Pool sizing, ignored for sqlite
    pool_size: int = 5
    max_overflow: int = 10


class KeySettings(BaseModel):
    """Signing key store configuration."""

    # ":memory:" keeps keys in process, anything else is a key file path
    path: str = "keys.json"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        STORAGE__BACKEND=postgresql
        STORAGE__PATH=vouch:vouch@localhost:5432/vouch
        KEYS__PATH=/var/lib/vouch/keys.json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__PATH syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    storage: StorageSettings = StorageSettings()
    keys: KeySettings = KeySettings()
    observability: ObservabilitySettings = ObservabilitySettings()
