"""Database connection and schema bootstrap.

Provides the async engine (connection pool) for the configured backend and
creates missing tables on startup.
"""

from sqlalchemy import Table
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, NoSuchModuleError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from vouch.persistence.error import translate_errors
from vouch.util.error import ConfigurationError

# Backend kind -> async SQLAlchemy dialect+driver
BACKEND_DRIVERS: dict[str, str] = {
    "sqlite": "sqlite+aiosqlite",
    "postgresql": "postgresql+asyncpg",
    "postgres": "postgresql+asyncpg",
}

SQLITE_MEMORY = ":memory:"


def build_database_url(backend: str, path: str) -> str:
    """Build a SQLAlchemy URL from a backend kind and a path.

    No I/O is performed.

    Args:
        backend: Backend kind, e.g. "sqlite" or "postgresql"
        path: File path for sqlite, connection string for networked backends

    Returns:
        Database URL for the async driver

    Raises:
        ConfigurationError: If either value is blank, the backend is unknown
            or the resulting URL is malformed
    """
    if not backend or not backend.strip():
        raise ConfigurationError("storage.backend cannot be empty")
    if not path or not path.strip():
        raise ConfigurationError("Storage destination cannot be empty")

    backend = backend.strip().lower()
    path = path.strip()

    driver = BACKEND_DRIVERS.get(backend)
    if driver is None:
        raise ConfigurationError(
            f"Unsupported storage backend '{backend}', "
            f"expected one of {sorted(BACKEND_DRIVERS)}"
        )

    if backend == "sqlite":
        url = f"{driver}:///{path}"
    else:
        # Accept both "user:pw@host/db" and "//user:pw@host/db"
        url = f"{driver}://{path.removeprefix('//')}"

    try:
        make_url(url)
    except (ArgumentError, ValueError) as e:
        raise ConfigurationError(f"Malformed storage path for {backend}: {e}") from e

    return url


def create_engine(
    backend: str,
    path: str,
    *,
    echo: bool = False,
    pool_size: int = 5,
    max_overflow: int = 10,
) -> AsyncEngine:
    """Create async database engine.

    Connections are opened lazily, so this does not touch the backend.

    Args:
        backend: Backend kind
        path: File path or connection string
        echo: Log SQL statements
        pool_size: Connection pool size (networked backends only)
        max_overflow: Max connections beyond pool_size (networked backends only)

    Returns:
        Configured async engine

    Raises:
        ConfigurationError: If the descriptor is invalid or its driver is missing
    """
    url = build_database_url(backend, path)

    kwargs: dict = {"echo": echo}
    if url.startswith("sqlite"):
        if path.strip() == SQLITE_MEMORY:
            # Every connection to :memory: is a new database, share one
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs.update(
            pool_pre_ping=True,  # Verify connections before using
            pool_size=pool_size,
            max_overflow=max_overflow,
        )

    try:
        return create_async_engine(url, **kwargs)
    except (NoSuchModuleError, ImportError) as e:
        raise ConfigurationError(f"No driver available for '{backend}': {e}") from e
    except ArgumentError as e:
        raise ConfigurationError(f"Invalid storage configuration: {e}") from e


async def ensure_schema(engine: AsyncEngine, table: Table) -> None:
    """Create a table and its indexes if they do not exist yet.

    Idempotent, never drops or alters existing tables.

    Args:
        engine: Database engine
        table: Table definition

    Raises:
        BackendIOError: If the backend cannot be reached
    """
    async with translate_errors(f"create table {table.name}"):
        async with engine.begin() as conn:
            await conn.run_sync(table.create, checkfirst=True)
