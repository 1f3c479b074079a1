"""Translation of backend failures into domain storage errors.

Every store operation runs inside ``translate_errors`` so that no
SQLAlchemy or driver exception reaches callers.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from vouch.domain.error import BackendIOError, StorageError, StorageInvariantError


def check_row_count(operation: str, affected: int, expected: int = 1) -> None:
    """Raise if a write did not touch exactly the expected number of rows.

    Raises:
        StorageInvariantError: On mismatch
    """
    if affected != expected:
        logfire.error(
            "Unexpected row count",
            operation=operation,
            expected=expected,
            affected=affected,
        )
        raise StorageInvariantError(operation, expected, affected)


@asynccontextmanager
async def translate_errors(operation: str) -> AsyncIterator[None]:
    """Translate backend exceptions raised by a store operation.

    Args:
        operation: Operation name used in error messages and logs

    Raises:
        StorageInvariantError: For integrity (constraint) violations
        BackendIOError: For any other backend or I/O failure, or a stored
            row that no longer maps onto a domain model
    """
    try:
        yield
    except StorageError:
        raise
    except IntegrityError as e:
        logfire.warn("Constraint violation", operation=operation, error=str(e.orig))
        raise StorageInvariantError(operation, 1, 0, detail=str(e.orig)) from e
    except (SQLAlchemyError, OSError) as e:
        logfire.error(
            "Storage backend failure",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise BackendIOError(f"{operation} failed: {e}") from e
    except ValueError as e:
        # Stored row no longer maps onto a domain model (pydantic ValidationError included)
        logfire.error("Corrupt stored record", operation=operation, error=str(e))
        raise BackendIOError(f"{operation} read a corrupt record: {e}") from e
