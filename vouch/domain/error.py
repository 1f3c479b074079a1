"""Domain layer errors.

Storage implementations report failures exclusively through these types.
"""


class StorageError(Exception):
    """Base storage error."""

    pass


class StorageInvariantError(StorageError):
    """A write affected an unexpected number of rows.

    Constraint violations (such as a duplicate key) are reported as a write
    that affected zero rows.
    """

    def __init__(self, operation: str, expected: int, affected: int, detail: str = ""):
        self.operation = operation
        self.expected = expected
        self.affected = affected
        message = (
            f"Unexpected row count after {operation}: "
            f"expected {expected}, got {affected}"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InternalConsistencyError(StorageError):
    """A lookup assumed unique returned more than one row."""

    def __init__(self, what: str, matches: int):
        self.matches = matches
        super().__init__(f"Lookup for {what} returned {matches} results")


class BackendIOError(StorageError):
    """Connectivity or I/O failure reported by the backend."""

    pass
