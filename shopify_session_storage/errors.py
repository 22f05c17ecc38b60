"""Store error hierarchy for session storage backends.

Backends wrap driver-specific exceptions in one of these so callers only
ever need to handle ``StoreError``.
"""


class StoreError(Exception):
    """Base exception for all session storage errors."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConnectionError(StoreError):
    """Raised when the database cannot be reached or refuses the credentials.

    Fatal to readiness: every pending and later operation re-raises it.
    """

    pass


class SchemaError(StoreError):
    """Raised when the session table cannot be checked or created.

    Fatal to readiness, like ``ConnectionError``.
    """

    pass


class QueryError(StoreError):
    """Raised when a single store/load/delete statement fails.

    Examples:
        - Not-null or type violation on insert
        - Connection dropped mid-statement

    Only the caller of the failing operation sees it; the connection
    remains usable for other operations.
    """

    pass
