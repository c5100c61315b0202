"""
Error taxonomy shared by the store, the services and the endpoints.

Stores raise ``StoreError`` for any failure of the underlying driver,
services raise ``NotFoundError`` and ``ValidationError``.  Endpoints
translate these into HTTP responses in one place
(``api.errors.raise_http_error``).
"""


class TrackerError(Exception):
    """Base class for all errors raised by the tracker core."""

    pass


class NotFoundError(TrackerError):
    """Raised when a referenced user id does not exist."""

    pass


class StoreError(TrackerError):
    """Raised when a record store operation fails."""

    pass


class ValidationError(TrackerError):
    """Raised when an input value cannot be coerced to its type."""

    pass
