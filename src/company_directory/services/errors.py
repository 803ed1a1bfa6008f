"""Error kinds raised by the directory core.

Every error carries a stable ``kind`` string and the HTTP status the API layer
answers with, so callers can tell the conditions apart without matching on
messages.
"""

from __future__ import annotations


class DirectoryError(Exception):
    """Base class for all errors raised by the directory core."""

    kind: str = "error"
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(DirectoryError):
    """Raised when a caller violates an operation's input contract."""

    kind = "invalid_input"
    status_code = 422


class NotFound(DirectoryError):
    """Raised when a Company, Position or Request lookup misses."""

    kind = "not_found"
    status_code = 404

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.key = key


class Forbidden(DirectoryError):
    """Raised when the acting user does not own the company."""

    kind = "forbidden"
    status_code = 403


class Conflict(DirectoryError):
    """Raised when a write loses against a concurrent or existing record."""

    kind = "conflict"
    status_code = 409


class SlugTaken(Conflict):
    """Raised by a conditional write when the slug candidate is already in use."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"slug '{slug}' is already taken")
        self.slug = slug


class NotificationUnavailable(DirectoryError):
    """Raised when the target user's notification bucket does not exist."""

    kind = "notification_unavailable"
    status_code = 503

    def __init__(self, key: str) -> None:
        super().__init__("there is a problem in sending notification for user")
        self.key = key


class StoreUnavailable(DirectoryError):
    """Raised when a backing store fails with an I/O or driver error."""

    kind = "store_unavailable"
    status_code = 503


class StoreTimeout(StoreUnavailable):
    """Raised when a store call exceeds the configured timeout."""

    kind = "store_timeout"
    status_code = 504
