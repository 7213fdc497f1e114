"""Store-level exceptions.

Services raise these instead of ``HTTPException`` so they stay usable outside
a request. Each class carries the HTTP status the API answers with; the
handler installed by ``create_app`` turns them into ``{"detail": message}``.
"""


class StoreError(Exception):
    """Base class for all store errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    """Bad or missing input."""

    status_code = 400


class Unauthenticated(StoreError):
    """Missing, expired or unreadable bearer token."""

    status_code = 401


class Forbidden(StoreError):
    """Valid token without the required privilege."""

    status_code = 403


class NotFound(StoreError):
    """A requested order, product or cart does not exist."""

    status_code = 404


class Conflict(StoreError):
    status_code = 409


class InternalError(StoreError):
    """Datastore or transactional failure. The message is safe to show."""

    status_code = 500
