"""Error taxonomy for the organization service.

Every error carries the HTTP status it maps to and the message returned to
the caller in the ``{"message": ...}`` body.
"""

from fastapi import status

INTERNAL_ERROR_MESSAGE = "internal server error"


class ServiceError(Exception):
    """Base class for errors surfaced to HTTP callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Client-caused error: malformed body, bad email or malformed identifier."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """Referenced resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class UserNotFoundError(NotFoundError):
    """Creator user is absent.

    Reported as 400 rather than 404: the request references a user that
    must exist before an organization can be created for it.
    """

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "user with this email does not exist") -> None:
        super().__init__(message)


class InternalError(ServiceError):
    """Unclassified failure; the message never carries internal details."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)


class StoreError(Exception):
    """Raised by document store backends when the underlying database fails."""
