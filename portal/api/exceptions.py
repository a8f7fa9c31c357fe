"""API exception hierarchy for consistent error handling.

All API exceptions inherit from PortalAPIError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses. Registry errors are
translated into this hierarchy with from_registry_error.
"""

from portal.api.models.errors import ErrorCode
from portal.registry.errors import (
    AlreadyDeletedError,
    InvalidIdError,
    RegistryError,
    StudentNotFoundError,
    UnauthorizedError,
)


class PortalAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, student_id: int | None = None) -> None:
        self.message = message
        self.student_id = student_id
        super().__init__(message)


class NotOwnerError(PortalAPIError):
    """Raised when a non-owner attempts a mutating operation."""

    status_code = 403
    error_code = ErrorCode.UNAUTHORIZED


class InvalidStudentIdError(PortalAPIError):
    """Raised when a student id was never allocated."""

    status_code = 404
    error_code = ErrorCode.INVALID_STUDENT_ID


class StudentGoneError(PortalAPIError):
    """Raised when reading a deleted student."""

    status_code = 404
    error_code = ErrorCode.STUDENT_NOT_FOUND


class StudentAlreadyDeletedError(PortalAPIError):
    """Raised when deleting a student twice."""

    status_code = 409
    error_code = ErrorCode.STUDENT_ALREADY_DELETED


_REGISTRY_ERRORS: dict[type[RegistryError], type[PortalAPIError]] = {
    UnauthorizedError: NotOwnerError,
    InvalidIdError: InvalidStudentIdError,
    StudentNotFoundError: StudentGoneError,
    AlreadyDeletedError: StudentAlreadyDeletedError,
}


def from_registry_error(exc: RegistryError) -> PortalAPIError:
    """Translate a registry error into its API counterpart."""
    api_error = _REGISTRY_ERRORS.get(type(exc), PortalAPIError)
    return api_error(exc.message, student_id=exc.student_id)
