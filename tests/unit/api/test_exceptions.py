"""Tests for registry error translation."""

import pytest

from portal.api.exceptions import (
    InvalidStudentIdError,
    NotOwnerError,
    PortalAPIError,
    StudentAlreadyDeletedError,
    StudentGoneError,
    from_registry_error,
)
from portal.api.models.errors import ErrorCode
from portal.registry.errors import (
    AlreadyDeletedError,
    InvalidIdError,
    RegistryError,
    StudentNotFoundError,
    UnauthorizedError,
)


@pytest.mark.parametrize(
    ("error", "expected_type", "status_code", "code"),
    [
        (UnauthorizedError("mallory"), NotOwnerError, 403, ErrorCode.UNAUTHORIZED),
        (InvalidIdError(7), InvalidStudentIdError, 404, ErrorCode.INVALID_STUDENT_ID),
        (StudentNotFoundError(7), StudentGoneError, 404, ErrorCode.STUDENT_NOT_FOUND),
        (
            AlreadyDeletedError(7),
            StudentAlreadyDeletedError,
            409,
            ErrorCode.STUDENT_ALREADY_DELETED,
        ),
    ],
)
def test_from_registry_error(error, expected_type, status_code, code) -> None:
    api_error = from_registry_error(error)

    assert isinstance(api_error, expected_type)
    assert api_error.status_code == status_code
    assert api_error.error_code == code
    assert api_error.message == error.message
    assert api_error.student_id == error.student_id


def test_unknown_registry_error_is_internal() -> None:
    api_error = from_registry_error(RegistryError("boom"))

    assert type(api_error) is PortalAPIError
    assert api_error.status_code == 500
    assert api_error.error_code == ErrorCode.INTERNAL_ERROR
