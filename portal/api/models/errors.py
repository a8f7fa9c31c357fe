"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in error bodies."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed (malformed JSON, missing fields, etc.)."""

    UNAUTHORIZED = "UNAUTHORIZED"
    """The caller is authenticated but is not the registry owner."""

    INVALID_STUDENT_ID = "INVALID_STUDENT_ID"
    """The student id was never allocated."""

    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    """The student id is allocated but the student has been deleted."""

    STUDENT_ALREADY_DELETED = "STUDENT_ALREADY_DELETED"
    """The student was already deleted."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error information for validation failures."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    message: str
    details: list[ErrorDetail] | None = None
    student_id: int | None = None


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {
            "error": {
                "code": "STUDENT_NOT_FOUND",
                "message": "Student not found",
                "student_id": 1
            }
        }
    """

    error: ErrorBody
