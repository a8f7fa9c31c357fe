"""Student registry domain models."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class StudentDetails(BaseModel):
    """Descriptive fields supplied when registering or updating a student.

    Contents are not validated beyond their types: empty strings and a
    zero date of birth are accepted, and date_of_birth has no upper bound.
    date_of_birth must be a real integer; booleans and numeric strings are
    rejected rather than coerced.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Contact email")
    date_of_birth: int = Field(
        ..., ge=0, strict=True, description="Birth timestamp or similar scalar"
    )
    local_government_area: str = Field(..., description="Local government area")
    country: str = Field(..., description="Country")
    state: str = Field(..., description="State or province")

    @classmethod
    def cleared(cls) -> "StudentDetails":
        """Details left behind in a slot after soft deletion."""
        return cls(
            name="",
            email="",
            date_of_birth=0,
            local_government_area="",
            country="",
            state="",
        )


class StudentRecord(StudentDetails):
    """One allocated slot in the registry.

    The id never changes once assigned. Deleted slots keep their id with
    cleared details and is_deleted set.
    """

    id: int = Field(..., ge=1, description="Registry-assigned identifier")
    is_deleted: bool = Field(default=False, description="Soft-delete marker")

    @classmethod
    def from_details(
        cls, student_id: int, details: StudentDetails, *, is_deleted: bool = False
    ) -> "StudentRecord":
        """Build a record for a slot from descriptive details."""
        return cls(
            id=student_id,
            is_deleted=is_deleted,
            **details.model_dump(include=set(StudentDetails.model_fields)),
        )

    def details(self) -> StudentDetails:
        """Return the descriptive fields of this record."""
        return StudentDetails(**self.model_dump(include=set(StudentDetails.model_fields)))


class StudentEventType(str, Enum):
    """Notification types, one per successful mutating operation."""

    REGISTERED = "student.registered"
    UPDATED = "student.updated"
    DELETED = "student.deleted"


class StudentEvent(BaseModel):
    """Notification announcing a change to one student slot."""

    model_config = ConfigDict(frozen=True)

    sequence: int = Field(..., ge=1, description="Position in the event log")
    event_type: StudentEventType = Field(..., description="What happened")
    student_id: int = Field(..., ge=1, description="Affected student")
    timestamp: datetime = Field(default_factory=utc_now, description="Event time")
