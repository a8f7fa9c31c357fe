"""Request and response models for student endpoints."""

from datetime import datetime

from pydantic import BaseModel

from portal.registry.models import StudentDetails, StudentEventType


class StudentRequest(StudentDetails):
    """Request body for registering or updating a student."""

    def to_details(self) -> StudentDetails:
        return StudentDetails(**self.model_dump())


class StudentResponse(BaseModel):
    """One student slot as returned by the API."""

    id: int
    name: str
    email: str
    date_of_birth: int
    local_government_area: str
    country: str
    state: str
    is_deleted: bool


class StudentCountResponse(BaseModel):
    """Number of ids ever allocated."""

    count: int


class OwnerResponse(BaseModel):
    """Identity of the registry owner."""

    owner: str


class StudentEventResponse(BaseModel):
    """One entry of the notification log."""

    sequence: int
    event_type: StudentEventType
    student_id: int
    timestamp: datetime
