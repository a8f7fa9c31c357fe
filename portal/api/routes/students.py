"""Student record endpoints.

Registry errors are left to propagate; the application turns them into
error responses with the matching status code.
"""

from fastapi import APIRouter

from portal.api.dependencies import StudentRegistryDep
from portal.api.middleware.auth import CallerContextDep
from portal.api.models.students import (
    StudentCountResponse,
    StudentRequest,
    StudentResponse,
)
from portal.observability.logging import get_logger
from portal.registry.models import StudentRecord

logger = get_logger(__name__)

router = APIRouter(prefix="/students")


def _map_record_to_response(record: StudentRecord) -> StudentResponse:
    return StudentResponse(**record.model_dump())


@router.post("", response_model=StudentResponse, status_code=201)
async def register_student(
    request: StudentRequest,
    caller_context: CallerContextDep,
    registry: StudentRegistryDep,
) -> StudentResponse:
    """Register a new student. Owner only.

    The response carries the id assigned to the new student.
    """
    logger.info("register_student_request", caller=caller_context.caller)

    record = await registry.register_student(
        caller_context.caller, request.to_details()
    )
    return _map_record_to_response(record)


@router.get("", response_model=list[StudentResponse])
async def list_students(registry: StudentRegistryDep) -> list[StudentResponse]:
    """List every student slot in id order, deleted slots included."""
    records = await registry.get_all_students()
    return [_map_record_to_response(record) for record in records]


@router.get("/count", response_model=StudentCountResponse)
async def count_students(registry: StudentRegistryDep) -> StudentCountResponse:
    """Number of ids ever allocated, deleted slots included."""
    return StudentCountResponse(count=await registry.get_student_count())


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: int,
    registry: StudentRegistryDep,
) -> StudentResponse:
    """Get an active student by id."""
    record = await registry.get_student(student_id)
    return _map_record_to_response(record)


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: int,
    request: StudentRequest,
    caller_context: CallerContextDep,
    registry: StudentRegistryDep,
) -> StudentResponse:
    """Overwrite a student's details. Owner only.

    Updating a deleted student restores it.
    """
    logger.info(
        "update_student_request",
        caller=caller_context.caller,
        student_id=student_id,
    )

    record = await registry.update_student(
        caller_context.caller, student_id, request.to_details()
    )
    return _map_record_to_response(record)


@router.delete("/{student_id}", response_model=StudentResponse)
async def delete_student(
    student_id: int,
    caller_context: CallerContextDep,
    registry: StudentRegistryDep,
) -> StudentResponse:
    """Soft-delete a student. Owner only.

    Returns the cleared slot.
    """
    logger.info(
        "delete_student_request",
        caller=caller_context.caller,
        student_id=student_id,
    )

    record = await registry.delete_student(caller_context.caller, student_id)
    return _map_record_to_response(record)
