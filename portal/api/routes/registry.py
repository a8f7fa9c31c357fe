"""Registry-level endpoints: owner identity and the notification log."""

from fastapi import APIRouter

from portal.api.dependencies import StudentRegistryDep
from portal.api.models.students import OwnerResponse, StudentEventResponse

router = APIRouter()


@router.get("/owner", response_model=OwnerResponse)
async def get_owner(registry: StudentRegistryDep) -> OwnerResponse:
    """Identity of the principal allowed to change records."""
    return OwnerResponse(owner=registry.owner)


@router.get("/events", response_model=list[StudentEventResponse])
async def list_events(registry: StudentRegistryDep) -> list[StudentEventResponse]:
    """Every notification emitted so far, oldest first."""
    return [
        StudentEventResponse(**event.model_dump())
        for event in registry.list_events()
    ]
