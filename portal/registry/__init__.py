"""Student registry: records, access control and change notifications."""

from portal.registry.errors import (
    AlreadyDeletedError,
    InvalidIdError,
    RegistryError,
    StudentNotFoundError,
    UnauthorizedError,
)
from portal.registry.events import EventListener, StudentEventLog
from portal.registry.guard import AccessGuard
from portal.registry.models import (
    StudentDetails,
    StudentEvent,
    StudentEventType,
    StudentRecord,
)
from portal.registry.service import StudentRegistry
from portal.registry.store import StudentStore
from portal.registry.stores.inmemory import InMemoryStudentStore

__all__ = [
    # Errors
    "RegistryError",
    "UnauthorizedError",
    "InvalidIdError",
    "StudentNotFoundError",
    "AlreadyDeletedError",
    # Models
    "StudentDetails",
    "StudentRecord",
    "StudentEvent",
    "StudentEventType",
    # Components
    "AccessGuard",
    "EventListener",
    "StudentEventLog",
    "StudentRegistry",
    "StudentStore",
    "InMemoryStudentStore",
]
