"""StudentRegistry: the owner-gated CRUD state machine over a StudentStore.

Slot lifecycle:

    Unallocated --register--> Active --delete--> Deleted --update--> Active

Deleting a Deleted slot fails with AlreadyDeletedError. Updating a Deleted
slot overwrites its details and makes it active again. No transition ever
frees an id.
"""

import asyncio
from collections.abc import Iterator
from contextlib import contextmanager

from portal.observability import metrics
from portal.observability.logging import get_logger
from portal.registry.errors import (
    AlreadyDeletedError,
    InvalidIdError,
    RegistryError,
    StudentNotFoundError,
)
from portal.registry.events import EventListener, StudentEventLog
from portal.registry.guard import AccessGuard
from portal.registry.models import (
    StudentDetails,
    StudentEvent,
    StudentEventType,
    StudentRecord,
)
from portal.registry.store import StudentStore
from portal.registry.stores.inmemory import InMemoryStudentStore

logger = get_logger(__name__)


@contextmanager
def _tracked(operation: str) -> Iterator[None]:
    """Count an operation in metrics under its outcome."""
    try:
        yield
    except RegistryError as exc:
        metrics.record_operation(operation, type(exc).__name__)
        raise
    metrics.record_operation(operation)


class StudentRegistry:
    """Access-controlled registry of student records.

    Mutating operations take the caller identity, check it against the
    owner first, then validate the id, then change the store and record
    exactly one event. They are serialised with a lock so each one is
    applied completely or not at all. Reads are open to anyone.
    """

    def __init__(
        self,
        owner: str,
        store: StudentStore | None = None,
        event_log: StudentEventLog | None = None,
    ) -> None:
        self._guard = AccessGuard(owner)
        self._store = store if store is not None else InMemoryStudentStore()
        self._events = event_log if event_log is not None else StudentEventLog()
        self._lock = asyncio.Lock()

    @property
    def owner(self) -> str:
        return self._guard.owner

    async def register_student(
        self, caller: str, details: StudentDetails
    ) -> StudentRecord:
        """Register a new student and return its record.

        Raises:
            UnauthorizedError: caller is not the owner
        """
        with _tracked("register_student"):
            async with self._lock:
                self._guard.check_owner(caller)
                record = await self._store.allocate(details)
                event = self._events.append(StudentEventType.REGISTERED, record.id)
                await self._publish_counts()

        logger.info("student_registered", student_id=record.id)
        await self._events.dispatch(event)
        return record

    async def get_student(self, student_id: int) -> StudentRecord:
        """Get an active student by id.

        Raises:
            InvalidIdError: id was never allocated
            StudentNotFoundError: the slot has been deleted
        """
        with _tracked("get_student"):
            record = await self._require_slot(student_id)
            if record.is_deleted:
                raise StudentNotFoundError(student_id)
        return record

    async def get_all_students(self) -> list[StudentRecord]:
        """List every slot in id order.

        Deleted slots are included with cleared details and is_deleted set,
        unlike get_student, which refuses them.
        """
        with _tracked("get_all_students"):
            return await self._store.list_all()

    async def update_student(
        self, caller: str, student_id: int, details: StudentDetails
    ) -> StudentRecord:
        """Overwrite a student's details.

        The deleted flag is not checked; updating a deleted slot restores it.

        Raises:
            UnauthorizedError: caller is not the owner
            InvalidIdError: id was never allocated
        """
        with _tracked("update_student"):
            async with self._lock:
                self._guard.check_owner(caller)
                previous = await self._require_slot(student_id)
                record = StudentRecord.from_details(student_id, details)
                await self._store.replace(record)
                event = self._events.append(StudentEventType.UPDATED, student_id)
                await self._publish_counts()

        logger.info(
            "student_updated",
            student_id=student_id,
            restored=previous.is_deleted,
        )
        await self._events.dispatch(event)
        return record

    async def delete_student(self, caller: str, student_id: int) -> StudentRecord:
        """Soft-delete a student, clearing its details but keeping its id.

        Raises:
            UnauthorizedError: caller is not the owner
            InvalidIdError: id was never allocated
            AlreadyDeletedError: the slot is already deleted
        """
        with _tracked("delete_student"):
            async with self._lock:
                self._guard.check_owner(caller)
                current = await self._require_slot(student_id)
                if current.is_deleted:
                    raise AlreadyDeletedError(student_id)
                record = StudentRecord.from_details(
                    student_id, StudentDetails.cleared(), is_deleted=True
                )
                await self._store.replace(record)
                event = self._events.append(StudentEventType.DELETED, student_id)
                await self._publish_counts()

        logger.info("student_deleted", student_id=student_id)
        await self._events.dispatch(event)
        return record

    async def get_student_count(self) -> int:
        """Number of ids ever allocated, deleted slots included."""
        with _tracked("get_student_count"):
            return await self._store.count()

    def list_events(self) -> list[StudentEvent]:
        """Return every notification emitted so far, oldest first."""
        return self._events.events()

    def subscribe(self, listener: EventListener, pattern: str = "*") -> None:
        """Register an async listener for future notifications."""
        self._events.subscribe(pattern, listener)

    async def _require_slot(self, student_id: int) -> StudentRecord:
        record = await self._store.get(student_id)
        if record is None:
            raise InvalidIdError(student_id)
        return record

    async def _publish_counts(self) -> None:
        metrics.set_slot_counts(
            await self._store.count(), await self._store.count_active()
        )
