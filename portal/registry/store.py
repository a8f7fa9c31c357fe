"""StudentStore abstract interface."""

from abc import ABC, abstractmethod

from portal.registry.models import StudentDetails, StudentRecord


class StudentStore(ABC):
    """Abstract interface for student slot storage.

    Slots are numbered from 1 in allocation order and are never removed.
    Access control and state transitions live in StudentRegistry; stores
    only keep slots.
    """

    @abstractmethod
    async def allocate(self, details: StudentDetails) -> StudentRecord:
        """Allocate the next id and store an active record in it."""
        pass

    @abstractmethod
    async def get(self, student_id: int) -> StudentRecord | None:
        """Get the slot for an id, or None if it was never allocated."""
        pass

    @abstractmethod
    async def replace(self, record: StudentRecord) -> None:
        """Overwrite an allocated slot with a new record."""
        pass

    @abstractmethod
    async def list_all(self) -> list[StudentRecord]:
        """List every allocated slot in id order, deleted ones included."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of slots ever allocated."""
        pass

    @abstractmethod
    async def count_active(self) -> int:
        """Number of slots that are not soft-deleted."""
        pass
