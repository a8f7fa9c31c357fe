"""In-memory implementation of StudentStore."""

from portal.registry.models import StudentDetails, StudentRecord
from portal.registry.store import StudentStore


class InMemoryStudentStore(StudentStore):
    """List-backed arena of student slots.

    Slot n lives at index n - 1, so the next id is always len + 1.
    """

    def __init__(self) -> None:
        self._slots: list[StudentRecord] = []

    async def allocate(self, details: StudentDetails) -> StudentRecord:
        record = StudentRecord.from_details(len(self._slots) + 1, details)
        self._slots.append(record)
        return record

    async def get(self, student_id: int) -> StudentRecord | None:
        if 1 <= student_id <= len(self._slots):
            return self._slots[student_id - 1]
        return None

    async def replace(self, record: StudentRecord) -> None:
        if not 1 <= record.id <= len(self._slots):
            raise KeyError(f"Student slot {record.id} is not allocated")
        self._slots[record.id - 1] = record

    async def list_all(self) -> list[StudentRecord]:
        return list(self._slots)

    async def count(self) -> int:
        return len(self._slots)

    async def count_active(self) -> int:
        return sum(1 for record in self._slots if not record.is_deleted)
