"""Tests for InMemoryStudentStore."""

import pytest

from portal.registry.models import StudentDetails, StudentRecord
from portal.registry.stores import InMemoryStudentStore
from tests.factories.students import StudentFactory


@pytest.fixture
def store() -> InMemoryStudentStore:
    """Create a fresh store for each test."""
    return InMemoryStudentStore()


class TestAllocation:
    """Tests for id allocation."""

    @pytest.mark.asyncio
    async def test_ids_start_at_one_and_increase(self, store) -> None:
        first = await store.allocate(StudentFactory.details("Alice"))
        second = await store.allocate(StudentFactory.details("Bob"))

        assert first.id == 1
        assert second.id == 2
        assert await store.count() == 2

    @pytest.mark.asyncio
    async def test_allocated_records_are_active(self, store) -> None:
        record = await store.allocate(StudentFactory.details())
        assert record.is_deleted is False


class TestGet:
    """Tests for slot lookup."""

    @pytest.mark.asyncio
    async def test_get_allocated(self, store) -> None:
        await store.allocate(StudentFactory.details("Alice"))
        record = await store.get(1)
        assert record is not None
        assert record.name == "Alice"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("student_id", [0, -1, 2, 1000])
    async def test_get_unallocated_returns_none(self, store, student_id) -> None:
        await store.allocate(StudentFactory.details())
        assert await store.get(student_id) is None


class TestReplace:
    """Tests for overwriting slots."""

    @pytest.mark.asyncio
    async def test_replace_keeps_count(self, store) -> None:
        await store.allocate(StudentFactory.details("Alice"))
        cleared = StudentRecord.from_details(
            1, StudentDetails.cleared(), is_deleted=True
        )

        await store.replace(cleared)

        assert await store.count() == 1
        assert await store.count_active() == 0
        assert await store.get(1) == cleared

    @pytest.mark.asyncio
    async def test_replace_unallocated_raises(self, store) -> None:
        record = StudentRecord.from_details(1, StudentFactory.details())
        with pytest.raises(KeyError):
            await store.replace(record)


class TestListAll:
    """Tests for enumeration."""

    @pytest.mark.asyncio
    async def test_list_in_id_order(self, store) -> None:
        for name in ("Alice", "Bob", "Carol"):
            await store.allocate(StudentFactory.details(name))

        records = await store.list_all()

        assert [r.id for r in records] == [1, 2, 3]
        assert [r.name for r in records] == ["Alice", "Bob", "Carol"]

    @pytest.mark.asyncio
    async def test_list_is_a_copy(self, store) -> None:
        await store.allocate(StudentFactory.details())
        records = await store.list_all()
        records.clear()
        assert await store.count() == 1
