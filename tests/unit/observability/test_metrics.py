"""Tests for Prometheus metrics."""

import pytest
from prometheus_client import REGISTRY

from portal.observability.metrics import record_operation, set_slot_counts
from portal.registry import StudentRegistry, UnauthorizedError
from tests.factories.students import OWNER, STRANGER, StudentFactory


def _operation_count(operation: str, outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "portal_operations_total",
        {"operation": operation, "outcome": outcome},
    )
    return value or 0.0


class TestMetricHelpers:
    def test_record_operation(self) -> None:
        before = _operation_count("get_student", "success")
        record_operation("get_student")
        assert _operation_count("get_student", "success") == before + 1

    def test_set_slot_counts(self) -> None:
        set_slot_counts(total=5, active=3)
        assert REGISTRY.get_sample_value("portal_student_slots") == 5
        assert REGISTRY.get_sample_value("portal_active_students") == 3


class TestRegistryMetrics:
    @pytest.mark.asyncio
    async def test_outcomes_are_counted(self) -> None:
        registry = StudentRegistry(owner=OWNER)
        successes = _operation_count("register_student", "success")
        denials = _operation_count("register_student", "UnauthorizedError")

        await registry.register_student(OWNER, StudentFactory.details())
        with pytest.raises(UnauthorizedError):
            await registry.register_student(STRANGER, StudentFactory.details())

        assert _operation_count("register_student", "success") == successes + 1
        assert _operation_count("register_student", "UnauthorizedError") == denials + 1

    @pytest.mark.asyncio
    async def test_slot_gauges_follow_deletes(self) -> None:
        registry = StudentRegistry(owner=OWNER)
        await registry.register_student(OWNER, StudentFactory.details("Alice"))
        await registry.register_student(OWNER, StudentFactory.details("Bob"))
        await registry.delete_student(OWNER, 1)

        assert REGISTRY.get_sample_value("portal_student_slots") == 2
        assert REGISTRY.get_sample_value("portal_active_students") == 1

    @pytest.mark.asyncio
    async def test_reads_are_counted(self) -> None:
        registry = StudentRegistry(owner=OWNER)
        await registry.register_student(OWNER, StudentFactory.details())
        counts = _operation_count("get_student_count", "success")
        listings = _operation_count("get_all_students", "success")

        assert await registry.get_student_count() == 1
        await registry.get_all_students()

        assert _operation_count("get_student_count", "success") == counts + 1
        assert _operation_count("get_all_students", "success") == listings + 1
