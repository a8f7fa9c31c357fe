"""Tests for student registry models."""

import pytest
from pydantic import ValidationError

from portal.registry.models import (
    StudentDetails,
    StudentEvent,
    StudentEventType,
    StudentRecord,
)
from tests.factories.students import StudentFactory


class TestStudentDetails:
    """Tests for StudentDetails."""

    def test_accepts_empty_strings_and_zero_date(self) -> None:
        """No content validation beyond types."""
        details = StudentDetails.cleared()
        assert details.name == ""
        assert details.email == ""
        assert details.date_of_birth == 0
        assert details.local_government_area == ""
        assert details.country == ""
        assert details.state == ""

    def test_accepts_huge_date_of_birth(self) -> None:
        """date_of_birth is arbitrary precision."""
        far_future = 2**255 - 1
        details = StudentFactory.details(date_of_birth=far_future)
        assert details.date_of_birth == far_future

    def test_rejects_negative_date_of_birth(self) -> None:
        with pytest.raises(ValidationError):
            StudentFactory.details(date_of_birth=-1)

    @pytest.mark.parametrize("value", [True, "946684800", 946684800.0])
    def test_date_of_birth_is_not_coerced(self, value) -> None:
        with pytest.raises(ValidationError):
            StudentFactory.details(date_of_birth=value)

    def test_is_frozen(self) -> None:
        details = StudentFactory.details()
        with pytest.raises(ValidationError):
            details.name = "Eve"  # type: ignore[misc]


class TestStudentRecord:
    """Tests for StudentRecord."""

    def test_from_details(self) -> None:
        details = StudentFactory.details("Alice")
        record = StudentRecord.from_details(3, details)

        assert record.id == 3
        assert record.is_deleted is False
        assert record.name == "Alice"
        assert record.details() == details

    def test_from_details_accepts_a_record(self) -> None:
        """Only descriptive fields are copied from the source."""
        original = StudentRecord.from_details(1, StudentFactory.details("Alice"))
        copy = StudentRecord.from_details(2, original, is_deleted=True)

        assert copy.id == 2
        assert copy.is_deleted is True
        assert copy.name == "Alice"

    def test_id_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            StudentRecord.from_details(0, StudentFactory.details())


class TestStudentEvent:
    """Tests for StudentEvent."""

    def test_event_type_values(self) -> None:
        assert StudentEventType.REGISTERED.value == "student.registered"
        assert StudentEventType.UPDATED.value == "student.updated"
        assert StudentEventType.DELETED.value == "student.deleted"

    def test_timestamp_defaults_to_utc_now(self) -> None:
        event = StudentEvent(
            sequence=1, event_type=StudentEventType.REGISTERED, student_id=1
        )
        assert event.timestamp.tzinfo is not None
