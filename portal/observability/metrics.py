"""Prometheus metrics for the student portal."""

from prometheus_client import Counter, Gauge

OPERATIONS = Counter(
    "portal_operations_total",
    "Portal operations by outcome",
    labelnames=["operation", "outcome"],
)

STUDENT_SLOTS = Gauge(
    "portal_student_slots",
    "Number of student ids ever allocated, deleted slots included",
)

ACTIVE_STUDENTS = Gauge(
    "portal_active_students",
    "Number of student slots that are not soft-deleted",
)


def record_operation(operation: str, outcome: str = "success") -> None:
    """Count one portal operation.

    Args:
        operation: Operation name, e.g. "register_student"
        outcome: "success" or the name of the error raised
    """
    OPERATIONS.labels(operation=operation, outcome=outcome).inc()


def set_slot_counts(total: int, active: int) -> None:
    """Publish the current slot totals."""
    STUDENT_SLOTS.set(total)
    ACTIVE_STUDENTS.set(active)
