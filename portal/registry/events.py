"""Ordered student event log with listener dispatch.

Events are appended to the log synchronously so their order matches the
order of the operations that produced them. Listeners are dispatched
afterwards and may be registered for every event ("*"), for a category
("student.*") or for one exact type ("student.deleted").
"""

import asyncio
from collections import defaultdict
from typing import Protocol

from portal.observability.logging import get_logger
from portal.registry.models import StudentEvent, StudentEventType

logger = get_logger(__name__)


class EventListener(Protocol):
    """Async callable that receives a StudentEvent."""

    async def __call__(self, event: StudentEvent) -> None:
        ...


class StudentEventLog:
    """Append-only history of student events plus listener routing."""

    def __init__(self) -> None:
        self._events: list[StudentEvent] = []
        self._listeners: dict[str, list[EventListener]] = defaultdict(list)

    def append(self, event_type: StudentEventType, student_id: int) -> StudentEvent:
        """Record a new event at the end of the log."""
        event = StudentEvent(
            sequence=len(self._events) + 1,
            event_type=event_type,
            student_id=student_id,
        )
        self._events.append(event)
        logger.debug(
            "student_event_recorded",
            event_type=event_type.value,
            student_id=student_id,
            sequence=event.sequence,
        )
        return event

    def events(self) -> list[StudentEvent]:
        """Return all events in the order they were recorded."""
        return list(self._events)

    def subscribe(self, pattern: str, listener: EventListener) -> None:
        """Register a listener for events matching a pattern."""
        self._listeners[pattern].append(listener)
        logger.debug(
            "event_listener_registered",
            pattern=pattern,
            total_listeners=len(self._listeners[pattern]),
        )

    def unsubscribe(self, pattern: str, listener: EventListener) -> None:
        """Remove a listener previously registered for a pattern."""
        try:
            self._listeners[pattern].remove(listener)
        except ValueError:
            logger.warning("event_listener_not_found", pattern=pattern)

    async def dispatch(self, event: StudentEvent) -> None:
        """Deliver an event to every matching listener.

        Listener failures are logged and never propagate to the caller.
        """
        listeners = [
            listener
            for pattern, registered in self._listeners.items()
            if _matches(event.event_type.value, pattern)
            for listener in registered
        ]
        if not listeners:
            return

        await asyncio.gather(
            *(self._deliver(listener, event) for listener in listeners)
        )

    async def _deliver(self, listener: EventListener, event: StudentEvent) -> None:
        try:
            await listener(event)
        except Exception as e:
            logger.error(
                "event_listener_failed",
                event_type=event.event_type.value,
                student_id=event.student_id,
                error=str(e),
                exc_info=True,
            )


def _matches(event_type: str, pattern: str) -> bool:
    if pattern == "*" or pattern == event_type:
        return True
    if pattern.endswith(".*"):
        return event_type.startswith(pattern[:-1])
    return False
