"""Student stores."""

from portal.registry.store import StudentStore
from portal.registry.stores.inmemory import InMemoryStudentStore

__all__ = [
    "StudentStore",
    "InMemoryStudentStore",
]
