"""Dependency injection for API routes.

Provides the settings and the shared StudentRegistry. Both are created
once and can be overridden in tests through app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends

from portal.config import get_settings
from portal.config.settings import Settings
from portal.observability.logging import get_logger
from portal.registry.service import StudentRegistry
from portal.registry.store import StudentStore
from portal.registry.stores.inmemory import InMemoryStudentStore

logger = get_logger(__name__)

_student_store: StudentStore | None = None
_registry: StudentRegistry | None = None

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_student_store(settings: SettingsDep) -> StudentStore:
    """Get the StudentStore for the configured backend."""
    global _student_store
    if _student_store is None:
        _student_store = InMemoryStudentStore()
        logger.info("student_store_initialized", store_type=settings.registry.backend)
    return _student_store


StudentStoreDep = Annotated[StudentStore, Depends(get_student_store)]


def get_registry(settings: SettingsDep, store: StudentStoreDep) -> StudentRegistry:
    """Get the StudentRegistry, owned by the configured principal."""
    global _registry
    if _registry is None:
        _registry = StudentRegistry(owner=settings.registry.owner, store=store)
        logger.info("student_registry_initialized", owner=settings.registry.owner)
    return _registry


StudentRegistryDep = Annotated[StudentRegistry, Depends(get_registry)]


def reset_dependencies() -> None:
    """Drop cached instances so the next request builds fresh ones."""
    global _student_store, _registry
    _student_store = None
    _registry = None
    get_settings.cache_clear()
