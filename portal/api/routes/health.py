"""Health check and metrics endpoints."""

import time

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from portal import __version__
from portal.api.dependencies import StudentStoreDep
from portal.api.models.health import ComponentHealth, HealthResponse
from portal.observability.logging import get_logger
from portal.registry.store import StudentStore

logger = get_logger(__name__)

router = APIRouter()


async def _check_student_store(store: StudentStore) -> ComponentHealth:
    """Check the student store by asking it for its slot count."""
    start = time.time()
    try:
        await store.count()
    except Exception as e:
        return ComponentHealth(
            name="student_store",
            status="unhealthy",
            latency_ms=(time.time() - start) * 1000,
            message=str(e),
        )
    return ComponentHealth(
        name="student_store",
        status="healthy",
        latency_ms=(time.time() - start) * 1000,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(store: StudentStoreDep) -> HealthResponse:
    """Check service health status."""
    components = [await _check_student_store(store)]

    overall = "healthy"
    if any(c.status == "unhealthy" for c in components):
        overall = "unhealthy"

    logger.debug("health_check_completed", status=overall)

    return HealthResponse(status=overall, version=__version__, components=components)


async def get_metrics() -> Response:
    """Prometheus metrics in text exposition format.

    Mounted by create_app at the configured metrics path.
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
