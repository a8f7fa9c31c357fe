"""API route registration."""

from fastapi import APIRouter, FastAPI

from portal.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all routes."""
    router = APIRouter(prefix="/v1")

    from portal.api.routes.registry import router as registry_router
    from portal.api.routes.students import router as students_router

    router.include_router(students_router, tags=["Students"])
    router.include_router(registry_router, tags=["Registry"])

    return router


def register_routes(app: FastAPI) -> None:
    """Register all routes with the FastAPI application."""
    app.include_router(create_v1_router())

    from portal.api.routes.health import router as health_router

    app.include_router(health_router, tags=["Health"])

    logger.info("routes_registered")
