"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, and route registration.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portal import __version__
from portal.api.dependencies import get_settings
from portal.api.exceptions import PortalAPIError, from_registry_error
from portal.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from portal.api.routes import register_routes
from portal.api.routes.health import get_metrics
from portal.observability.logging import get_logger, setup_logging
from portal.registry.errors import RegistryError

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Logging is configured from settings before anything else so that
    startup events are rendered in the configured format.
    """
    settings = get_settings()
    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )

    app = FastAPI(
        title="Student Portal API",
        description="Access-controlled registry of student records",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)
    register_routes(app)

    if settings.observability.metrics.enabled:
        app.add_api_route(
            settings.observability.metrics.path,
            get_metrics,
            methods=["GET"],
            tags=["Health"],
        )

    logger.info(
        "app_created",
        debug=settings.debug,
        owner=settings.registry.owner,
        cors_origins=settings.api.cors_origins,
    )

    return app


def _error_response(exc: PortalAPIError) -> JSONResponse:
    response = ErrorResponse(
        error=ErrorBody(
            code=exc.error_code,
            message=exc.message,
            student_id=exc.student_id,
        )
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=response.model_dump(mode="json", exclude_none=True),
    )


def _validation_response(message: str, errors: list[dict]) -> JSONResponse:
    details = [
        ErrorDetail(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
        )
        for error in errors
    ]
    response = ErrorResponse(
        error=ErrorBody(
            code=ErrorCode.INVALID_REQUEST,
            message=message,
            details=details,
        )
    )
    return JSONResponse(
        status_code=400,
        content=response.model_dump(mode="json", exclude_none=True),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(RegistryError)
    async def registry_error_handler(
        request: Request, exc: RegistryError
    ) -> JSONResponse:
        api_error = from_registry_error(exc)
        logger.warning(
            "registry_error",
            error_code=api_error.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(api_error)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning(
            "validation_error",
            error_count=len(exc.errors()),
            path=request.url.path,
        )
        return _validation_response("Request validation failed", list(exc.errors()))

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        response = ErrorResponse(
            error=ErrorBody(
                code=ErrorCode.INTERNAL_ERROR,
                message="An unexpected error occurred",
            )
        )
        return JSONResponse(
            status_code=500,
            content=response.model_dump(mode="json", exclude_none=True),
        )


# Create the app instance for uvicorn
app = create_app()
