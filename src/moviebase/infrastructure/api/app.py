"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and lifecycle handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from moviebase.core.config import get_settings
from moviebase.core.logging import configure_logging, get_logger
from moviebase.domain.exceptions import DomainError, ErrorKind, validation_error
from moviebase.infrastructure.persistence.database import (
    close_database,
    init_database,
)

logger = get_logger(__name__)

# HTTP status for each kind of domain error
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_EXIST: status.HTTP_404_NOT_FOUND,
    ErrorKind.EXIST: status.HTTP_409_CONFLICT,
    ErrorKind.CANCELLED: 499,
    ErrorKind.DATABASE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events for the application.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    settings = get_settings()

    # Configure logging
    configure_logging(settings)

    logger.info(
        "Starting MovieBase",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    # Initialize database
    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down MovieBase")
    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Movie catalogue API",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint.

        Returns 200 if the service is running. Does not check
        database connectivity.
        """
        return {
            "status": "healthy",
            "service": "MovieBase",
            "version": get_settings().app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Readiness check endpoint, including database connectivity."""
        from moviebase.infrastructure.persistence.database import get_db_manager

        db = get_db_manager()
        if await db.check_connection():
            return {
                "status": "ready",
                "service": "MovieBase",
                "version": get_settings().app_version,
                "database": "connected",
            }
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "service": "MovieBase",
                "database": "disconnected",
            },
        )

    @app.get("/live", tags=["health"])
    async def liveness_check():
        """Liveness check endpoint."""
        return {
            "status": "alive",
            "service": "MovieBase",
            "version": get_settings().app_version,
        }


def register_routes(app: FastAPI) -> None:
    """Register API routes.

    Args:
        app: FastAPI application instance.
    """
    from moviebase.infrastructure.api.routes import movies_router

    settings = get_settings()

    app.include_router(movies_router, prefix=f"{settings.api_prefix}/movies")

    @app.get(settings.api_prefix, tags=["root"])
    async def api_root():
        """API root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "api_version": "v1",
        }


def error_response(error: DomainError) -> JSONResponse:
    """Render a domain error in the error envelope with its HTTP status."""
    headers = None
    if error.kind == ErrorKind.UNAUTHENTICATED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        content={"error": error.to_dict()},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        """Map domain errors to their HTTP status."""
        log = logger.error if exc.kind in (ErrorKind.DATABASE, ErrorKind.INTERNAL) else logger.info
        log(
            "Request failed",
            path=request.url.path,
            method=request.method,
            kind=exc.kind.value,
            param=exc.param,
            code=exc.code,
            error=exc.message,
        )
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Report undecodable request bodies as validation errors."""
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = first.get("loc", ())
        param = str(loc[-1]) if loc else None
        error = validation_error(
            param,
            first.get("msg", "Invalid request"),
            code="invalid_request",
        )
        logger.info(
            "Request validation failed",
            path=request.url.path,
            method=request.method,
            param=param,
            error=error.message,
        )
        return error_response(error)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        message = str(exc) if get_settings().debug else "An unexpected error occurred"
        return error_response(DomainError(ErrorKind.INTERNAL, message))


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """
    from moviebase.infrastructure.api.middleware import JSONContentTypeMiddleware

    app.add_middleware(JSONContentTypeMiddleware, path_prefix=get_settings().api_prefix)

    @app.middleware("http")
    async def logging_middleware(request, call_next):
        """Middleware to log all requests and attach a request ID."""
        from moviebase.core.logging import bind_request_id, clear_context, new_request_id

        request_id = request.headers.get("X-Request-ID") or new_request_id()
        bind_request_id(request_id)
        request.state.request_id = request_id

        logger.info(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            # Clear context to prevent leakage
            clear_context()


# Create the application instance
app = create_app()
