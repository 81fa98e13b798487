"""FastAPI application - Opinion Trading Backend.

Clean Architecture implementation з:
- Domain-Driven Design (Event, Trade, User aggregates)
- CQRS pattern (commands/queries + handlers)
- Event-Driven notifications (domain events → WebSocket rooms)
- Hexagonal Architecture (ports + adapters)

Production-ready with:
- Configuration from environment variables
- Health check endpoints (liveness/readiness)
- Structured logging
- CORS configuration
"""

import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from opinion_trading import __version__
from opinion_trading.config import (
    Settings,
    bind_request_context,
    clear_request_context,
    get_logger,
    get_settings,
    setup_logging,
)
from opinion_trading.domain.shared import (
    AggregateNotFound,
    BusinessRuleViolation,
    DomainException,
    InvalidStateTransition,
    ValidationFailure,
)
from opinion_trading.domain.users import InvalidCredentialsError, UserAlreadyExistsError
from opinion_trading.infrastructure.auth import InvalidTokenError
from opinion_trading.infrastructure.persistence.sqlalchemy import create_tables
from opinion_trading.presentation.api.container import AppContainer, build_container
from opinion_trading.presentation.api.v1.routes import (
    auth_router,
    events_router,
    trades_router,
    ws_router,
)

logger = get_logger(__name__)


# ============================================================================
# ERROR MAPPING
# ============================================================================

# Most specific first
_DOMAIN_STATUS: tuple[tuple[type[DomainException], int], ...] = (
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED),
    (UserAlreadyExistsError, status.HTTP_409_CONFLICT),
    (AggregateNotFound, status.HTTP_404_NOT_FOUND),
    (InvalidStateTransition, status.HTTP_409_CONFLICT),
    (ValidationFailure, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolation, status.HTTP_400_BAD_REQUEST),
)


def status_for(exc: DomainException) -> int:
    """HTTP status для domain exception (400 якщо тип не відомий)."""
    for exc_type, code in _DOMAIN_STATUS:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_400_BAD_REQUEST


# ============================================================================
# MIDDLEWARE
# ============================================================================


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to add request correlation ID to all log messages."""

    async def dispatch(self, request: Request, call_next):
        """Process request with correlation context."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        bind_request_context(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            clear_request_context()


# ============================================================================
# ERROR HANDLERS
# ============================================================================


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Typed domain failures → HTTP errors."""
    code = status_for(exc)
    logger.info(
        "api.domain_error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
        status_code=code,
    )
    return JSONResponse(
        status_code=code,
        content={"error": type(exc).__name__, "message": exc.message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException (401/403/404 route) у форматі {"error", "message"}."""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = {"error": "HTTPError", "message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors.

    Returns:
        JSONResponse з 422 status code + error details.
    """
    logger.warning(
        "api.validation_error",
        path=request.url.path,
        errors=exc.errors(),
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(
        "api.unhandled_exception",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "InternalServerError",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


# ============================================================================
# CREATE FASTAPI APPLICATION
# ============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build FastAPI app з власним container (engine, event bus, notifier).

    Args:
        settings: Settings (default: get_settings()).
    """
    settings = settings or get_settings()
    setup_logging(settings)

    container = build_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: tables (dev). Shutdown: feed client + engine dispose."""
        logger.info("application.startup.started", environment=settings.environment)

        if settings.create_tables_on_startup:
            await create_tables(container.engine)
            logger.info("application.database.tables_created")

        logger.info("application.startup.completed")
        yield

        logger.info("application.shutdown.started")
        await container.aclose()
        logger.info("application.shutdown.completed")

    app = FastAPI(
        title=settings.app_name,
        description="""
    **Opinion trading** backend: users stake balance on event outcomes.

    ## Features
    - Event lifecycle: upcoming → live → closed → settled
    - Trades executed immediately at posted odds (balance debited atomically)
    - Settlement pays winners amount × (1/odds), each trade at most once
    - Real-time notifications over WebSocket rooms (`user-<id>`, `event-<id>`)
    - External sports feed ingestion (HTTP or built-in samples)
    """,
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.container = container

    # Order matters - last added is executed first
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    _register_health_routes(app, container)

    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(events_router, prefix="/api/v1")
    app.include_router(trades_router, prefix="/api/v1")
    app.include_router(ws_router)

    return app


# ============================================================================
# HEALTH / ROOT
# ============================================================================


def _register_health_routes(app: FastAPI, container: AppContainer) -> None:
    settings = container.settings

    @app.get("/health", tags=["Health"], summary="Health check (liveness)")
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "version": settings.app_version,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": settings.environment,
        }

    @app.get(
        "/health/ready",
        tags=["Health"],
        summary="Readiness check",
        description="Check if API and all dependencies are ready",
    )
    async def readiness_check() -> JSONResponse:
        """Checks database and Redis connectivity."""
        checks = {"database": "unknown", "redis": "unknown"}
        all_healthy = True

        try:
            async with container.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            checks["database"] = "healthy"
        except Exception as e:
            checks["database"] = f"unhealthy: {str(e)[:50]}"
            all_healthy = False

        try:
            import redis.asyncio as aioredis

            r = aioredis.from_url(settings.redis_url)
            await r.ping()
            checks["redis"] = "healthy"
            await r.aclose()
        except Exception as e:
            checks["redis"] = f"unhealthy: {str(e)[:50]}"
            all_healthy = False

        response_status = status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

        return JSONResponse(
            status_code=response_status,
            content={
                "status": "healthy" if all_healthy else "unhealthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "checks": checks,
            },
        )

    @app.get("/health/live", tags=["Health"], summary="Liveness check")
    async def liveness_check() -> dict:
        return {"status": "alive"}

    @app.get("/", tags=["Root"], summary="API root")
    async def root() -> dict:
        return {
            "message": "Opinion Trading Backend",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "websocket": "/ws",
        }


app = create_app()


# ============================================================================
# RUN APPLICATION (for development)
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    # Run with: python -m opinion_trading.main
    uvicorn.run(
        "opinion_trading.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
