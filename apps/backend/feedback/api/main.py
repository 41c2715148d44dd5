"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Build the FastAPI application (title, version, OpenAPI docs at /docs)
  - Configure middleware (body limit, request context, CORS)
  - Mount the users/reviews router
  - Expose /health, /healthz and /metrics

Collaborators:
  - FastAPI / CORSMiddleware
  - RequestContextMiddleware, BodyLimitMiddleware
  - interfaces.api.http.router: users + reviews endpoints
  - container: repositories (healthz) and adapter selection
  - infrastructure.db.pool: lifecycle of the Postgres pool

Notes:
  - Pool init happens in lifespan (not at import time) and only when the
    active repositories are Postgres-backed.
  - CORS defaults to any origin with credentials.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from ..container import get_user_repository, uses_postgres
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.metrics import get_metrics_response
from ..crosscutting.middleware import BodyLimitMiddleware, RequestContextMiddleware
from ..domain.events import format_timestamp
from ..infrastructure.db.pool import close_pool, init_pool
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Initializes the DB pool when needed."""
    settings = get_settings()
    postgres = uses_postgres()

    if postgres:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            statement_timeout_ms=settings.db_statement_timeout_ms,
        )

    try:
        logger.info(
            "Feedback API starting up",
            extra={
                "app_env": settings.app_env,
                "postgres": postgres,
                "events_backend": settings.events_backend,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )
        yield
    finally:
        if postgres:
            close_pool()
        logger.info("Feedback API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Feedback API",
        description="Users and reviews with domain events on every review change",
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "users", "description": "User management"},
            {"name": "reviews", "description": "Reviews (emit review.* events)"},
            {"name": "health", "description": "Liveness / readiness"},
        ],
    )

    # Middleware order (last added = first to execute):
    # CORS -> RequestContext -> BodyLimit -> routes
    app.add_middleware(BodyLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
        expose_headers=["X-Request-Id"],
    )

    app.include_router(router)
    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health():
        """Liveness: the process is up."""
        return {
            "status": "ok",
            "timestamp": format_timestamp(datetime.now(timezone.utc)),
        }

    @app.get("/healthz", tags=["health"])
    def healthz(request: Request):
        """Readiness: verifies the database when Postgres is in use."""
        db_status = "skipped"
        if uses_postgres():
            db_status = "disconnected"
            try:
                if get_user_repository().ping():
                    db_status = "connected"
            except Exception as exc:
                logger.warning("Health check: DB unavailable", extra={"error": str(exc)})

        return {
            "status": "degraded" if db_status == "disconnected" else "ok",
            "db": db_status,
            "request_id": getattr(request.state, "request_id", None),
        }

    @app.get("/metrics", tags=["health"])
    def metrics():
        """Prometheus text format metrics."""
        body, content_type = get_metrics_response()
        return Response(content=body, media_type=content_type)

    return app


app = create_app()
