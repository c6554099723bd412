"""Main FastAPI application module."""

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette import status

from content_hub.api.router import router as api_router
from content_hub.core.config import Settings, settings
from content_hub.core.events import create_start_app_handler, create_stop_app_handler
from content_hub.core.logging import configure_logging
from content_hub.middleware.correlation import CorrelationMiddleware
from content_hub.middleware.errors import (
    ErrorHandlingMiddleware,
    install_exception_handlers,
)
from content_hub.middleware.metrics import MetricsMiddleware
from content_hub.middleware.security import SecurityHeadersMiddleware
from content_hub.sync.startup import StartupSync
from content_hub.web.pages import router as pages_router

ADMIN_PREFIXES = ("/admin", "/api/admin")


def create_app(config: Settings | None = None) -> FastAPI:
    """Build the application with its middleware, routes and lifecycle hooks.

    Args:
        config: Settings to use, defaults to the module settings

    Returns:
        Configured FastAPI application
    """
    config = config or settings
    startup_sync = StartupSync(enabled=config.STARTUP_SYNC_ENABLED)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await create_start_app_handler(app, config, startup_sync)()
        yield
        await create_stop_app_handler(app)()

    app = FastAPI(
        lifespan=lifespan,
        title=config.app_name,
        description="Admin service and content API backed by Redis",
        version=config.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        default_response_class=JSONResponse,
    )

    # Add middleware in order (inside -> out):
    # 1. CORS (outermost)
    # 2. Security headers
    # 3. Correlation (adds request ID)
    # 4. Metrics (tracks all requests)
    # 5. Error handling (innermost - handles all errors)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=config.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
        max_age=600,
    )
    app.add_middleware(SecurityHeadersMiddleware, admin_prefixes=ADMIN_PREFIXES)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)
    install_exception_handlers(app)

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Expose Prometheus metrics."""
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/", include_in_schema=False)
    async def root_redirect() -> Response:
        """Redirect root path to docs."""
        return RedirectResponse(url="/docs", status_code=status.HTTP_307_TEMPORARY_REDIRECT)

    app.include_router(api_router, prefix=config.api_prefix)
    app.include_router(pages_router)
    return app


# Test sessions configure logging in conftest
if os.getenv("TESTING") != "true":
    configure_logging(level=settings.LOG_LEVEL.lower(), json_logs=settings.JSON_LOGS)

app = create_app()
