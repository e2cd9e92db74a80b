"""
Sync Manager - FastAPI application.
Triggers integration sync operations, tracks their status and serves the activity log.
CORS, API versioning (/api/v1), health check, error handling.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request as StarletteRequest

from sync_manager.api.v1.endpoints import auth
from sync_manager.api.v1.routes import api_router
from sync_manager.core.config import Settings, get_settings
from sync_manager.core.log_config import configure_logging
from sync_manager.services.session import SyncSession

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request (method + path + status)."""

    async def dispatch(self, request: StarletteRequest, call_next: Callable) -> Response:
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response


def create_app(settings: Settings | None = None, session: SyncSession | None = None) -> FastAPI:
    """Build the app. Tests pass their own settings and session."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    if settings.ENVIRONMENT == "production":
        settings.validate_for_production()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle. The sync session lives exactly as long as the app."""
        logger.info("Starting Sync Manager API")
        logger.info("INTEGRATION_BASE_URL=%s", settings.integration_base_url)
        app.state.sync_session = session or SyncSession(settings)
        yield
        await app.state.sync_session.close()
        logger.info("Shutting down")

    app = FastAPI(
        title="Sync Manager API",
        version="1.0.0",
        description="Trigger and monitor Business NXT to Vendre integration syncs.",
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    # Error handling middleware
    @app.middleware("http")
    async def catch_exceptions(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error: %s", exc)
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal server error"},
            )

    # Root and health (outside versioning)
    @app.get("/")
    def root():
        return {
            "message": "Sync Manager API",
            "version": "1.0.0",
            "docs": "/docs",
            "endpoints": {
                "auth": "/api/v1/auth",
                "operations": "/api/v1/operations",
                "sync_logs": "/api/v1/sync-logs",
                "logs": "/api/v1/logs",
                "auto_sync": "/api/v1/auto-sync",
                "notifications": "/api/v1/notifications",
            },
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    # Auth routes (not gated)
    app.include_router(auth.router, prefix="/api/v1/auth", tags=["Authentication"])
    # API v1
    app.include_router(api_router, prefix="/api/v1")
    return app


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", "8080"))
    uvicorn.run("sync_manager.main:create_app", factory=True, host="0.0.0.0", port=port)
