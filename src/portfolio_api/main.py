"""
Portfolio API - Main Application
=================================

Backend for the portfolio site's contact form and CV downloads.

Modules:
- Contact: rate-limited contact-form submissions
- Downloads: CV download requests

Clean Architecture Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Domain: Entities and field rules
- Infrastructure: MongoDB via Beanie/Motor
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from portfolio_api.config import Settings, get_settings
from portfolio_api.contact.infrastructure import ContactDocument
from portfolio_api.contact.interfaces import contact_router
from portfolio_api.core import MalformedBodyException, RateLimitExceededException, isoformat_utc, utcnow
from portfolio_api.downloads.infrastructure import DownloadDocument
from portfolio_api.downloads.interfaces import downloads_router
from portfolio_api.infrastructure.database import DatabaseConnector
from portfolio_api.shared.api import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    SlidingWindowRateLimiter,
    global_exception_handler,
    malformed_body_exception_handler,
    rate_limit_exception_handler,
)
from portfolio_api.shared.infrastructure.logging import get_logger, setup_logging

logger = get_logger(__name__)

DOCUMENT_MODELS = [ContactDocument, DownloadDocument]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP:
    1. Setup structured logging
    2. Start database supervision (first attempt runs in the background)

    SHUTDOWN:
    1. Stop reconnect attempts and close the client
    """
    settings: Settings = app.state.settings

    # === STARTUP ===
    setup_logging(settings.log_level, settings.environment)
    logger.info("Starting Portfolio API", extra={
        "version": settings.app_version,
        "environment": settings.environment
    })

    await app.state.database.start()

    logger.info(f"Server is running on port {settings.port}")

    yield

    # === SHUTDOWN ===
    logger.info("Shutting down Portfolio API")
    await app.state.database.close()
    logger.info("Portfolio API shutdown complete")


# === System Endpoints ===

system_router = APIRouter(tags=["Health"])


@system_router.get("/health", responses={
    200: {
        "description": "Process and database status",
        "content": {
            "application/json": {
                "example": {
                    "status": "ok",
                    "database": "connected",
                    "timestamp": "2024-01-15T10:00:00.000Z"
                }
            }
        }
    }
})
async def health_check(request: Request):
    """
    Health check for load balancers and uptime monitors.

    Always 200; ``database`` is "connected" only while the connector reports
    a live connection.
    """
    connector: DatabaseConnector = request.app.state.database
    return {
        "status": "ok",
        "database": "connected" if connector.is_connected else "disconnected",
        "timestamp": isoformat_utc(utcnow())
    }


@system_router.get("/", response_class=PlainTextResponse, tags=["Root"])
async def root():
    return "server is running..."


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[DatabaseConnector] = None,
    contact_rate_limiter: Optional[SlidingWindowRateLimiter] = None,
) -> FastAPI:
    """
    Build the application.

    Collaborators default to ones built from settings; tests pass their own.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Portfolio API",
        description="Contact form and CV download backend.",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # Services live in app state for dependency injection
    app.state.settings = settings
    app.state.database = database or DatabaseConnector.from_settings(settings, DOCUMENT_MODELS)
    app.state.contact_rate_limiter = contact_rate_limiter or SlidingWindowRateLimiter(
        limit=settings.contact_rate_limit,
        window_seconds=settings.contact_rate_window_seconds,
    )

    # === Middleware (last added runs first) ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    app.add_exception_handler(MalformedBodyException, malformed_body_exception_handler)
    app.add_exception_handler(RateLimitExceededException, rate_limit_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # === Routers ===
    app.include_router(contact_router)
    app.include_router(downloads_router)
    app.include_router(system_router)

    return app


app = create_app()
