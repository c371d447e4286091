"""HR Desk — FastAPI Application Factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from hrdesk.attendance.router import router as attendance_router
from hrdesk.audit.router import router as audit_router
from hrdesk.common.exceptions import register_exception_handlers
from hrdesk.common.logging import configure_logging
from hrdesk.common.rate_limit import limiter
from hrdesk.config import Settings, get_settings, settings
from hrdesk.leave.router import router as leave_router
from hrdesk.notifications.router import router as notifications_router
from hrdesk.stores import Stores, build_stores
from hrdesk.tracking.router import router as tracking_router

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    # Startup
    if not settings.spreadsheet_configured:
        logger.warning(
            "GOOGLE_SPREADSHEET_ID is not set; attendance month, leave status "
            "and audit endpoints will answer 500"
        )
    if getattr(app.state, "stores", None) is None:
        app.state.stores = build_stores(settings)
    yield
    # Shutdown: gspread / firebase-admin hold no connections that need closing


def create_app(stores: Optional[Stores] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    *stores* replaces the store wiring normally built at startup (tests pass
    in-memory stores here).
    """
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="HR Desk",
        description="Attendance, leave, notification and audit API",
        version=VERSION,
        docs_url="/api/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url="/api/redoc" if settings.ENVIRONMENT != "production" else None,
        lifespan=lifespan,
    )
    app.state.stores = stores

    # Exception handlers (RFC 7807)
    register_exception_handlers(app)

    # Rate limiting (slowapi)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check
    @app.get("/api/health", tags=["system"])
    @limiter.exempt
    async def health_check(current: Settings = Depends(get_settings)):
        return {
            "status": "healthy",
            "version": VERSION,
            "environment": current.ENVIRONMENT,
            "spreadsheetConfigured": current.spreadsheet_configured,
        }

    # Register routers
    app.include_router(attendance_router, prefix="/api/attendance", tags=["attendance"])
    app.include_router(leave_router, prefix="/api/leaves", tags=["leave"])
    app.include_router(notifications_router, prefix="/api/notifications", tags=["notifications"])
    app.include_router(audit_router, prefix="/api/audit", tags=["audit"])
    app.include_router(tracking_router, prefix="/api/tracking", tags=["tracking"])

    return app


app = create_app()
