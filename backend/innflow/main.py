"""InnFlow - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from innflow.core.config import get_settings
from innflow.core.database import init_models
from innflow.core.env_validation import validate_environment
from innflow.core.logging import configure_logging
from innflow.routers import (
    auth_router,
    property_router,
    rooms_router,
    bookings_router,
    calendar_router,
    dashboard_router,
    financials_router,
    staff_router,
    tenants_router,
    activity_router,
    portal_router,
)

# CRITICAL: Validate environment before proceeding
# This will hard-fail (exit 1) if required configuration is missing
validate_environment()

settings = get_settings()
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: SQLite dev databases are created in place; Postgres uses Alembic
    if settings.database_url.startswith("sqlite"):
        await init_models()
        logger.info("[STARTUP] SQLite schema created")
    yield
    # Shutdown


app = FastAPI(
    title=settings.app_name,
    description="Single-property hospitality management: rooms, bookings, calendar, financials and a guest booking portal.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS - configured from ALLOWED_ORIGINS; wildcard is blocked outside debug
logger.info(f"[STARTUP] CORS configured with origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API v1 routers
app.include_router(auth_router, prefix=settings.api_v1_prefix)
app.include_router(property_router, prefix=settings.api_v1_prefix)
app.include_router(rooms_router, prefix=settings.api_v1_prefix)
app.include_router(bookings_router, prefix=settings.api_v1_prefix)
app.include_router(calendar_router, prefix=settings.api_v1_prefix)
app.include_router(dashboard_router, prefix=settings.api_v1_prefix)
app.include_router(financials_router, prefix=settings.api_v1_prefix)
app.include_router(staff_router, prefix=settings.api_v1_prefix)
app.include_router(tenants_router, prefix=settings.api_v1_prefix)  # Developer portal
app.include_router(activity_router, prefix=settings.api_v1_prefix)  # Audit log & notifications
app.include_router(portal_router, prefix=settings.api_v1_prefix)  # Guest booking portal


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs" if settings.debug else "Disabled in production",
    }
