"""
IMEI Report Service - Main Application

FastAPI application for lost/stolen phone reports.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from report_service import __version__
from report_service.config.settings import settings
from report_service.api.routes import admin_router, auth_router, reports_router
from report_service.errors import register_exception_handlers
from report_service.infrastructure.database.client import db_client

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info(f"Starting {settings.service_name} v{__version__} ({settings.environment})")
    if not (settings.admin_password or settings.admin_password_hash):
        logger.warning("No admin password configured; admin login is disabled")

    await db_client.initialize()

    yield

    # Shutdown
    logger.info("Shutting down Report Service")
    await db_client.close()


# Create FastAPI app
app = FastAPI(
    title="IMEI Report Service",
    description="Report lost or stolen phones by IMEI and check a device before buying it",
    version=__version__,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Signed-cookie sessions carry the administrator marker
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age_seconds,
    same_site="lax",
    https_only=settings.session_https_only,
)

register_exception_handlers(app)

# Include routers
app.include_router(reports_router)
app.include_router(auth_router)
app.include_router(admin_router)


# Root endpoint
@app.get(
    "/",
    summary="Service Information",
    description="""
Returns basic information about the Report Service.

**Response Example**:
```json
{
  "service": "imei-report-service",
  "version": "0.1.0",
  "status": "running",
  "environment": "production"
}
```

**Authorization**: None required (public endpoint)
    """,
    responses={
        200: {"description": "Service information returned successfully"}
    }
)
async def root():
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": __version__,
        "status": "running",
        "environment": settings.environment
    }


# Health endpoint (simple version at root level)
@app.get(
    "/health",
    summary="Health Check",
    description="""
Lightweight liveness check; does not touch the database.

For a check that includes database status, use `/api/health`.

**Authorization**: None required (public endpoint)
    """,
    responses={
        200: {"description": "Service is healthy and operational"}
    }
)
async def health():
    """Simple health check"""
    return {"status": "healthy", "service": settings.service_name}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "report_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=True if settings.environment == "development" else False
    )
