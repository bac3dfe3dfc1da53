"""
Public Report API Routes

Submission and anonymous IMEI lookup.
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from report_service.api.dependencies import get_report_manager
from report_service.core.report_manager import ReportManager
from report_service.errors import ReportServiceError, ServerError
from report_service.infrastructure.database.client import db_client, get_db
from report_service.models import (
    CheckResponse,
    HealthResponse,
    PublicReport,
    ReportCreateRequest,
    ReportCreatedResponse,
)
from report_service.config.settings import settings

router = APIRouter(prefix="/api", tags=["reports"])
logger = logging.getLogger(__name__)


@router.post(
    "/report",
    response_model=ReportCreatedResponse,
    status_code=201,
    summary="Submit Lost/Stolen Report",
    description="""
Report a lost or stolen phone by IMEI.

**Workflow**:
1. Service validates the IMEI check digit
2. Service checks the status is `lost` or `stolen`
3. Optional descriptive and contact fields are trimmed; empty values are dropped
4. A new reference is generated and the report is stored
5. Returns the reference

**Visibility**: `is_public` (default false) decides whether anonymous IMEI checks see the report.
Contact details are never shown publicly.

**Authorization**: None required (public endpoint)
    """,
    responses={
        201: {"description": "Report stored"},
        400: {"description": "Invalid IMEI or status"},
        500: {"description": "Server error"}
    }
)
async def submit_report(
    submission: ReportCreateRequest,
    db: AsyncSession = Depends(get_db),
    manager: ReportManager = Depends(get_report_manager)
) -> ReportCreatedResponse:
    """Submit a report"""
    try:
        report = await manager.create_report(submission, db)
    except ReportServiceError:
        raise
    except Exception as e:
        logger.error(f"Report submission failed: {e}")
        raise ServerError()

    return ReportCreatedResponse(ref=report.ref)


@router.get(
    "/check",
    response_model=CheckResponse,
    summary="Check Device Status",
    description="""
List the public reports filed against an IMEI, newest first.

**Response Example**:
```json
{
  "imei": "490154203237518",
  "count": 1,
  "reports": [
    {"ref": "550e8400-...", "imei": "490154203237518", "status": "stolen", "brand": "Samsung",
     "model": "Galaxy S21", "color": "black", "lost_date": "2025-11-16T18:30",
     "location": "Central station", "created_at": "2025-11-16T19:02:11"}
  ]
}
```

An IMEI with no public reports returns `count: 0` and an empty list.

**Authorization**: None required (public endpoint)
    """,
    responses={
        200: {"description": "Lookup completed"},
        400: {"description": "Invalid IMEI"},
        500: {"description": "Server error"}
    }
)
async def check_imei(
    imei: str = Query("", description="15-digit IMEI"),
    db: AsyncSession = Depends(get_db),
    manager: ReportManager = Depends(get_report_manager)
) -> CheckResponse:
    """Public IMEI lookup"""
    imei = imei.strip()
    try:
        reports = await manager.public_lookup(imei, db)
    except ReportServiceError:
        raise
    except Exception as e:
        logger.error(f"IMEI check failed: {e}")
        raise ServerError()

    return CheckResponse(
        imei=imei,
        count=len(reports),
        reports=[PublicReport.from_report(r) for r in reports]
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Detailed Health Check",
    description="""
Health check including database connectivity.

**Health Status Values**:
- healthy: database reachable
- degraded: database unavailable

**Authorization**: None required (public endpoint for monitoring)
    """,
    responses={
        200: {"description": "Health check completed (status may be healthy or degraded)"}
    }
)
async def health_check() -> HealthResponse:
    """Health check endpoint"""
    db_ok = await db_client.health_check()

    return HealthResponse(
        status="healthy" if db_ok else "degraded",
        service=settings.service_name,
        database_available=db_ok
    )
