"""
Administrator Report Routes

Full report listing and status/visibility updates. Every route requires an
administrator session.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from report_service.api.dependencies import get_report_manager, require_admin
from report_service.core.report_manager import ReportManager
from report_service.errors import NotFoundError, ReportServiceError, ServerError
from report_service.infrastructure.database.client import get_db
from report_service.models import OkResponse, Report

router = APIRouter(prefix="/api/reports", tags=["admin"], dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=List[Report],
    summary="List Reports",
    description="""
Most recent reports across all IMEIs, public and private, newest first, with every field
including contact details. Bounded by `ADMIN_LIST_LIMIT` (default 500).

**Authorization**: Administrator session
    """,
    responses={
        200: {"description": "Reports returned"},
        401: {"description": "No administrator session"},
        500: {"description": "Server error"}
    }
)
async def list_reports(
    db: AsyncSession = Depends(get_db),
    manager: ReportManager = Depends(get_report_manager)
) -> List[Report]:
    """Admin report listing"""
    try:
        return await manager.admin_list(db)
    except Exception as e:
        logger.error(f"Report listing failed: {e}")
        raise ServerError()


@router.patch(
    "/{ref}",
    response_model=OkResponse,
    summary="Update Report",
    description="""
Change the status and/or visibility of a report.

**Request Body**:
```json
{"status": "recovered", "is_public": false}
```

- `status`: lost | stolen | recovered; any status may move to any other
- `is_public`: boolean (0/1 accepted)

Other keys, and keys with invalid values, are ignored. A patch with nothing valid left is rejected.

**Authorization**: Administrator session
    """,
    responses={
        200: {"description": "Report updated"},
        400: {"description": "No valid fields"},
        401: {"description": "No administrator session"},
        404: {"description": "Report not found"},
        500: {"description": "Server error"}
    }
)
async def update_report(
    ref: str,
    patch: Optional[Dict[str, Any]] = Body(None),
    db: AsyncSession = Depends(get_db),
    manager: ReportManager = Depends(get_report_manager)
) -> OkResponse:
    """Admin status/visibility update"""
    try:
        updated = await manager.admin_update(ref, patch or {}, db)
    except ReportServiceError:
        raise
    except Exception as e:
        logger.error(f"Report update failed for {ref}: {e}")
        raise ServerError()

    if not updated:
        raise NotFoundError()

    return OkResponse()
