"""
Report Manager

Core business logic for lost/stolen device reports.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from report_service.config.settings import settings
from report_service.core.imei import is_valid_imei, mask_imei
from report_service.errors import ValidationError
from report_service.models.report import (
    CREATION_STATUSES,
    DESCRIPTIVE_FIELDS,
    Report,
    ReportStatus,
    utc_now,
)
from report_service.models.requests import ReportCreateRequest
from report_service.infrastructure.database.models import ReportDB

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    """Trim free-form text; empty becomes absent"""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _valid_status(value: Any) -> bool:
    return isinstance(value, str) and value in {s.value for s in ReportStatus}


def _valid_visibility(value: Any) -> bool:
    # JSON true/false, or the 0/1 the web form sends
    return isinstance(value, bool) or (isinstance(value, int) and value in (0, 1))


# Fields an administrator may change, with the check each value must pass
UPDATABLE_FIELDS = {
    "status": _valid_status,
    "is_public": _valid_visibility,
}


class ReportManager:
    """Business logic for report management"""

    def _to_report(self, row: ReportDB) -> Report:
        return Report(
            ref=row.ref,
            imei=row.imei,
            status=ReportStatus(row.status),
            brand=row.brand,
            model=row.model,
            color=row.color,
            description=row.description,
            lost_date=row.lost_date,
            location=row.location,
            contact_name=row.contact_name,
            contact_email=row.contact_email,
            contact_phone=row.contact_phone,
            police_report=row.police_report,
            is_public=bool(row.is_public),
            created_at=row.created_at
        )

    def _validate_submission(self, submission: ReportCreateRequest) -> ReportStatus:
        """
        Validate a submission before anything touches the database

        Returns:
            The creation status

        Raises:
            ValidationError: If the IMEI or status is not acceptable
        """
        if not is_valid_imei(submission.imei):
            raise ValidationError("Invalid IMEI")

        if submission.status not in {s.value for s in CREATION_STATUSES}:
            raise ValidationError("Invalid status (lost|stolen)")

        return ReportStatus(submission.status)

    async def create_report(self, submission: ReportCreateRequest, db: AsyncSession) -> Report:
        """
        Store a new public submission

        Args:
            submission: Report fields as sent by the client
            db: Database session

        Returns:
            The stored report, including its generated reference

        Raises:
            ValidationError: If the IMEI is invalid or the status is not lost/stolen
        """
        status = self._validate_submission(submission)

        report = Report(
            ref=str(uuid4()),
            imei=submission.imei,
            status=status,
            is_public=submission.is_public,
            created_at=utc_now(),
            **{name: _clean(getattr(submission, name)) for name in DESCRIPTIVE_FIELDS}
        )

        report_db = ReportDB(**report.model_dump(mode="python"))
        report_db.status = report.status.value
        db.add(report_db)
        await db.commit()

        logger.info(
            f"Created report {report.ref} for IMEI {mask_imei(report.imei)} "
            f"({report.status.value}, public={report.is_public})"
        )
        return report

    async def public_lookup(self, imei: str, db: AsyncSession) -> List[Report]:
        """
        Public reports for one IMEI, newest first

        Raises:
            ValidationError: If the IMEI is invalid

        Note:
            Callers must only expose the public view of these reports
            (see PublicReport); contact fields are still populated here.
        """
        if not is_valid_imei(imei):
            raise ValidationError("Invalid IMEI")

        stmt = (
            select(ReportDB)
            .where(ReportDB.imei == imei, ReportDB.is_public.is_(True))
            .order_by(ReportDB.created_at.desc(), ReportDB.id.desc())
        )
        result = await db.execute(stmt)
        return [self._to_report(row) for row in result.scalars().all()]

    async def admin_list(self, db: AsyncSession, limit: Optional[int] = None) -> List[Report]:
        """Most recent reports across all IMEIs and visibilities"""
        if limit is None:
            limit = settings.admin_list_limit
        stmt = (
            select(ReportDB)
            .order_by(ReportDB.created_at.desc(), ReportDB.id.desc())
            .limit(limit)
        )
        result = await db.execute(stmt)
        return [self._to_report(row) for row in result.scalars().all()]

    def _filter_patch(self, patch: Mapping[str, Any]) -> Dict[str, Any]:
        """Keep whitelisted fields whose values pass their check"""
        changes: Dict[str, Any] = {}
        for key, value in patch.items():
            check = UPDATABLE_FIELDS.get(key)
            if check is not None and check(value):
                changes[key] = bool(value) if key == "is_public" else value
        return changes

    async def admin_update(self, ref: str, patch: Mapping[str, Any], db: AsyncSession) -> bool:
        """
        Apply an administrator patch to one report

        Only `status` (lost|stolen|recovered, any transition allowed) and
        `is_public` are honoured; anything else in the patch is dropped.

        Args:
            ref: Report reference
            patch: Requested changes
            db: Database session

        Returns:
            True if updated, False if no report has this reference

        Raises:
            ValidationError: If nothing valid remains in the patch
        """
        changes = self._filter_patch(patch)
        if not changes:
            raise ValidationError("No valid fields")

        stmt = update(ReportDB).where(ReportDB.ref == ref).values(**changes)
        result = await db.execute(stmt)
        await db.commit()

        if result.rowcount == 0:
            return False

        logger.info(f"Updated report {ref}: {changes}")
        return True
