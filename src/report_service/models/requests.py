"""
API Request and Response Models

Pydantic models for API input/output validation.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .report import Report, ReportStatus, utc_now


class ReportCreateRequest(BaseModel):
    """Public report submission.

    `imei` and `status` are checked by the report manager rather than the schema
    so that bad values get a specific reason instead of a generic schema error.
    """

    # Free-form fields keep numeric input (police report no., dates) as text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    imei: Optional[str] = Field(None, description="15-digit IMEI")
    status: Optional[str] = Field(None, description="lost or stolen")
    brand: Optional[str] = None
    model: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    lost_date: Optional[str] = None
    location: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    police_report: Optional[str] = None
    is_public: bool = Field(default=False, description="Allow anonymous lookups to see this report")


class ReportCreatedResponse(BaseModel):
    """Response after a report is stored"""

    ok: bool = True
    ref: str = Field(..., description="Reference of the new report")


class PublicReport(BaseModel):
    """Report as shown to anonymous callers (no contact details)"""

    ref: str
    imei: str
    status: ReportStatus
    brand: Optional[str]
    model: Optional[str]
    color: Optional[str]
    lost_date: Optional[str]
    location: Optional[str]
    created_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "PublicReport":
        """Create public view from Report model"""
        return cls(
            ref=report.ref,
            imei=report.imei,
            status=report.status,
            brand=report.brand,
            model=report.model,
            color=report.color,
            lost_date=report.lost_date,
            location=report.location,
            created_at=report.created_at
        )


class CheckResponse(BaseModel):
    """Public IMEI check result"""

    imei: str
    count: int = Field(..., ge=0)
    reports: List[PublicReport] = Field(default_factory=list)


class LoginRequest(BaseModel):
    """Administrator login"""

    password: Optional[str] = None


class OkResponse(BaseModel):
    """Generic acknowledgement"""

    ok: bool = True


class AuthStatusResponse(BaseModel):
    """Whether the caller holds an admin session"""

    is_admin: bool


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(default="healthy")
    service: str = Field(default="imei-report-service")
    timestamp: datetime = Field(default_factory=utc_now)
    database_available: bool = Field(default=True)


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail
