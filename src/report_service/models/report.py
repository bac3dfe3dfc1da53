"""
Report Data Models

Core domain models for lost/stolen device reports.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (the form SQLite round-trips)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ReportStatus(str, Enum):
    """Device status"""
    LOST = "lost"
    STOLEN = "stolen"
    RECOVERED = "recovered"


# A report can only be opened as lost or stolen; recovered is reachable via admin update only
CREATION_STATUSES = frozenset({ReportStatus.LOST, ReportStatus.STOLEN})

# Free-form descriptive fields, persisted as given after trimming
DESCRIPTIVE_FIELDS = (
    "brand",
    "model",
    "color",
    "description",
    "lost_date",
    "location",
    "contact_name",
    "contact_email",
    "contact_phone",
    "police_report",
)

CONTACT_FIELDS = ("contact_name", "contact_email", "contact_phone")


class Report(BaseModel):
    """Lost/stolen device report"""

    ref: str = Field(..., description="Public reference handle")
    imei: str = Field(..., min_length=15, max_length=15, description="15-digit IMEI")
    status: ReportStatus = Field(..., description="Device status")
    brand: Optional[str] = Field(None, description="Device brand")
    model: Optional[str] = Field(None, description="Device model")
    color: Optional[str] = Field(None, description="Device color")
    description: Optional[str] = Field(None, description="Additional description")
    lost_date: Optional[str] = Field(None, description="When the device was lost")
    location: Optional[str] = Field(None, description="Approximate location")
    contact_name: Optional[str] = Field(None, description="Reporter name")
    contact_email: Optional[str] = Field(None, description="Reporter email")
    contact_phone: Optional[str] = Field(None, description="Reporter phone")
    police_report: Optional[str] = Field(None, description="Police report number")
    is_public: bool = Field(default=False, description="Visible to anonymous IMEI lookups")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "ref": "550e8400-e29b-41d4-a716-446655440000",
                "imei": "490154203237518",
                "status": "stolen",
                "brand": "Samsung",
                "model": "Galaxy S21",
                "color": "black",
                "description": "Cracked corner, blue case",
                "lost_date": "2025-11-16T18:30",
                "location": "Central station",
                "contact_name": "Sam",
                "contact_email": "sam@example.com",
                "contact_phone": "+15550100",
                "police_report": "PR-2025-1182",
                "is_public": True,
                "created_at": "2025-11-16T19:02:11"
            }
        }
