"""Data models for Report Service"""

from .report import (
    Report,
    ReportStatus,
    CREATION_STATUSES,
    DESCRIPTIVE_FIELDS,
    CONTACT_FIELDS,
    utc_now,
)
from .requests import (
    ReportCreateRequest,
    ReportCreatedResponse,
    PublicReport,
    CheckResponse,
    LoginRequest,
    OkResponse,
    AuthStatusResponse,
    HealthResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "Report",
    "ReportStatus",
    "CREATION_STATUSES",
    "DESCRIPTIVE_FIELDS",
    "CONTACT_FIELDS",
    "utc_now",
    "ReportCreateRequest",
    "ReportCreatedResponse",
    "PublicReport",
    "CheckResponse",
    "LoginRequest",
    "OkResponse",
    "AuthStatusResponse",
    "HealthResponse",
    "ErrorDetail",
    "ErrorResponse",
]
