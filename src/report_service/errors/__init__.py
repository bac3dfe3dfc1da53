"""Error types and FastAPI handlers"""

from .exceptions import (
    ReportServiceError,
    ValidationError,
    AuthenticationError,
    RateLimitedError,
    NotFoundError,
    ServerError,
)
from .handlers import register_exception_handlers

__all__ = [
    "ReportServiceError",
    "ValidationError",
    "AuthenticationError",
    "RateLimitedError",
    "NotFoundError",
    "ServerError",
    "register_exception_handlers",
]
