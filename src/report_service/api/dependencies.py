"""
Shared FastAPI dependencies.
"""

from fastapi import Request

from report_service.config.settings import settings
from report_service.core.rate_limiter import LoginRateLimiter
from report_service.core.report_manager import ReportManager
from report_service.errors import AuthenticationError

SESSION_ADMIN_KEY = "is_admin"

_login_rate_limiter = LoginRateLimiter(
    max_attempts=settings.login_max_attempts,
    window_seconds=settings.login_window_seconds,
)


def get_report_manager() -> ReportManager:
    """Dependency for getting ReportManager instance"""
    return ReportManager()


def get_login_rate_limiter() -> LoginRateLimiter:
    """Dependency for the process-wide failed-login limiter"""
    return _login_rate_limiter


def client_origin(request: Request) -> str:
    """First X-Forwarded-For hop, else the socket peer"""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def is_admin_session(request: Request) -> bool:
    return request.session.get(SESSION_ADMIN_KEY) is True


def require_admin(request: Request) -> None:
    """Reject callers without a privileged session"""
    if not is_admin_session(request):
        raise AuthenticationError()
