"""
Administrator Session Routes

Login, logout and session status.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from report_service.api.dependencies import (
    SESSION_ADMIN_KEY,
    client_origin,
    get_login_rate_limiter,
    is_admin_session,
)
from report_service.core.auth import verify_admin_password
from report_service.core.rate_limiter import LoginRateLimiter
from report_service.errors import AuthenticationError, RateLimitedError, ValidationError
from report_service.models import AuthStatusResponse, LoginRequest, OkResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post(
    "/login",
    response_model=OkResponse,
    summary="Administrator Login",
    description="""
Exchange the administrator password for a privileged session cookie.

**Throttling**: failed attempts are counted per caller origin. Once the limit is reached
within the window, every attempt from that origin is refused with 429 until the window
elapses, without the password being checked.

**Authorization**: None required
    """,
    responses={
        200: {"description": "Logged in"},
        400: {"description": "Password missing"},
        401: {"description": "Invalid credentials"},
        429: {"description": "Too many failed attempts"},
        500: {"description": "Administrator password not configured"}
    }
)
async def login(
    body: LoginRequest,
    request: Request,
    limiter: LoginRateLimiter = Depends(get_login_rate_limiter)
) -> OkResponse:
    """Administrator login"""
    origin = client_origin(request)
    if limiter.is_blocked(origin):
        logger.warning(f"Login refused for rate-limited origin {origin}")
        raise RateLimitedError()

    if not body.password:
        raise ValidationError("Password required")

    # bcrypt is CPU-bound; keep it off the event loop
    if not await run_in_threadpool(verify_admin_password, body.password):
        failures = limiter.record_failure(origin)
        logger.warning(f"Failed admin login from {origin} ({failures}/{limiter.max_attempts})")
        raise AuthenticationError("Invalid credentials")

    request.session[SESSION_ADMIN_KEY] = True
    logger.info(f"Admin logged in from {origin}")
    return OkResponse()


@router.post(
    "/logout",
    response_model=OkResponse,
    summary="Administrator Logout",
    description="Clears the session. Succeeds whether or not a session existed.",
)
async def logout(request: Request) -> OkResponse:
    """Drop the session"""
    request.session.clear()
    return OkResponse()


@router.get(
    "/me",
    response_model=AuthStatusResponse,
    summary="Session Status",
    description="Reports whether the caller currently holds an administrator session.",
)
async def me(request: Request) -> AuthStatusResponse:
    return AuthStatusResponse(is_admin=is_admin_session(request))
