"""
Administrator authentication.

A single administrator identity. The password is checked against a bcrypt
hash when one is configured, otherwise against the plain configured password
with a constant-time comparison.
"""

import logging
import secrets

from passlib.context import CryptContext

from report_service.config.settings import settings
from report_service.errors import ServerError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Produce a value suitable for ADMIN_PASSWORD_HASH"""
    return pwd_context.hash(password)


def verify_admin_password(password: str) -> bool:
    """
    Check a login password against the configured administrator secret.

    Raises:
        ServerError: If no administrator password is configured
    """
    if settings.admin_password_hash:
        try:
            return pwd_context.verify(password, settings.admin_password_hash)
        except ValueError as e:
            # Malformed hash in configuration
            logger.error(f"Admin password hash could not be used: {e}")
            raise ServerError()

    if settings.admin_password:
        return secrets.compare_digest(
            password.encode("utf-8"), settings.admin_password.encode("utf-8")
        )

    logger.error("Admin login attempted but no admin password is configured")
    raise ServerError("Admin password not configured")
