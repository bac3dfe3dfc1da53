"""API routers"""

from .reports import router as reports_router
from .auth import router as auth_router
from .admin import router as admin_router

__all__ = ["reports_router", "auth_router", "admin_router"]
