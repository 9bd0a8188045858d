"""Routery API."""

from .auth import router as auth_router
from .admin import router as admin_router
from .analytics import router as analytics_router
from .promo_codes import router as promo_codes_router
from .pages import router as pages_router
from .bookings import router as bookings_router

__all__ = [
    "auth_router",
    "admin_router",
    "analytics_router",
    "promo_codes_router",
    "pages_router",
    "bookings_router",
]
