"""Schematy Pydantic dla walidacji danych."""

from .auth import Identity, Credentials, LoginRequest, ErrorResponse
from .booking import (
    PromoCodeApplyRequest,
    PromoCodeApplyResult,
    PromoCodeValidation,
    PackageStats,
    BookingAnalytics,
    BookingListItem,
    PaymentNotification,
    PaymentRegistration,
)
from .pages import RedirectConfig

__all__ = [
    # Auth
    "Identity",
    "Credentials",
    "LoginRequest",
    "ErrorResponse",
    # Booking
    "PromoCodeApplyRequest",
    "PromoCodeApplyResult",
    "PromoCodeValidation",
    "PackageStats",
    "BookingAnalytics",
    "BookingListItem",
    "PaymentNotification",
    "PaymentRegistration",
    # Pages
    "RedirectConfig",
]
