"""Serwisy biznesowe."""

from .auth import AuthService
from .promo_codes import PromoCodeService
from .analytics import AnalyticsService
from .przelewy24 import Przelewy24Client, Przelewy24Config, PaymentError, generate_sign
from .data_client import DataClientProvider, get_data_client
from .payments import BookingNotFound, PaymentService

__all__ = [
    "AuthService",
    "PromoCodeService",
    "AnalyticsService",
    "Przelewy24Client",
    "Przelewy24Config",
    "PaymentError",
    "generate_sign",
    "DataClientProvider",
    "get_data_client",
    "BookingNotFound",
    "PaymentService",
]
