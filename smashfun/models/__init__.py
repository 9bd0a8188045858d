"""Modele bazy danych systemu rezerwacji."""

from .user import User, UserRole
from .booking import Booking, PaymentStatus, PromoCode

__all__ = [
    # User
    "User",
    "UserRole",
    # Booking
    "Booking",
    "PaymentStatus",
    "PromoCode",
]
