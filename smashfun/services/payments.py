"""Platnosci za rezerwacje - rejestracja i potwierdzanie transakcji Przelewy24."""

import logging

from sqlalchemy.orm import Session

from ..models import Booking, PaymentStatus
from ..schemas.booking import PaymentNotification
from .przelewy24 import PaymentError, Przelewy24Client

logger = logging.getLogger(__name__)

SESSION_PREFIX = "BOOKING_"


class BookingNotFound(Exception):
    """Rezerwacja wskazana w platnosci nie istnieje."""


def booking_id_from_session(session_id: str) -> int:
    """``BOOKING_12`` -> 12."""
    raw = session_id[len(SESSION_PREFIX):] if session_id.startswith(SESSION_PREFIX) else session_id
    try:
        return int(raw)
    except ValueError:
        raise BookingNotFound(f"Nieprawidlowy identyfikator sesji: {session_id}") from None


class PaymentService:
    """Laczy rezerwacje z bramka Przelewy24."""

    def __init__(self, db: Session, p24: Przelewy24Client):
        self.db = db
        self.p24 = p24

    def get_booking(self, booking_id: int) -> Booking:
        booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
        if booking is None:
            raise BookingNotFound(f"Rezerwacja {booking_id} nie istnieje")
        return booking

    async def start(self, booking_id: int, site_url: str) -> str:
        """Zarejestruj platnosc za cala rezerwacje. Zwraca URL bramki."""
        booking = self.get_booking(booking_id)

        if booking.payment_status is PaymentStatus.FULLY_PAID:
            raise PaymentError("Rezerwacja jest już opłacona")

        return await self.p24.register_transaction(
            booking_id=booking.id,
            amount_pln=booking.total_price,
            email=booking.customer_email,
            description=f"Rezerwacja Smash&Fun - {booking.package_name}",
            site_url=site_url,
        )

    async def confirm(self, notification: PaymentNotification) -> Booking:
        """Obsluz powiadomienie z bramki: zweryfikuj i oznacz rezerwacje jako oplacona."""
        booking = self.get_booking(booking_id_from_session(notification.session_id))

        verified = await self.p24.verify_transaction(
            notification.session_id, notification.order_id, notification.amount
        )
        if not verified:
            logger.error("Weryfikacja transakcji %s nie powiodla sie", notification.session_id)
            raise PaymentError("Nieprawidłowa transakcja")

        booking.payment_status = PaymentStatus.FULLY_PAID
        booking.paid_amount = notification.amount / 100
        self.db.commit()

        logger.info("Rezerwacja %s oplacona (%.2f PLN)", booking.id, booking.paid_amount)
        return booking
