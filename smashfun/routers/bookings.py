"""Platnosci za rezerwacje i strona potwierdzenia."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import TEMPLATES_DIR, get_settings
from ..database import get_db
from ..models import Booking
from ..schemas.booking import BookingListItem, PaymentNotification, PaymentRegistration
from ..services import (
    BookingNotFound,
    PaymentError,
    PaymentService,
    Przelewy24Client,
    Przelewy24Config,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bookings"])

templates = Jinja2Templates(directory=TEMPLATES_DIR)

PAYMENTS_DISABLED = "Płatności online są niedostępne"


async def get_p24_client():
    """Dependency - klient Przelewy24 na czas zadania."""
    client = Przelewy24Client(Przelewy24Config.from_settings())
    try:
        yield client
    finally:
        await client.aclose()


@router.post("/api/bookings/{booking_id}/payment", response_model=PaymentRegistration)
async def start_payment(
    booking_id: int,
    request: Request,
    db: Session = Depends(get_db),
    p24: Przelewy24Client = Depends(get_p24_client),
):
    """Zarejestruj transakcje i zwroc adres bramki ``{paymentUrl}``."""
    if not p24.config.is_configured:
        return JSONResponse({"error": PAYMENTS_DISABLED}, status_code=503)

    site_url = get_settings().site_url or str(request.base_url)

    try:
        url = await PaymentService(db, p24).start(booking_id, site_url)
    except BookingNotFound as exc:
        return JSONResponse({"error": str(exc)}, status_code=404)
    except PaymentError as exc:
        return JSONResponse({"error": str(exc)}, status_code=502)

    return PaymentRegistration(payment_url=url)


@router.post("/api/bookings/payment-webhook")
async def payment_webhook(
    request: Request,
    db: Session = Depends(get_db),
    p24: Przelewy24Client = Depends(get_p24_client),
):
    """Powiadomienie z Przelewy24 (urlStatus) - potwierdz i oznacz jako oplacona."""
    try:
        notification = PaymentNotification.model_validate(await request.json())
    except (ValueError, ValidationError):
        return JSONResponse({"error": "Nieprawidłowe powiadomienie"}, status_code=400)

    if not p24.config.is_configured:
        logger.error("Powiadomienie %s bez konfiguracji Przelewy24", notification.session_id)
        return JSONResponse({"error": PAYMENTS_DISABLED}, status_code=503)

    try:
        await PaymentService(db, p24).confirm(notification)
    except BookingNotFound as exc:
        logger.error("Powiadomienie dla nieznanej rezerwacji: %s", exc)
        return JSONResponse({"error": "Nie znaleziono rezerwacji"}, status_code=404)
    except PaymentError as exc:
        return JSONResponse({"error": str(exc)}, status_code=400)
    except SQLAlchemyError:
        logger.exception("Nie udalo sie zapisac platnosci %s", notification.session_id)
        db.rollback()
        return JSONResponse({"error": "Nie udało się zaktualizować rezerwacji"}, status_code=500)

    return {"status": "OK"}


@router.get("/rezerwacja/potwierdzenie/{booking_id}", response_class=HTMLResponse)
async def booking_confirmation(
    request: Request,
    booking_id: int,
    db: Session = Depends(get_db),
):
    """Strona powrotu z bramki (urlReturn)."""
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if booking is None:
        raise HTTPException(status_code=404, detail="Nie udało się znaleźć rezerwacji")

    return templates.TemplateResponse(
        request,
        "booking_confirmation.html",
        {
            "title": "Potwierdzenie rezerwacji",
            "booking": BookingListItem.model_validate(booking),
        },
    )
