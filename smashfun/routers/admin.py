"""Panel administracyjny - strony HTML chronione rola admin."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from ..auth import require_admin
from ..config import TEMPLATES_DIR, get_settings
from ..database import get_db
from ..models import Booking
from ..schemas.auth import Identity
from ..schemas.booking import BookingListItem
from ..schemas.pages import RedirectConfig
from ..services import AnalyticsService

router = APIRouter(tags=["admin"])

templates = Jinja2Templates(directory=TEMPLATES_DIR)

# Sekcje panelu, ktore jeszcze nie sa gotowe
UNFINISHED_SECTIONS = {
    "calendar": "Kalendarz",
    "customers": "Klienci",
    "discounts": "Rabaty",
    "packages": "Pakiety",
    "rooms": "Pokoje",
    "settings": "Ustawienia",
    "users": "Użytkownicy",
}


@router.get("/admin")
async def admin_root(user: Identity = Depends(require_admin)):
    """Strona startowa panelu - przekierowanie na liste rezerwacji."""
    return RedirectResponse(get_settings().admin_home_path, status_code=302)


@router.get("/admin/bookings", response_class=HTMLResponse)
async def admin_bookings(
    request: Request,
    user: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Lista rezerwacji (najnowsze terminy na gorze)."""
    bookings = db.query(Booking).order_by(Booking.date.desc(), Booking.id.desc()).all()

    return templates.TemplateResponse(
        request,
        "admin/bookings.html",
        {
            "title": f"{get_settings().app_name} - Rezerwacje",
            "user": user,
            "bookings": [BookingListItem.model_validate(b) for b in bookings],
        },
    )


@router.get("/admin/dashboard", response_class=HTMLResponse)
async def admin_dashboard(
    request: Request,
    user: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Podsumowanie rezerwacji i przychodow."""
    return templates.TemplateResponse(
        request,
        "admin/dashboard.html",
        {
            "title": f"{get_settings().app_name} - Statystyki",
            "user": user,
            "analytics": AnalyticsService(db).summary(),
        },
    )


@router.get("/admin/{section}", response_class=HTMLResponse)
async def admin_unfinished_section(
    request: Request,
    section: str,
    user: Identity = Depends(require_admin),
):
    """Sekcje w budowie - komunikat z odeslaniem do listy rezerwacji."""
    if section not in UNFINISHED_SECTIONS:
        raise HTTPException(status_code=404, detail="Strona nie znaleziona")

    return templates.TemplateResponse(
        request,
        "under_development.html",
        {
            "title": UNFINISHED_SECTIONS[section],
            "user": user,
            "redirect": RedirectConfig(
                redirect_url=get_settings().admin_home_path,
                redirect_text="listę rezerwacji",
            ),
        },
    )
