"""Strony publiczne serwisu."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..config import TEMPLATES_DIR, get_settings
from ..schemas.pages import RedirectConfig

router = APIRouter(tags=["pages"])

templates = Jinja2Templates(directory=TEMPLATES_DIR)


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Strona glowna."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": get_settings().app_name},
    )


@router.get("/booking", response_class=HTMLResponse)
async def booking(request: Request):
    """Strona rezerwacji."""
    return templates.TemplateResponse(
        request,
        "booking.html",
        {"title": "Rezerwacja"},
    )


@router.get("/booking/unfinished", response_class=HTMLResponse)
async def booking_unfinished(request: Request):
    """Funkcja w budowie - odeslanie do strony rezerwacji."""
    return templates.TemplateResponse(
        request,
        "under_development.html",
        {
            "title": "Funkcja w budowie",
            "redirect": RedirectConfig(),
        },
    )
