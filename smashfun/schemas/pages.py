"""Schematy stron publicznych."""

from pydantic import BaseModel


class RedirectConfig(BaseModel):
    """Konfiguracja strony "w budowie" - dokad odeslac uzytkownika."""

    redirect_url: str = "/booking"
    redirect_text: str = "stronę rezerwacji"
    show_redirect: bool = True
