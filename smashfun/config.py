"""Konfiguracja aplikacji."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"


class Settings(BaseSettings):
    """Ustawienia aplikacji."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignoruj dodatkowe zmienne z .env
    )

    # Database
    database_url: str = "sqlite:///./smashfun.db"

    # Application
    app_name: str = "Smash & Fun"
    debug: bool = False
    secret_key: str = "change-this-in-production"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Sesja panelu admina
    session_cookie_name: str = "admin_session"
    session_max_age: int = 86400  # 24 godziny
    login_path: str = "/login"
    admin_home_path: str = "/admin/bookings"

    # Przelewy24
    p24_merchant_id: str = ""
    p24_pos_id: str = ""
    p24_api_key: str = ""
    p24_crc_key: str = ""
    p24_environment: Literal["sandbox", "production"] = "sandbox"
    site_url: str = ""  # Adres publiczny dla urlReturn / urlStatus (pusty = z zadania)

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""


@lru_cache
def get_settings() -> Settings:
    """Pobierz ustawienia (z cache)."""
    return Settings()
