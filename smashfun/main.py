"""Główna aplikacja FastAPI."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from . import __version__
from .config import STATIC_DIR, get_settings
from .database import init_db
from .routers import (
    auth_router,
    admin_router,
    analytics_router,
    promo_codes_router,
    pages_router,
    bookings_router,
)
from .services import get_data_client

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle aplikacji - inicjalizacja i cleanup."""
    # Startup
    init_db()
    if not get_data_client().is_available:
        logger.warning("Klient Supabase niedostepny - funkcje danych zewnetrznych wylaczone")
    logger.info("Uruchomiono %s %s", settings.app_name, __version__)
    yield
    # Shutdown
    logger.info("Zatrzymano %s", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Rezerwacje, panel administracyjny i API serwisu Smash & Fun",
    version=__version__,
    lifespan=lifespan,
)

# Static files
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Routers - auth przed admin (/admin/logout przed /admin/{section})
app.include_router(auth_router)
app.include_router(admin_router)
app.include_router(analytics_router)
app.include_router(promo_codes_router)
app.include_router(pages_router)
app.include_router(bookings_router)


@app.get("/health")
async def health_check():
    """Endpoint do sprawdzania stanu aplikacji."""
    return {
        "status": "ok",
        "version": __version__,
        "data_client": "configured" if get_data_client().is_available else "unavailable",
    }


def run():
    """Uruchom serwer (dla CLI)."""
    import uvicorn

    uvicorn.run(
        "smashfun.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
