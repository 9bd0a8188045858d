"""Klient Supabase - tworzony z konfiguracji srodowiska."""

import logging
from functools import lru_cache
from typing import Optional

from supabase import Client, create_client

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)


class DataClientProvider:
    """Dostarcza klienta Supabase albo None, gdy brak konfiguracji.

    Brak konfiguracji nie zatrzymuje aplikacji - funkcje korzystajace
    z klienta staja sie nieaktywne.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._client: Optional[Client] = None
        self._resolved = False

    @property
    def client(self) -> Optional[Client]:
        if not self._resolved:
            self._client = self._create()
            self._resolved = True
        return self._client

    @property
    def is_available(self) -> bool:
        return self.client is not None

    def _create(self) -> Optional[Client]:
        url = self.settings.supabase_url
        key = self.settings.supabase_anon_key

        if not url or not key:
            logger.error(
                "Brak konfiguracji Supabase: ustaw zmienne SUPABASE_URL i SUPABASE_ANON_KEY"
            )
            return None

        try:
            return create_client(url, key)
        except Exception as exc:
            logger.error("Nie udalo sie utworzyc klienta Supabase: %s", exc)
            return None


@lru_cache
def get_data_client() -> DataClientProvider:
    """Dostawca klienta Supabase dla calego procesu."""
    return DataClientProvider()
