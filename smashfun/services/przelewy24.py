"""Integracja z bramka platnosci Przelewy24."""

import hashlib
import json
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)

PRODUCTION_URL = "https://secure.przelewy24.pl"
SANDBOX_URL = "https://sandbox.przelewy24.pl"

CURRENCY = "PLN"


class PaymentError(Exception):
    """Blad rejestracji transakcji w Przelewy24."""


@dataclass(frozen=True)
class Przelewy24Config:
    """Dane sprzedawcy w Przelewy24."""

    merchant_id: str = ""
    pos_id: str = ""
    api_key: str = ""
    crc_key: str = ""
    environment: str = "sandbox"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Przelewy24Config":
        settings = settings or get_settings()
        return cls(
            merchant_id=settings.p24_merchant_id,
            pos_id=settings.p24_pos_id,
            api_key=settings.p24_api_key,
            crc_key=settings.p24_crc_key,
            environment=settings.p24_environment,
        )

    @property
    def base_url(self) -> str:
        return PRODUCTION_URL if self.environment == "production" else SANDBOX_URL

    @property
    def is_configured(self) -> bool:
        return all((self.merchant_id, self.pos_id, self.api_key, self.crc_key))


def generate_sign(
    session_id: str,
    merchant_id: int,
    amount: int,
    currency: str,
    crc_key: str,
) -> str:
    """Podpis SHA-384 wymagany przez API Przelewy24."""
    payload = json.dumps(
        {
            "sessionId": session_id,
            "merchantId": merchant_id,
            "amount": amount,
            "currency": currency,
            "crc": crc_key,
        },
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha384(payload.encode("utf-8")).hexdigest()


def to_grosze(amount_pln: float) -> int:
    """Kwota w groszach (1 PLN = 100 gr), ulamki obcinane."""
    return int(amount_pln * 100)


class Przelewy24Client:
    """Klient REST API Przelewy24."""

    def __init__(self, config: Przelewy24Config, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.client = client or httpx.AsyncClient(base_url=config.base_url, timeout=10.0)

    @property
    def _auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self.config.pos_id, self.config.api_key)

    def _sign(self, session_id: str, amount: int) -> str:
        return generate_sign(
            session_id,
            int(self.config.merchant_id),
            amount,
            CURRENCY,
            self.config.crc_key,
        )

    async def register_transaction(
        self,
        booking_id: int,
        amount_pln: float,
        email: str,
        description: str,
        site_url: str,
    ) -> str:
        """Zarejestruj transakcje. Zwraca URL, pod ktory trzeba wyslac klienta."""
        session_id = f"BOOKING_{booking_id}"
        amount = to_grosze(amount_pln)
        site_url = site_url.rstrip("/")

        params = {
            "merchantId": int(self.config.merchant_id),
            "posId": int(self.config.pos_id),
            "sessionId": session_id,
            "amount": amount,
            "currency": CURRENCY,
            "description": description,
            "email": email,
            "country": "PL",
            "language": "pl",
            "urlReturn": f"{site_url}/rezerwacja/potwierdzenie/{booking_id}",
            "urlStatus": f"{site_url}/api/bookings/payment-webhook",
            "sign": self._sign(session_id, amount),
        }

        try:
            response = await self.client.post(
                "/api/v1/transaction/register", json=params, auth=self._auth
            )
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Blad rejestracji transakcji %s: %s", session_id, exc)
            raise PaymentError("Nie udało się zarejestrować płatności") from exc

        token = (data.get("data") or {}).get("token") if isinstance(data, dict) else None
        if not token:
            logger.error("Przelewy24 nie zwrocilo tokenu dla %s: %s", session_id, data)
            raise PaymentError("Brak tokenu transakcji z Przelewy24")

        return f"{self.config.base_url}/trnRequest/{token}"

    async def verify_transaction(self, session_id: str, order_id: int, amount: int) -> bool:
        """Potwierdz transakcje po powiadomieniu z Przelewy24."""
        params = {
            "merchantId": int(self.config.merchant_id),
            "posId": int(self.config.pos_id),
            "sessionId": session_id,
            "amount": amount,
            "currency": CURRENCY,
            "orderId": order_id,
            "sign": self._sign(session_id, amount),
        }

        try:
            response = await self.client.put(
                "/api/v1/transaction/verify", json=params, auth=self._auth
            )
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Blad weryfikacji transakcji %s: %s", session_id, exc)
            return False

        if not isinstance(data, dict):
            return False
        return (data.get("data") or {}).get("status") == "success"

    async def aclose(self) -> None:
        await self.client.aclose()
