"""Bramki autentykacji - weryfikacja loginu i uniewaznianie sesji.

AuthContext korzysta z bramki przez trzy asynchroniczne wywolania:
``verify`` (sprawdz dane logowania), ``invalidate`` (zakoncz sesje po
stronie backendu) i ``restore`` (odtworz sesje przy starcie).
"""

import logging
from typing import Optional, Protocol

import httpx
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DbSession

from ..models import User, UserRole
from ..schemas.auth import Credentials, Identity
from ..services.auth import AuthService
from .errors import CredentialError, GatewayUnavailable

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Nieprawidłowa nazwa użytkownika lub hasło"


class AuthGateway(Protocol):
    """Backend autentykacji."""

    async def verify(self, credentials: Credentials) -> Identity:
        """Zwroc uzytkownika albo rzuc CredentialError / GatewayUnavailable."""
        ...

    async def invalidate(self) -> None:
        """Zakoncz sesje po stronie backendu (moze rzucic GatewayUnavailable)."""
        ...

    async def restore(self) -> Optional[Identity]:
        """Odtworz istniejaca sesje. None jesli jej nie ma."""
        ...


def identity_from_user(user: User) -> Identity:
    """Dane uzytkownika bez hasla."""
    return Identity(
        id=str(user.id),
        username=user.username,
        role=UserRole(user.role).value,
        name=user.name,
    )


class DatabaseAuthGateway:
    """Bramka w procesie - uzytkownicy z bazy danych aplikacji.

    ``user_id`` wskazuje sesje odczytana z podpisanego cookie.
    """

    def __init__(self, db: DbSession, user_id: Optional[int] = None):
        self.auth = AuthService(db)
        self.user_id = user_id

    async def verify(self, credentials: Credentials) -> Identity:
        try:
            user = self.auth.authenticate(credentials.username, credentials.password)
            if user is not None:
                self.auth.touch_last_login(user)
        except SQLAlchemyError as exc:
            raise GatewayUnavailable("Baza danych niedostępna") from exc

        if user is None:
            raise CredentialError(INVALID_CREDENTIALS)

        self.user_id = user.id
        return identity_from_user(user)

    async def invalidate(self) -> None:
        self.user_id = None

    async def restore(self) -> Optional[Identity]:
        if self.user_id is None:
            return None

        try:
            user = self.auth.get_user_by_id(self.user_id)
        except SQLAlchemyError as exc:
            raise GatewayUnavailable("Baza danych niedostępna") from exc

        if not user or not user.is_active:
            return None

        return identity_from_user(user)


class HttpAuthGateway:
    """Bramka zdalna - JSON API serwisu (/api/auth/*).

    Sesja jest trzymana w cookie klienta httpx.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def verify(self, credentials: Credentials) -> Identity:
        response = await self._request(
            "POST",
            "/api/auth/login",
            json={"username": credentials.username, "password": credentials.password},
        )

        if response.status_code in (400, 401, 404):
            raise CredentialError(self._error_message(response) or INVALID_CREDENTIALS)

        self._raise_for_server_error(response)
        return self._identity(response)

    async def invalidate(self) -> None:
        try:
            response = await self._request("POST", "/api/auth/logout")
            self._raise_for_server_error(response)
        finally:
            # Lokalnie zawsze zapominamy sesje
            self.client.cookies.clear()

    async def restore(self) -> Optional[Identity]:
        response = await self._request("GET", "/api/auth/me")

        if response.status_code == 401:
            return None

        self._raise_for_server_error(response)
        return self._identity(response)

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise GatewayUnavailable(f"Błąd połączenia z serwerem: {exc}") from exc

    @staticmethod
    def _raise_for_server_error(response: httpx.Response) -> None:
        if response.is_error:
            raise GatewayUnavailable(f"Serwer zwrócił {response.status_code}")

    @staticmethod
    def _identity(response: httpx.Response) -> Identity:
        try:
            return Identity.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise GatewayUnavailable("Nieprawidłowa odpowiedź serwera") from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        try:
            return response.json().get("error")
        except (ValueError, AttributeError):
            return None
