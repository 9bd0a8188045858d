"""Zarzadzanie sesjami - podpisywane cookies."""

from typing import Optional

from fastapi import Request, Response
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
from pydantic import ValidationError

from ..config import get_settings
from ..schemas.auth import Identity


class SessionCookieManager:
    """Menedzer sesji oparty na podpisywanych cookies."""

    def __init__(
        self,
        secret_key: str,
        cookie_name: str = "admin_session",
        max_age: int = 86400,
    ):
        self.serializer = URLSafeTimedSerializer(secret_key, salt="admin-session")
        self.cookie_name = cookie_name
        self.max_age = max_age

    def create_session(self, response: Response, identity: Identity) -> None:
        """Utworz sesje dla uzytkownika (ustaw cookie)."""
        token = self.serializer.dumps(identity.model_dump())
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=self.max_age,
            httponly=True,
            samesite="lax",
        )

    def read_identity(self, request: Request) -> Optional[Identity]:
        """Odczytaj uzytkownika z cookie. None jesli brak lub niewazna sesja."""
        token = request.cookies.get(self.cookie_name)

        if not token:
            return None

        try:
            data = self.serializer.loads(token, max_age=self.max_age)
            return Identity.model_validate(data)
        except (BadSignature, SignatureExpired, ValidationError):
            return None

    def has_cookie(self, request: Request) -> bool:
        """Czy zadanie niesie cookie sesji (niezaleznie od jego waznosci)."""
        return bool(request.cookies.get(self.cookie_name))

    def destroy_session(self, response: Response) -> None:
        """Usun sesje (wylogowanie)."""
        response.delete_cookie(self.cookie_name)

    def expired_cookie_header(self) -> str:
        """Naglowek Set-Cookie kasujacy sesje - dla odpowiedzi z HTTPException."""
        response = Response()
        self.destroy_session(response)
        return response.headers["set-cookie"]


def get_cookie_manager() -> SessionCookieManager:
    """Menedzer cookies skonfigurowany z ustawien."""
    settings = get_settings()
    return SessionCookieManager(
        settings.secret_key,
        cookie_name=settings.session_cookie_name,
        max_age=settings.session_max_age,
    )

