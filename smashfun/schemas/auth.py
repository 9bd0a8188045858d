"""Schematy autentykacji."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class Identity(BaseModel):
    """Zalogowany uzytkownik - dane bez hasla."""

    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    role: Literal["admin", "user"]
    name: str = ""

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class Credentials(BaseModel):
    """Dane logowania - uzywane tylko na czas wywolania login."""

    username: str = ""
    password: str = ""

    def is_complete(self) -> bool:
        """Czy podano login i haslo."""
        return bool(self.username) and bool(self.password)

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


class LoginRequest(BaseModel):
    """Body zadania POST /api/auth/login."""

    username: Optional[str] = None
    password: Optional[str] = None


class ErrorResponse(BaseModel):
    """Blad zwracany przez API."""

    error: str
