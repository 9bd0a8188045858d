"""Straznik tras - renderuj albo przekieruj na podstawie sesji."""

from dataclasses import dataclass
from typing import Optional, Union

from .session import Session


@dataclass(frozen=True)
class Render:
    """Wyrenderuj strone. ``view`` to "loading" albo "content"."""

    view: str = "content"


@dataclass(frozen=True)
class RedirectTo:
    """Przekieruj pod wskazana sciezke."""

    path: str


Decision = Union[Render, RedirectTo]

LOADING = Render("loading")
CONTENT = Render("content")


@dataclass(frozen=True)
class RouteGuard:
    """Czysta funkcja sesji - ta sama sesja daje ta sama decyzje.

    Dopoki sesja nie jest rozstrzygnieta, nigdy nie przekierowuje.
    """

    login_path: str = "/login"
    required_role: Optional[str] = None

    def decide(self, session: Session) -> Decision:
        if session.is_loading:
            return LOADING

        if not session.is_authenticated:
            return RedirectTo(self.login_path)

        if self.required_role and session.identity.role != self.required_role:
            return RedirectTo(self.login_path)

        return CONTENT
