"""Dependencies FastAPI do ochrony endpointow."""

from typing import Optional
from urllib.parse import urlencode

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session as DbSession

from ..config import get_settings
from ..database import get_db
from ..models import UserRole
from ..schemas.auth import Identity
from .context import AuthContext
from .cookies import get_cookie_manager
from .gateway import DatabaseAuthGateway
from .guards import RedirectTo, RouteGuard
from .session import Session, SessionStore


def user_id_from_identity(identity: Optional[Identity]) -> Optional[int]:
    if identity is None or not identity.id.isdigit():
        return None
    return int(identity.id)


async def get_session(
    request: Request,
    db: DbSession = Depends(get_db),
) -> Session:
    """Dependency - sesja zadania rozstrzygnieta wzgledem bazy.

    Cookie wskazuje uzytkownika, baza potwierdza ze konto nadal jest aktywne.
    """
    settings = get_settings()
    identity = get_cookie_manager().read_identity(request)
    context = AuthContext(
        SessionStore(),
        DatabaseAuthGateway(db, user_id=user_id_from_identity(identity)),
        login_path=settings.login_path,
    )
    return await context.activate()


async def get_current_identity(session: Session = Depends(get_session)) -> Identity:
    """Dependency - zwraca zalogowanego usera lub rzuca 401.

    Uzyj dla endpointow API (JSON response).
    """
    if not session.is_authenticated:
        raise HTTPException(status_code=401, detail="Nie zalogowany")

    return session.identity


def require_role(role: Optional[str]):
    """Dependency factory - dla stron HTML redirect do /login zamiast 401.

    Niezalogowany dostaje ``/login?from=<sciezka>``, zalogowany bez roli
    samo ``/login``.
    """
    async def dependency(
        request: Request,
        session: Session = Depends(get_session),
    ) -> Identity:
        guard = RouteGuard(login_path=get_settings().login_path, required_role=role)
        decision = guard.decide(session)

        if isinstance(decision, RedirectTo):
            headers = {"Location": decision.path}
            if not session.is_authenticated:
                headers["Location"] = f"{decision.path}?{urlencode({'from': request.url.path})}"

                # Cookie bez aktywnego konta (usuniete / dezaktywowane)
                cookies = get_cookie_manager()
                if cookies.has_cookie(request):
                    headers["Set-Cookie"] = cookies.expired_cookie_header()

            raise HTTPException(status_code=303, detail="Redirect", headers=headers)

        return session.identity

    return dependency


require_admin = require_role(UserRole.ADMIN.value)
