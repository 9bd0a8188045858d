"""Router autentykacji - logowanie i wylogowanie (HTML i JSON API)."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..auth import (
    AuthContext,
    DatabaseAuthGateway,
    Session as AuthSession,
    SessionStatus,
    SessionStore,
    get_cookie_manager,
    get_current_identity,
    get_session,
    user_id_from_identity,
)
from ..config import TEMPLATES_DIR, get_settings
from ..database import get_db
from ..schemas.auth import Credentials, Identity, LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

templates = Jinja2Templates(directory=TEMPLATES_DIR)

NO_ADMIN_ACCESS = "To konto nie ma dostępu do panelu administratora"


def _auth_context(db: Session, user_id: Optional[int] = None) -> AuthContext:
    """Kontekst logowania dla jednego zadania."""
    return AuthContext(
        SessionStore(),
        DatabaseAuthGateway(db, user_id=user_id),
        login_path=get_settings().login_path,
    )


def _local_path(target: Optional[str], default: str) -> str:
    """Przekierowanie tylko w obrebie serwisu.

    Przegladarki traktuja "/\\host" jak "//host", wiec oba sa odrzucane.
    """
    if target and target.startswith("/") and target[1:2] not in ("/", "\\"):
        return target
    return default


def _login_form(
    request: Request,
    error: Optional[str] = None,
    username: str = "",
    next_path: str = "",
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "auth/login.html",
        {
            "title": "Logowanie",
            "error": error,
            "username": username,
            "next": next_path,
        },
        status_code=status_code,
    )


# === HTML ===

@router.get("/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    next_path: Optional[str] = Query(None, alias="from"),
    session: AuthSession = Depends(get_session),
):
    """Strona logowania.

    Sesja sprawdzana wzgledem bazy, tak samo jak w ``require_admin``.
    """
    settings = get_settings()

    if session.is_authenticated and session.identity.is_admin:
        return RedirectResponse(settings.admin_home_path, status_code=302)

    response = _login_form(request, next_path=next_path or "")

    cookies = get_cookie_manager()
    if not session.is_authenticated and cookies.has_cookie(request):
        cookies.destroy_session(response)

    return response


@router.post("/login", response_class=HTMLResponse)
async def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    next_path: str = Form("", alias="next"),
    db: Session = Depends(get_db),
):
    """Przetworz formularz logowania."""
    settings = get_settings()
    context = _auth_context(db)

    if not await context.login(Credentials(username=username, password=password)):
        return _login_form(
            request,
            error=context.error,
            username=username,
            next_path=next_path,
            status_code=401,
        )

    if not context.user.is_admin:
        return _login_form(request, error=NO_ADMIN_ACCESS, username=username, status_code=403)

    response = RedirectResponse(
        _local_path(next_path, settings.admin_home_path), status_code=302
    )
    get_cookie_manager().create_session(response, context.user)

    return response


@router.get("/logout")
@router.get("/admin/logout")
async def logout(request: Request, db: Session = Depends(get_db)):
    """Wyloguj uzytkownika."""
    cookies = get_cookie_manager()
    identity = cookies.read_identity(request)

    context = _auth_context(db, user_id=user_id_from_identity(identity))
    await context.logout()

    response = RedirectResponse(context.login_path, status_code=302)
    cookies.destroy_session(response)

    return response


# === JSON API ===

@router.post("/api/auth/login", response_model=Identity)
async def api_login(request: Request, db: Session = Depends(get_db)):
    """Logowanie z JSON body ``{username, password}``. Ustawia cookie sesji."""
    try:
        payload = LoginRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        return JSONResponse({"error": "Nieprawidłowe dane żądania"}, status_code=400)

    if not payload.username or not payload.password:
        return JSONResponse(
            {"error": "Nazwa użytkownika i hasło są wymagane"}, status_code=400
        )

    context = _auth_context(db)
    statuses: list[SessionStatus] = []
    context.store.subscribe(lambda session: statuses.append(session.status))

    if not await context.login(Credentials(username=payload.username, password=payload.password)):
        status_code = 500 if SessionStatus.ERROR in statuses else 401
        return JSONResponse({"error": context.error}, status_code=status_code)

    response = JSONResponse(context.user.model_dump())
    get_cookie_manager().create_session(response, context.user)

    return response


@router.post("/api/auth/logout")
async def api_logout(request: Request, db: Session = Depends(get_db)):
    """Wylogowanie - usuwa cookie sesji."""
    cookies = get_cookie_manager()
    identity = cookies.read_identity(request)

    context = _auth_context(db, user_id=user_id_from_identity(identity))
    await context.logout()

    response = JSONResponse({"status": "ok"})
    cookies.destroy_session(response)

    return response


@router.get("/api/auth/me", response_model=Identity)
async def api_me(identity: Identity = Depends(get_current_identity)):
    """Aktualnie zalogowany uzytkownik (401 jesli brak sesji)."""
    return identity
