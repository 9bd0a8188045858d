"""Modul autentykacji - sesje, kontekst logowania i ochrona routerow."""

from .errors import AuthError, CredentialError, GatewayUnavailable
from .session import (
    Session,
    SessionStatus,
    SessionStore,
    init_session_store,
    get_session_store,
    close_session_store,
)
from .gateway import AuthGateway, DatabaseAuthGateway, HttpAuthGateway
from .context import AuthContext, LoginPolicy
from .guards import RouteGuard, Render, RedirectTo
from .cookies import SessionCookieManager, get_cookie_manager
from .dependencies import (
    get_session,
    get_current_identity,
    require_role,
    require_admin,
    user_id_from_identity,
)

__all__ = [
    # Errors
    "AuthError",
    "CredentialError",
    "GatewayUnavailable",
    # Session
    "Session",
    "SessionStatus",
    "SessionStore",
    "init_session_store",
    "get_session_store",
    "close_session_store",
    # Gateways
    "AuthGateway",
    "DatabaseAuthGateway",
    "HttpAuthGateway",
    # Context
    "AuthContext",
    "LoginPolicy",
    # Guards
    "RouteGuard",
    "Render",
    "RedirectTo",
    # Cookies
    "SessionCookieManager",
    "get_cookie_manager",
    # FastAPI
    "get_session",
    "get_current_identity",
    "require_role",
    "require_admin",
    "user_id_from_identity",
]
