"""Asynchroniczny klient API panelu administracyjnego.

Klient trzyma sesje procesu (SessionStore) i loguje sie przez JSON API
serwisu::

    client = AdminClient("http://localhost:8000")
    await client.start()
    if await client.login("admin", "admin123"):
        print(await client.fetch_analytics())
    await client.close()
"""

import logging
from typing import Optional

import httpx

from .auth import (
    AuthContext,
    HttpAuthGateway,
    LoginPolicy,
    RedirectTo,
    RouteGuard,
    Session,
    close_session_store,
    init_session_store,
)
from .models import UserRole
from .schemas.auth import Credentials
from .schemas.booking import BookingAnalytics, PromoCodeApplyResult

logger = logging.getLogger(__name__)


class AdminClient:
    """Klient API z maszyna stanow sesji."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http_client: Optional[httpx.AsyncClient] = None,
        policy: LoginPolicy = LoginPolicy.LAST_COMPLETED,
    ):
        self.http = http_client or httpx.AsyncClient(base_url=base_url, timeout=10.0)
        self.policy = policy
        self.guard = RouteGuard(required_role=UserRole.ADMIN.value)
        self.context: Optional[AuthContext] = None
        self.redirect_to: Optional[str] = None

    @property
    def session(self) -> Session:
        return self._context.session

    @property
    def _context(self) -> AuthContext:
        if self.context is None:
            raise RuntimeError("Klient nie zostal uruchomiony (start)")
        return self.context

    async def start(self) -> Session:
        """Zainicjalizuj sesje procesu i sprawdz czy jestesmy zalogowani."""
        if self.context is None:
            self.context = AuthContext(
                init_session_store(),
                HttpAuthGateway(self.http),
                policy=self.policy,
            )
            self.context.on_session_ended(self._on_session_ended)
        return await self.context.activate()

    async def close(self) -> None:
        """Zamknij sesje procesu i polaczenie HTTP."""
        close_session_store()
        self.context = None
        await self.http.aclose()

    async def login(self, username: str, password: str) -> bool:
        self.redirect_to = None
        return await self._context.login(Credentials(username=username, password=password))

    async def logout(self) -> None:
        await self._context.logout()

    async def fetch_analytics(self) -> BookingAnalytics:
        """Statystyki rezerwacji - tylko dla zalogowanego admina."""
        self._require_admin()
        response = await self.http.get("/api/analytics")
        response.raise_for_status()
        return BookingAnalytics.model_validate(response.json())

    async def apply_promo_code(self, code: str, price: float) -> PromoCodeApplyResult:
        response = await self.http.post(
            "/api/promo-codes", json={"promoCode": code, "price": price}
        )
        response.raise_for_status()
        return PromoCodeApplyResult.model_validate(response.json())

    def _require_admin(self) -> None:
        decision = self.guard.decide(self.session)
        if isinstance(decision, RedirectTo):
            raise PermissionError(f"Wymagane logowanie: {decision.path}")
        if decision.view == "loading":
            raise PermissionError("Sesja nie jest jeszcze rozstrzygnieta")

    def _on_session_ended(self, login_path: str) -> None:
        logger.info("Sesja zakonczona - przejdz do %s", login_path)
        self.redirect_to = login_path
