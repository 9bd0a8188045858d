"""Kontekst autentykacji - maszyna stanow sesji.

Jedyne miejsce, ktore zapisuje do SessionStore. Przejscia::

    UNINITIALIZED -> LOADING -> AUTHENTICATED | UNAUTHENTICATED
    AUTHENTICATED <-> UNAUTHENTICATED   (login / logout)
    * -> ERROR -> UNAUTHENTICATED       (awaria bramki)

Kazde wywolanie ``login`` dostaje rosnacy token. ``logout`` ustawia
bariere: wynik logowania rozpoczetego przed ostatnim wylogowaniem jest
odrzucany. Miedzy wspolbieznymi logowaniami decyduje ``LoginPolicy``.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from ..schemas.auth import Credentials, Identity
from .errors import AuthError, CredentialError
from .gateway import AuthGateway, INVALID_CREDENTIALS
from .session import Session, SessionStatus, SessionStore

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Podaj nazwę użytkownika i hasło"
LOGIN_FAILED = "Wystąpił błąd podczas logowania"
SESSION_CHECK_FAILED = "Nie udało się sprawdzić sesji"


class LoginPolicy(str, Enum):
    """Ktory wynik wygrywa, gdy kilka logowan jest w toku."""
    LAST_COMPLETED = "last_completed"  # wynik zakonczony jako ostatni
    LATEST_ISSUED = "latest_issued"    # tylko ostatnio wywolane logowanie


SessionEndedCallback = Callable[[str], None]


class AuthContext:
    """Orkiestracja logowania i wylogowania nad SessionStore."""

    def __init__(
        self,
        store: SessionStore,
        gateway: AuthGateway,
        policy: LoginPolicy = LoginPolicy.LAST_COMPLETED,
        login_path: str = "/login",
    ):
        self.store = store
        self.gateway = gateway
        self.policy = policy
        self.login_path = login_path

        self._generation = 0
        self._latest_login = 0
        self._logout_barrier = 0
        self._session_ended: list[SessionEndedCallback] = []

    # === Stan ===

    @property
    def session(self) -> Session:
        return self.store.get()

    @property
    def user(self) -> Optional[Identity]:
        return self.store.get().identity

    @property
    def is_authenticated(self) -> bool:
        return self.store.get().is_authenticated

    @property
    def is_loading(self) -> bool:
        return self.store.get().is_loading

    @property
    def error(self) -> Optional[str]:
        return self.store.get().error

    def on_session_ended(self, callback: SessionEndedCallback) -> Callable[[], None]:
        """Zarejestruj callback wolany po wylogowaniu (dostaje sciezke logowania).

        Przekierowanie wykonuje warstwa prezentacji.
        """
        self._session_ended.append(callback)

        def unsubscribe() -> None:
            if callback in self._session_ended:
                self._session_ended.remove(callback)

        return unsubscribe

    # === Operacje ===

    async def activate(self) -> Session:
        """Rozstrzygnij stan poczatkowy przez ``gateway.restore()``.

        Wywolanie na juz aktywnym kontekscie nic nie zmienia.
        """
        if self.store.get().status is not SessionStatus.UNINITIALIZED:
            return self.store.get()

        token = self._next_token()
        self.store.set(Session.loading())

        try:
            identity = await self.gateway.restore()
        except AuthError as exc:
            logger.warning("Nie udalo sie odtworzyc sesji: %s", exc)
            if token == self._generation:
                self._fail(SESSION_CHECK_FAILED)
            return self.store.get()
        except Exception:
            logger.exception("Nieoczekiwany blad przy sprawdzaniu sesji")
            if token == self._generation:
                self._fail(SESSION_CHECK_FAILED)
            return self.store.get()

        if token == self._generation:
            if identity is not None:
                self.store.set(Session.authenticated(identity))
            else:
                self.store.set(Session.signed_out())
        return self.store.get()

    async def login(self, credentials: Credentials) -> bool:
        """Zaloguj. Zwraca True tylko gdy ten wynik zalogowal uzytkownika.

        Nigdy nie rzuca - bledy trafiaja do ``error`` sesji.
        """
        token = self._next_token()
        self._latest_login = token

        if not credentials.is_complete():
            return self._finish(token, Session.signed_out(error=MISSING_CREDENTIALS), False)

        self.store.set(Session.loading())

        try:
            identity = await self.gateway.verify(credentials)
        except CredentialError as exc:
            logger.info("Nieudane logowanie uzytkownika %s", credentials.username)
            message = str(exc) or INVALID_CREDENTIALS
            return self._finish(token, Session.signed_out(error=message), False)
        except AuthError as exc:
            logger.warning("Bramka autentykacji niedostepna: %s", exc)
            return self._finish_failed(token, LOGIN_FAILED)
        except Exception:
            logger.exception("Nieoczekiwany blad logowania uzytkownika %s", credentials.username)
            return self._finish_failed(token, LOGIN_FAILED)

        applied = self._finish(token, Session.authenticated(identity), True)
        if applied:
            logger.info("Zalogowano uzytkownika %s", identity.username)
        return applied

    async def logout(self) -> None:
        """Wyloguj. Sesja lokalna jest czyszczona nawet gdy backend zawiedzie."""
        self._logout_barrier = self._next_token()

        try:
            await self.gateway.invalidate()
        except AuthError as exc:
            logger.warning("Nie udalo sie uniewaznic sesji na serwerze: %s", exc)
        except Exception:
            logger.exception("Nieoczekiwany blad przy uniewaznianiu sesji")
        finally:
            self.store.set(Session.signed_out())

        logger.info("Wylogowano")
        for callback in list(self._session_ended):
            try:
                callback(self.login_path)
            except Exception:
                logger.exception("Blad callbacku zakonczenia sesji %r", callback)

    # === Wewnetrzne ===

    def _next_token(self) -> int:
        self._generation += 1
        return self._generation

    def _accepts(self, token: int) -> bool:
        """Czy wynik logowania o danym tokenie moze zapisac sesje."""
        if token < self._logout_barrier:
            return False
        if self.policy is LoginPolicy.LATEST_ISSUED:
            return token == self._latest_login
        return True

    def _finish(self, token: int, session: Session, result: bool) -> bool:
        if not self._accepts(token):
            logger.debug("Odrzucono nieaktualny wynik logowania (token %d)", token)
            return False
        self.store.set(session)
        return result

    def _finish_failed(self, token: int, message: str) -> bool:
        if not self._accepts(token):
            logger.debug("Odrzucono nieaktualny wynik logowania (token %d)", token)
            return False
        self._fail(message)
        return False

    def _fail(self, message: str) -> None:
        # ERROR jest widoczny dla subskrybentow, potem powrot do UNAUTHENTICATED
        self.store.set(Session.failed(message))
        self.store.set(Session.signed_out(error=message))
