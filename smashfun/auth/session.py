"""Stan sesji uzytkownika i magazyn stanu z subskrypcjami.

Sesja to niezmienny snapshot: ``identity`` jest ustawione wtedy i tylko
wtedy, gdy ``status`` to AUTHENTICATED. Magazyn trzyma biezacy snapshot
i synchronicznie powiadamia subskrybentow (w kolejnosci rejestracji).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..schemas.auth import Identity

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Stany maszyny sesji."""
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"
    ERROR = "error"


@dataclass(frozen=True)
class Session:
    """Snapshot stanu autentykacji."""

    identity: Optional[Identity] = None
    status: SessionStatus = SessionStatus.UNINITIALIZED
    error: Optional[str] = None

    def __post_init__(self):
        if (self.identity is not None) != (self.status is SessionStatus.AUTHENTICATED):
            raise ValueError(
                f"Sesja w stanie {self.status.value} nie moze miec identity={self.identity!r}"
            )

    @classmethod
    def loading(cls) -> "Session":
        return cls(status=SessionStatus.LOADING)

    @classmethod
    def authenticated(cls, identity: Identity) -> "Session":
        return cls(identity=identity, status=SessionStatus.AUTHENTICATED)

    @classmethod
    def signed_out(cls, error: Optional[str] = None) -> "Session":
        return cls(status=SessionStatus.UNAUTHENTICATED, error=error)

    @classmethod
    def failed(cls, message: str) -> "Session":
        return cls(status=SessionStatus.ERROR, error=message)

    @property
    def is_authenticated(self) -> bool:
        return self.status is SessionStatus.AUTHENTICATED

    @property
    def is_loading(self) -> bool:
        """Sesja jeszcze nierozstrzygnieta."""
        return self.status in (SessionStatus.UNINITIALIZED, SessionStatus.LOADING)


Subscriber = Callable[[Session], None]


class _Subscription:
    """Pojedyncza rejestracja - ten sam callback moze byc zarejestrowany wielokrotnie."""

    __slots__ = ("callback",)

    def __init__(self, callback: Subscriber):
        self.callback = callback


class SessionStore:
    """Magazyn biezacej sesji.

    Przeznaczony dla jednej petli zdarzen - nie synchronizuje zapisow
    z wielu watkow.
    """

    def __init__(self, initial: Optional[Session] = None):
        self._session = initial or Session()
        self._subscriptions: list[_Subscription] = []

    def get(self) -> Session:
        """Zwroc biezacy snapshot."""
        return self._session

    def set(self, session: Session) -> None:
        """Podmien snapshot i powiadom subskrybentow."""
        self._session = session
        for subscription in list(self._subscriptions):
            try:
                subscription.callback(session)
            except Exception:
                # Blad jednego subskrybenta nie blokuje pozostalych
                logger.exception("Blad subskrybenta sesji %r", subscription.callback)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Zarejestruj callback. Zwraca funkcje wyrejestrowujaca (idempotentna)."""
        subscription = _Subscription(callback)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        return unsubscribe

    def clear(self) -> None:
        """Usun subskrybentow i wroc do stanu poczatkowego."""
        self._subscriptions.clear()
        self._session = Session()


# === Sesja procesu ===

_store: Optional[SessionStore] = None


def init_session_store() -> SessionStore:
    """Utworz magazyn sesji procesu (przy starcie aplikacji)."""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store


def get_session_store() -> SessionStore:
    """Pobierz magazyn sesji procesu."""
    if _store is None:
        raise RuntimeError("Magazyn sesji nie zostal zainicjalizowany (init_session_store)")
    return _store


def close_session_store() -> None:
    """Zamknij magazyn sesji procesu (przy zamykaniu aplikacji)."""
    global _store
    if _store is not None:
        _store.clear()
        _store = None
