"""Testy stanu sesji i magazynu SessionStore."""

import pytest

from smashfun.auth import (
    Session,
    SessionStatus,
    SessionStore,
    close_session_store,
    get_session_store,
    init_session_store,
)
from tests.fakes import ADMIN


class TestSession:
    def test_default_is_uninitialized(self):
        session = Session()
        assert session.status is SessionStatus.UNINITIALIZED
        assert session.identity is None
        assert session.is_loading

    def test_authenticated_requires_identity(self):
        with pytest.raises(ValueError):
            Session(status=SessionStatus.AUTHENTICATED)

    @pytest.mark.parametrize("status", [
        SessionStatus.UNINITIALIZED,
        SessionStatus.LOADING,
        SessionStatus.UNAUTHENTICATED,
        SessionStatus.ERROR,
    ])
    def test_identity_only_when_authenticated(self, status):
        with pytest.raises(ValueError):
            Session(identity=ADMIN, status=status)

    def test_constructors(self):
        assert Session.authenticated(ADMIN).is_authenticated
        assert Session.signed_out(error="x").error == "x"
        assert Session.failed("boom").status is SessionStatus.ERROR
        assert Session.loading().is_loading


class TestSessionStore:
    def test_get_returns_last_set(self):
        store = SessionStore()
        store.set(Session.authenticated(ADMIN))
        assert store.get().identity == ADMIN

    def test_subscribers_notified_in_registration_order(self):
        store = SessionStore()
        calls = []
        store.subscribe(lambda s: calls.append(("first", s.status)))
        store.subscribe(lambda s: calls.append(("second", s.status)))

        store.set(Session.loading())

        assert calls == [
            ("first", SessionStatus.LOADING),
            ("second", SessionStatus.LOADING),
        ]

    def test_unsubscribe_is_idempotent(self):
        store = SessionStore()
        calls = []
        unsubscribe = store.subscribe(calls.append)

        unsubscribe()
        unsubscribe()
        store.set(Session.loading())

        assert calls == []

    def test_same_callback_registered_twice(self):
        store = SessionStore()
        calls = []
        first = store.subscribe(calls.append)
        store.subscribe(calls.append)

        first()
        store.set(Session.loading())

        assert len(calls) == 1

    def test_failing_subscriber_does_not_block_others(self):
        store = SessionStore()
        calls = []

        def broken(session):
            raise RuntimeError("subscriber bug")

        store.subscribe(broken)
        store.subscribe(calls.append)
        store.set(Session.signed_out())

        assert len(calls) == 1
        assert store.get().status is SessionStatus.UNAUTHENTICATED


class TestProcessStore:
    def test_lifecycle(self):
        with pytest.raises(RuntimeError):
            get_session_store()

        store = init_session_store()
        assert get_session_store() is store
        assert init_session_store() is store

        close_session_store()
        with pytest.raises(RuntimeError):
            get_session_store()

    def test_close_resets_state(self):
        store = init_session_store()
        store.set(Session.authenticated(ADMIN))

        close_session_store()

        assert init_session_store().get().status is SessionStatus.UNINITIALIZED
