"""Testy RouteGuard."""

import pytest

from smashfun.auth import RedirectTo, Render, RouteGuard, Session
from tests.fakes import ADMIN, USER


@pytest.mark.parametrize("session", [Session(), Session.loading()])
def test_unresolved_session_never_redirects(session):
    decision = RouteGuard(required_role="admin").decide(session)
    assert decision == Render("loading")


def test_authenticated_renders_content():
    assert RouteGuard().decide(Session.authenticated(USER)) == Render("content")


@pytest.mark.parametrize("session", [
    Session.signed_out(),
    Session.signed_out(error="Nieprawidłowe dane"),
    Session.failed("boom"),
])
def test_unauthenticated_redirects_to_login(session):
    assert RouteGuard().decide(session) == RedirectTo("/login")


def test_role_check():
    guard = RouteGuard(login_path="/logowanie", required_role="admin")

    assert guard.decide(Session.authenticated(ADMIN)) == Render("content")
    assert guard.decide(Session.authenticated(USER)) == RedirectTo("/logowanie")


def test_decide_is_pure():
    guard = RouteGuard(required_role="admin")
    session = Session.authenticated(ADMIN)

    decisions = {guard.decide(session) for _ in range(5)}

    assert decisions == {Render("content")}
