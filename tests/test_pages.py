"""Testy stron HTML: logowanie, panel admina, strony w budowie."""

import pytest

from smashfun.models import User


def login_form(client, username="admin", password="admin123", next_path=""):
    return client.post(
        "/login",
        data={"username": username, "password": password, "next": next_path},
        follow_redirects=False,
    )


class TestLoginPage:
    def test_form(self, client):
        response = client.get("/login")

        assert response.status_code == 200
        assert "Panel administratora" in response.text

    def test_successful_login_redirects_to_admin(self, client):
        response = login_form(client)

        assert response.status_code == 302
        assert response.headers["location"] == "/admin/bookings"
        assert "admin_session" in response.cookies

    def test_redirects_back_to_requested_page(self, client):
        response = login_form(client, next_path="/admin/dashboard")
        assert response.headers["location"] == "/admin/dashboard"

    def test_ignores_external_redirect(self, client):
        response = login_form(client, next_path="//evil.example.com")
        assert response.headers["location"] == "/admin/bookings"

    def test_ignores_backslash_redirect(self, client):
        response = login_form(client, next_path="/\\evil.example.com")
        assert response.headers["location"] == "/admin/bookings"

    def test_wrong_password_shows_error(self, client):
        response = login_form(client, password="wrong")

        assert response.status_code == 401
        assert "Nieprawidłowa nazwa użytkownika lub hasło" in response.text
        assert "admin_session" not in response.cookies

    def test_non_admin_is_refused(self, client):
        response = login_form(client, username="user", password="user123")

        assert response.status_code == 403
        assert "nie ma dostępu do panelu" in response.text

    def test_logged_in_admin_skips_form(self, admin_client):
        response = admin_client.get("/login", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/admin/bookings"


class TestAdminGuard:
    def test_anonymous_redirected_with_origin(self, client):
        response = client.get("/admin/bookings", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/login?from=%2Fadmin%2Fbookings"

    def test_non_admin_redirected_to_login(self, client):
        client.post("/api/auth/login", json={"username": "user", "password": "user123"})

        response = client.get("/admin/bookings", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/login"

    def test_admin_sees_bookings(self, admin_client):
        response = admin_client.get("/admin/bookings")

        assert response.status_code == 200
        assert "Jan Kowalski" in response.text
        assert "DEPOSIT_PAID" in response.text

    def test_admin_root_redirects_home(self, admin_client):
        response = admin_client.get("/admin", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/admin/bookings"

    def test_dashboard(self, admin_client):
        response = admin_client.get("/admin/dashboard")

        assert response.status_code == 200
        assert "399.00 PLN" in response.text

    @pytest.mark.parametrize("section", ["discounts", "packages", "rooms", "users"])
    def test_unfinished_sections(self, admin_client, section):
        response = admin_client.get(f"/admin/{section}")

        assert response.status_code == 200
        assert "Funkcja w budowie" in response.text
        assert 'href="/admin/bookings"' in response.text

    def test_unknown_section(self, admin_client):
        assert admin_client.get("/admin/nie-ma").status_code == 404


class TestStaleSession:
    """Wazne cookie, ale konto juz nieaktywne."""

    @pytest.fixture
    def stale_client(self, admin_client, seeded_db):
        user = seeded_db.query(User).filter(User.username == "admin").first()
        user.is_active = False
        seeded_db.commit()
        return admin_client

    def test_guard_clears_cookie(self, stale_client):
        response = stale_client.get("/admin/bookings", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/login?from=%2Fadmin%2Fbookings"
        assert "admin_session" in response.headers["set-cookie"]
        assert "admin_session" not in stale_client.cookies

    def test_login_page_does_not_bounce_back(self, stale_client):
        assert "admin_session" in stale_client.cookies

        response = stale_client.get("/login?from=%2Fadmin%2Fbookings", follow_redirects=False)

        assert response.status_code == 200
        assert "Panel administratora" in response.text
        assert "admin_session" in response.headers["set-cookie"]

    def test_redirects_end_on_login_form(self, stale_client):
        response = stale_client.get("/admin/bookings")

        assert response.status_code == 200
        assert response.url.path == "/login"
        assert len(response.history) == 1


class TestLogout:
    @pytest.mark.parametrize("path", ["/logout", "/admin/logout"])
    def test_logout_redirects_to_login(self, admin_client, path):
        response = admin_client.get(path, follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/login"

        after = admin_client.get("/admin/bookings", follow_redirects=False)
        assert after.status_code == 303


class TestPublicPages:
    def test_home(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Smash &amp; Fun" in response.text

    def test_unfinished_booking_feature(self, client):
        response = client.get("/booking/unfinished")

        assert response.status_code == 200
        assert "Funkcja w budowie" in response.text
        assert 'href="/booking"' in response.text

    def test_booking_page(self, client):
        assert client.get("/booking").status_code == 200
