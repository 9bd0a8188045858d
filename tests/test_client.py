"""Testy AdminClient na zywej aplikacji (httpx.ASGITransport)."""

import httpx
import pytest
import pytest_asyncio

from smashfun.auth import SessionStatus, get_session_store
from smashfun.client import AdminClient


def make_client(app, cookies=None) -> AdminClient:
    http = httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
        cookies=cookies,
    )
    return AdminClient(http_client=http)


@pytest_asyncio.fixture
async def admin_api(app, seeded_db):
    client = make_client(app)
    await client.start()
    yield client
    await client.close()


class TestAdminClient:
    @pytest.mark.asyncio
    async def test_starts_signed_out(self, admin_api):
        assert admin_api.session.status is SessionStatus.UNAUTHENTICATED
        assert get_session_store().get() is admin_api.session

        with pytest.raises(PermissionError):
            await admin_api.fetch_analytics()

    @pytest.mark.asyncio
    async def test_login_and_fetch_analytics(self, admin_api):
        assert await admin_api.login("admin", "admin123") is True
        assert admin_api.session.identity.username == "admin"

        analytics = await admin_api.fetch_analytics()

        assert analytics.total_bookings == 3
        assert analytics.total_revenue == 399
        assert analytics.package_stats["3"].revenue == 100

    @pytest.mark.asyncio
    async def test_wrong_password(self, admin_api):
        assert await admin_api.login("admin", "wrong") is False
        assert admin_api.session.status is SessionStatus.UNAUTHENTICATED
        assert admin_api.session.error == "Nieprawidłowa nazwa użytkownika lub hasło"

    @pytest.mark.asyncio
    async def test_user_role_cannot_fetch_analytics(self, admin_api):
        assert await admin_api.login("user", "user123") is True

        with pytest.raises(PermissionError):
            await admin_api.fetch_analytics()

    @pytest.mark.asyncio
    async def test_logout_sets_redirect(self, admin_api):
        await admin_api.login("admin", "admin123")

        await admin_api.logout()

        assert admin_api.redirect_to == "/login"
        assert admin_api.session.status is SessionStatus.UNAUTHENTICATED
        assert not admin_api.http.cookies
        with pytest.raises(PermissionError):
            await admin_api.fetch_analytics()

    @pytest.mark.asyncio
    async def test_apply_promo_code(self, admin_api):
        result = await admin_api.apply_promo_code("HAPPYHOURS", 100)

        assert result.price == 80
        assert result.discount == 20

    @pytest.mark.asyncio
    async def test_restores_session_from_cookie(self, app, seeded_db):
        first = make_client(app)
        await first.start()
        await first.login("admin", "admin123")
        cookies = httpx.Cookies(first.http.cookies)
        await first.close()

        second = make_client(app, cookies=cookies)
        try:
            session = await second.start()

            assert session.status is SessionStatus.AUTHENTICATED
            assert session.identity.role == "admin"
        finally:
            await second.close()

    @pytest.mark.asyncio
    async def test_requires_start(self, app):
        client = make_client(app)
        try:
            with pytest.raises(RuntimeError):
                await client.login("admin", "admin123")
        finally:
            await client.http.aclose()
