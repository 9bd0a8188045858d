"""Testy JSON API: kody promocyjne, analityka, autentykacja, health."""

from datetime import datetime, timedelta

import pytest

from smashfun.models import PromoCode
from smashfun.services import AnalyticsService, PromoCodeService


class TestPromoCodesEndpoint:
    def test_apply_known_code(self, client):
        response = client.post("/api/promo-codes", json={"promoCode": "HAPPYHOURS", "price": 100})

        assert response.status_code == 200
        assert response.json() == {"price": 80.0, "discount": 20.0}

    def test_code_is_case_insensitive(self, client):
        response = client.post("/api/promo-codes", json={"promoCode": "welcome10", "price": 299})

        assert response.json() == {"price": 269.1, "discount": 10.0}

    @pytest.mark.parametrize("code", ["SAVE10", "EXPIRED"])
    def test_unknown_or_inactive_code_keeps_price(self, client, code):
        response = client.post("/api/promo-codes", json={"promoCode": code, "price": 100})

        assert response.status_code == 200
        assert response.json() == {"price": 100.0}

    @pytest.mark.parametrize("payload", [
        {"promoCode": "SAVE10"},
        {"price": 100},
        {"promoCode": "", "price": 100},
        {"promoCode": "SAVE10", "price": "sto"},
    ])
    def test_missing_fields(self, client, payload):
        response = client.post("/api/promo-codes", json=payload)

        assert response.status_code == 400
        assert "error" in response.json()

    def test_invalid_json(self, client):
        response = client.post(
            "/api/promo-codes",
            content="nie-json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    def test_upstream_failure(self, client, monkeypatch):
        def broken(self, price, code):
            raise RuntimeError("baza niedostepna")

        monkeypatch.setattr(PromoCodeService, "apply", broken)
        response = client.post("/api/promo-codes", json={"promoCode": "HAPPYHOURS", "price": 100})

        assert response.status_code == 500
        assert response.json() == {"error": "baza niedostepna"}


class TestPromoCodeValidation:
    def test_valid_code(self, client):
        response = client.get("/api/promocodes/validate", params={"code": "HAPPYHOURS", "amount": 100})

        assert response.status_code == 200
        assert response.json() == {"valid": True, "discount": 20.0, "code": "HAPPYHOURS"}

    def test_inactive_code(self, client):
        response = client.get("/api/promocodes/validate", params={"code": "EXPIRED"})

        assert response.status_code == 400
        assert response.json() == {"error": "Kod promocyjny jest nieaktywny", "valid": False}

    def test_missing_code(self, client):
        response = client.get("/api/promocodes/validate")

        assert response.status_code == 400
        assert response.json() == {"error": "Kod promocyjny jest wymagany"}

    def test_limits(self, db):
        now = datetime(2025, 6, 1, 12, 0)
        db.add_all([
            PromoCode(code="OLD", discount_percent=5, valid_until=now - timedelta(days=1)),
            PromoCode(code="USED", discount_percent=5, max_usage=3, usage_count=3),
            PromoCode(code="BIG", discount_percent=5, min_amount=500),
        ])
        db.commit()
        service = PromoCodeService(db)

        assert service.validate("NOPE", 100, now=now).error == "Kod promocyjny nie istnieje"
        assert service.validate("OLD", 100, now=now).error == "Kod promocyjny wygasł"
        assert service.validate("USED", 100, now=now).error == "Limit użyć kodu został wyczerpany"
        assert service.validate("BIG", 100, now=now).error == "Minimalna kwota zamówienia to 500 PLN"
        assert service.validate("big", 500, now=now).valid is True

    def test_apply_without_code(self, db):
        result = PromoCodeService(db).apply(150, None)
        assert result.price == 150
        assert result.discount is None


class TestAnalyticsEndpoint:
    def test_summary(self, client):
        response = client.get("/api/analytics")

        assert response.status_code == 200
        assert response.json() == {
            "totalBookings": 3,
            "fullyPaidBookings": 1,
            "depositPaidBookings": 1,
            "unpaidBookings": 1,
            "totalRevenue": 399.0,
            "packageStats": {
                "2": {"bookingsCount": 1, "revenue": 299.0},
                "3": {"bookingsCount": 1, "revenue": 100.0},
                "4": {"bookingsCount": 1, "revenue": 0.0},
            },
        }

    def test_empty_database(self, app, db):
        from fastapi.testclient import TestClient

        response = TestClient(app).get("/api/analytics")

        assert response.json()["totalBookings"] == 0
        assert response.json()["packageStats"] == {}

    def test_upstream_failure(self, client, monkeypatch):
        def broken(self):
            raise RuntimeError("timeout")

        monkeypatch.setattr(AnalyticsService, "summary", broken)
        response = client.get("/api/analytics")

        assert response.status_code == 500
        assert response.json() == {"error": "timeout"}


class TestAuthApi:
    def test_login_and_me(self, client):
        response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

        assert response.status_code == 200
        assert response.json() == {
            "id": "1",
            "username": "admin",
            "role": "admin",
            "name": "Administrator",
        }
        assert "admin_session" in response.cookies

        me = client.get("/api/auth/me")
        assert me.status_code == 200
        assert me.json()["username"] == "admin"

    def test_wrong_password(self, client):
        response = client.post("/api/auth/login", json={"username": "admin", "password": "wrong"})

        assert response.status_code == 401
        assert response.json() == {"error": "Nieprawidłowa nazwa użytkownika lub hasło"}
        assert client.get("/api/auth/me").status_code == 401

    @pytest.mark.parametrize("payload", [{}, {"username": "admin"}, {"password": "x"}, []])
    def test_missing_fields(self, client, payload):
        response = client.post("/api/auth/login", json=payload)
        assert response.status_code == 400

    def test_logout(self, admin_client):
        response = admin_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert admin_client.get("/api/auth/me").status_code == 401

    def test_tampered_cookie(self, client):
        client.cookies.set("admin_session", "podrobiony")
        assert client.get("/api/auth/me").status_code == 401

    def test_deactivated_account_loses_session(self, admin_client, seeded_db):
        from smashfun.models import User

        user = seeded_db.query(User).filter(User.username == "admin").first()
        user.is_active = False
        seeded_db.commit()

        assert admin_client.get("/api/auth/me").status_code == 401


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "0.1.0", "data_client": "unavailable"}
