"""Dane demonstracyjne - konta, kody promocyjne i przykladowe rezerwacje."""

from sqlalchemy.orm import Session

from .models import Booking, PaymentStatus, PromoCode, User, UserRole
from .services.auth import AuthService


# === KONTA ===

USERS = [
    {"username": "admin", "password": "admin123", "name": "Administrator", "role": UserRole.ADMIN},
    {"username": "user", "password": "user123", "name": "Użytkownik", "role": UserRole.USER},
]


# === KODY PROMOCYJNE ===

PROMO_CODES = [
    {"code": "HAPPYHOURS", "discount_percent": 20, "is_active": True},
    {"code": "WELCOME10", "discount_percent": 10, "is_active": True},
    {"code": "SUMMER2024", "discount_percent": 15, "is_active": True},
    {"code": "EXPIRED", "discount_percent": 25, "is_active": False},
]


# === REZERWACJE ===

BOOKINGS = [
    {
        "package_id": 2,
        "package_name": "ŁATWY",
        "customer_name": "Jan Kowalski",
        "customer_email": "jan.kowalski@example.com",
        "customer_phone": "+48 123 456 789",
        "date": "2024-07-15",
        "start_time": "14:00",
        "end_time": "15:30",
        "num_people": 4,
        "total_price": 299,
        "paid_amount": 299,
        "payment_status": PaymentStatus.FULLY_PAID,
        "status": "confirmed",
        "notes": "Urodziny Kasi",
    },
    {
        "package_id": 3,
        "package_name": "ŚREDNI",
        "customer_name": "Anna Nowak",
        "customer_email": "anna.nowak@example.com",
        "customer_phone": "+48 987 654 321",
        "date": "2024-07-16",
        "start_time": "16:00",
        "end_time": "17:30",
        "num_people": 6,
        "total_price": 319.20,  # -20% z HAPPYHOURS
        "paid_amount": 100,
        "payment_status": PaymentStatus.DEPOSIT_PAID,
        "promo_code": "HAPPYHOURS",
        "status": "confirmed",
        "notes": "Spotkanie firmowe",
    },
    {
        "package_id": 4,
        "package_name": "TRUDNY",
        "customer_name": "Piotr Wiśniewski",
        "customer_email": "piotr.wisniewski@example.com",
        "customer_phone": "+48 111 222 333",
        "date": "2024-07-17",
        "start_time": "18:00",
        "end_time": "20:00",
        "num_people": 8,
        "total_price": 499,
        "paid_amount": 0,
        "payment_status": PaymentStatus.UNPAID,
        "status": "pending",
        "notes": "Grupa zaawansowana",
    },
]


def seed_demo_data(db: Session) -> dict[str, int]:
    """Zapisz dane demonstracyjne. Istniejace rekordy sa pomijane.

    Zwraca liczbe dodanych rekordow wg typu.
    """
    added = {"users": 0, "promo_codes": 0, "bookings": 0}
    auth = AuthService(db)

    for data in USERS:
        if auth.get_user_by_username(data["username"]):
            continue
        auth.create_user(**data)
        added["users"] += 1

    for data in PROMO_CODES:
        if db.query(PromoCode).filter(PromoCode.code == data["code"]).first():
            continue
        db.add(PromoCode(**data))
        added["promo_codes"] += 1

    if db.query(Booking).count() == 0:
        for data in BOOKINGS:
            db.add(Booking(**data))
            added["bookings"] += 1

    db.commit()
    return added
