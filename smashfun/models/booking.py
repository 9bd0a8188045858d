"""Modele rezerwacji i kodow promocyjnych."""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import String, Float, Integer, Boolean, DateTime, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class PaymentStatus(str, Enum):
    """Status platnosci za rezerwacje."""
    UNPAID = "UNPAID"
    DEPOSIT_PAID = "DEPOSIT_PAID"  # Wplacona zaliczka
    FULLY_PAID = "FULLY_PAID"


class Booking(Base):
    """Rezerwacja pakietu gry."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Pakiet
    package_id: Mapped[int] = mapped_column(Integer, index=True)
    package_name: Mapped[str] = mapped_column(String(100))

    # Klient
    customer_name: Mapped[str] = mapped_column(String(100))
    customer_email: Mapped[str] = mapped_column(String(100))
    customer_phone: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)

    # Termin
    date: Mapped[str] = mapped_column(String(10), index=True)  # YYYY-MM-DD
    start_time: Mapped[Optional[str]] = mapped_column(String(5), nullable=True)
    end_time: Mapped[Optional[str]] = mapped_column(String(5), nullable=True)
    num_people: Mapped[int] = mapped_column(Integer, default=1)

    # Platnosc (PLN)
    total_price: Mapped[float] = mapped_column(Float)
    paid_amount: Mapped[float] = mapped_column(Float, default=0.0)
    payment_status: Mapped[PaymentStatus] = mapped_column(
        SQLEnum(PaymentStatus), default=PaymentStatus.UNPAID
    )
    promo_code: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    status: Mapped[str] = mapped_column(String(20), default="pending")
    notes: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Booking {self.id} {self.package_name} {self.date} ({self.payment_status.value})>"


class PromoCode(Base):
    """Kod promocyjny - procentowa znizka od ceny pakietu."""

    __tablename__ = "promo_codes"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Kody przechowywane wielkimi literami
    code: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    discount_percent: Mapped[float] = mapped_column(Float)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    # Ograniczenia (opcjonalne)
    valid_until: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    max_usage: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    usage_count: Mapped[int] = mapped_column(Integer, default=0)
    min_amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<PromoCode {self.code} -{self.discount_percent}%>"
