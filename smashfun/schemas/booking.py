"""Schematy dla kodow promocyjnych i analityki rezerwacji."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models.booking import PaymentStatus


class CamelModel(BaseModel):
    """Model serializowany z kluczami camelCase (jak frontend)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# === Promo Codes ===

class PromoCodeApplyRequest(CamelModel):
    """Body zadania POST /api/promo-codes."""

    promo_code: Optional[str] = None
    price: Optional[float] = None


class PromoCodeApplyResult(CamelModel):
    """Cena po zastosowaniu kodu (discount tylko gdy kod zadzialal)."""

    price: float
    discount: Optional[float] = None


class PromoCodeValidation(CamelModel):
    """Wynik walidacji kodu promocyjnego."""

    valid: bool
    discount: float = 0
    code: Optional[str] = None
    error: Optional[str] = None


# === Analytics ===

class PackageStats(CamelModel):
    """Statystyki jednego pakietu."""

    bookings_count: int = 0
    revenue: float = 0


class BookingAnalytics(CamelModel):
    """Podsumowanie rezerwacji dla panelu admina."""

    total_bookings: int
    fully_paid_bookings: int
    deposit_paid_bookings: int
    unpaid_bookings: int
    total_revenue: float
    package_stats: dict[str, PackageStats] = Field(default_factory=dict)


class BookingListItem(CamelModel):
    """Wiersz listy rezerwacji w panelu admina."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    package_name: str
    customer_name: str
    customer_email: str
    date: str
    start_time: Optional[str] = None
    total_price: float
    paid_amount: float
    payment_status: PaymentStatus
    status: str


# === Payments ===

class PaymentNotification(CamelModel):
    """Powiadomienie Przelewy24 wysylane na urlStatus (kwoty w groszach)."""

    order_id: int
    session_id: str
    amount: int
    origin_amount: Optional[int] = None
    currency: str = "PLN"
    method: Optional[int] = None
    statement: Optional[str] = None
    sign: Optional[str] = None


class PaymentRegistration(CamelModel):
    """Adres bramki, pod ktory trzeba przekierowac klienta."""

    payment_url: str
