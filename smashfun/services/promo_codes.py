"""Serwis kodow promocyjnych - przeliczanie cen i walidacja kodow."""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ..models import PromoCode
from ..schemas.booking import PromoCodeApplyResult, PromoCodeValidation


class PromoCodeService:
    """Obsluga kodow promocyjnych."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_code(self, code: str) -> Optional[PromoCode]:
        """Pobierz kod (bez rozrozniania wielkosci liter)."""
        return self.db.query(PromoCode).filter(PromoCode.code == code.strip().upper()).first()

    def apply(self, price: float, code: Optional[str]) -> PromoCodeApplyResult:
        """Zastosuj kod do ceny.

        Nieznany lub nieaktywny kod nie zmienia ceny i nie zwraca rabatu.
        """
        if not code:
            return PromoCodeApplyResult(price=price)

        promo = self.get_by_code(code)
        if promo is None or not promo.is_active:
            return PromoCodeApplyResult(price=price)

        discount = promo.discount_percent
        discounted = price * (1 - discount / 100)

        return PromoCodeApplyResult(price=round(discounted, 2), discount=discount)

    def validate(
        self,
        code: str,
        amount: float = 0,
        now: Optional[datetime] = None,
    ) -> PromoCodeValidation:
        """Sprawdz czy kod mozna uzyc dla zamowienia o danej kwocie."""
        now = now or datetime.utcnow()
        promo = self.get_by_code(code)

        if promo is None:
            return PromoCodeValidation(valid=False, error="Kod promocyjny nie istnieje")

        if not promo.is_active:
            return PromoCodeValidation(valid=False, error="Kod promocyjny jest nieaktywny")

        if promo.valid_until is not None and promo.valid_until < now:
            return PromoCodeValidation(valid=False, error="Kod promocyjny wygasł")

        if promo.max_usage is not None and promo.usage_count >= promo.max_usage:
            return PromoCodeValidation(valid=False, error="Limit użyć kodu został wyczerpany")

        if promo.min_amount is not None and amount < promo.min_amount:
            return PromoCodeValidation(
                valid=False,
                error=f"Minimalna kwota zamówienia to {promo.min_amount:g} PLN",
            )

        return PromoCodeValidation(valid=True, discount=promo.discount_percent, code=promo.code)
