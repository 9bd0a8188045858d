"""Endpointy API kodow promocyjnych."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.booking import PromoCodeApplyRequest, PromoCodeApplyResult, PromoCodeValidation
from ..services import PromoCodeService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["promo-codes"])


@router.post(
    "/api/promo-codes",
    response_model=PromoCodeApplyResult,
    response_model_exclude_none=True,
)
async def apply_promo_code(request: Request, db: Session = Depends(get_db)):
    """Przelicz cene z kodem. Body: ``{promoCode, price}``."""
    try:
        payload = PromoCodeApplyRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        return JSONResponse({"error": "Nieprawidłowe dane żądania"}, status_code=400)

    if not payload.promo_code or payload.price is None:
        return JSONResponse({"error": "Należy podać kod i cenę"}, status_code=400)

    try:
        return PromoCodeService(db).apply(payload.price, payload.promo_code)
    except Exception as exc:
        logger.exception("Blad podczas stosowania kodu promocyjnego")
        return JSONResponse({"error": str(exc)}, status_code=500)


@router.get(
    "/api/promocodes/validate",
    response_model=PromoCodeValidation,
    response_model_exclude_none=True,
)
async def validate_promo_code(
    code: Optional[str] = Query(None, description="Kod promocyjny"),
    amount: float = Query(0, ge=0, description="Kwota zamowienia (PLN)"),
    db: Session = Depends(get_db),
):
    """Sprawdz czy kod jest wazny dla danej kwoty."""
    if not code:
        return JSONResponse({"error": "Kod promocyjny jest wymagany"}, status_code=400)

    result = PromoCodeService(db).validate(code, amount)

    if not result.valid:
        return JSONResponse({"error": result.error, "valid": False}, status_code=400)

    return result
