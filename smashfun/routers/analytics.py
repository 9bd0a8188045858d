"""Endpoint API analityki rezerwacji."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.booking import BookingAnalytics
from ..services import AnalyticsService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analytics"])


@router.get("/api/analytics", response_model=BookingAnalytics)
async def get_analytics(db: Session = Depends(get_db)):
    """Podsumowanie rezerwacji: statusy platnosci, przychod, pakiety."""
    try:
        return AnalyticsService(db).summary()
    except Exception as exc:
        logger.exception("Blad podczas pobierania analityki")
        return JSONResponse({"error": str(exc)}, status_code=500)
