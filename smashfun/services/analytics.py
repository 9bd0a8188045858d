"""Analityka rezerwacji dla panelu admina."""

from sqlalchemy.orm import Session

from ..models import Booking, PaymentStatus
from ..schemas.booking import BookingAnalytics, PackageStats


class AnalyticsService:
    """Podsumowania rezerwacji i przychodow."""

    def __init__(self, db: Session):
        self.db = db

    def summary(self) -> BookingAnalytics:
        """Liczba rezerwacji wg statusu platnosci, przychod i statystyki pakietow."""
        bookings = self.db.query(Booking).order_by(Booking.id).all()

        by_status = {status: 0 for status in PaymentStatus}
        package_stats: dict[str, PackageStats] = {}
        total_revenue = 0.0

        for booking in bookings:
            by_status[booking.payment_status] += 1

            paid = booking.paid_amount or 0
            total_revenue += paid

            stats = package_stats.setdefault(str(booking.package_id), PackageStats())
            stats.bookings_count += 1
            stats.revenue += paid

        return BookingAnalytics(
            total_bookings=len(bookings),
            fully_paid_bookings=by_status[PaymentStatus.FULLY_PAID],
            deposit_paid_bookings=by_status[PaymentStatus.DEPOSIT_PAID],
            unpaid_bookings=by_status[PaymentStatus.UNPAID],
            total_revenue=total_revenue,
            package_stats=package_stats,
        )
