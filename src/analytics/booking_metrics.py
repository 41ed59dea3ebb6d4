from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence

from src.models.bookings import BookingRecord
from src.schemas.bookings import BookingMetrics, ChannelRevenuePoint, MonthlyBookingsPoint

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _safe_ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def _bookings_by_month(confirmed: Sequence[BookingRecord]) -> List[MonthlyBookingsPoint]:
    counts: Dict[int, int] = defaultdict(int)
    for booking in confirmed:
        if booking.arrival is not None:
            counts[booking.arrival.month - 1] += 1
    return [
        MonthlyBookingsPoint(
            month_name=MONTH_NAMES[month_index],
            month_index=month_index,
            booking_count=counts[month_index],
        )
        for month_index in sorted(counts)
    ]


def _revenue_by_channel(confirmed: Sequence[BookingRecord]) -> List[ChannelRevenuePoint]:
    # dict keeps first-seen channel order
    revenue: Dict[str, float] = defaultdict(float)
    for booking in confirmed:
        revenue[booking.channel] += booking.total_amount
    return [
        ChannelRevenuePoint(channel_name=channel, revenue=amount)
        for channel, amount in revenue.items()
    ]


def aggregate_bookings(filtered_bookings: Sequence[BookingRecord]) -> BookingMetrics:
    confirmed = [booking for booking in filtered_bookings if booking.is_confirmed]
    cancelled_count = sum(1 for booking in filtered_bookings if booking.is_cancelled)

    total_revenue = sum((booking.total_amount for booking in confirmed), 0.0)
    total_bookings = len(confirmed)
    # Misordered dates are not clamped and reduce the total.
    total_nights = sum((booking.nights or 0.0 for booking in confirmed), 0.0)

    # Bookings without a creation date add nothing but still count in the denominator.
    total_lead_time = 0.0
    for booking in confirmed:
        lead_days = booking.lead_time_days
        if lead_days is not None and lead_days > 0:
            total_lead_time += lead_days

    cancellation_rate = (
        cancelled_count / len(filtered_bookings) * 100 if filtered_bookings else 0.0
    )

    return BookingMetrics(
        total_revenue=total_revenue,
        total_bookings=total_bookings,
        total_nights=total_nights,
        avg_booking_value=_safe_ratio(total_revenue, total_bookings),
        avg_nightly_rate=_safe_ratio(total_revenue, total_nights),
        avg_length_of_stay_nights=_safe_ratio(total_nights, total_bookings),
        avg_lead_time_days=_safe_ratio(total_lead_time, total_bookings),
        cancellation_rate_percent=cancellation_rate,
        bookings_by_month=_bookings_by_month(confirmed),
        revenue_by_channel=_revenue_by_channel(confirmed),
        filtered_bookings=list(filtered_bookings),
    )
