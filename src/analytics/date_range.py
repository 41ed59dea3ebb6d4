from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, List, Optional

from src.models.bookings import BookingRecord


def _calendar_day(value: Optional[date]) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


def _in_range(arrival: Optional[date], start_date: Optional[date], end_date: Optional[date]) -> bool:
    # An unparseable arrival satisfies neither bound.
    if arrival is None:
        return False
    if start_date and arrival < start_date:
        return False
    if end_date and arrival > end_date:
        return False
    return True


def filter_by_arrival(
    bookings: Iterable[BookingRecord],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[BookingRecord]:
    """Keep bookings whose arrival falls within the inclusive calendar range.

    Either bound may be omitted. With no bounds the bookings come back as given.
    """
    start_date = _calendar_day(start_date)
    end_date = _calendar_day(end_date)
    if not start_date and not end_date:
        return list(bookings)
    return [
        booking
        for booking in bookings
        if _in_range(booking.arrival_date, start_date, end_date)
    ]
