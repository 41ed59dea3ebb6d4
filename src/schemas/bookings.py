from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field

from src.models.bookings import BookingRecord
from src.shared.base import BaseSchema


class MonthlyBookingsPoint(BaseSchema):
    month_name: str
    month_index: int = Field(..., ge=0, le=11)
    booking_count: int


class ChannelRevenuePoint(BaseSchema):
    channel_name: str
    revenue: float


class BookingMetrics(BaseSchema):
    total_revenue: float = 0.0
    total_bookings: int = 0
    total_nights: float = 0.0
    avg_booking_value: float = 0.0
    avg_nightly_rate: float = 0.0
    avg_length_of_stay_nights: float = 0.0
    avg_lead_time_days: float = 0.0
    cancellation_rate_percent: float = 0.0
    bookings_by_month: List[MonthlyBookingsPoint] = Field(default_factory=list)
    revenue_by_channel: List[ChannelRevenuePoint] = Field(default_factory=list)
    # Kept for the table view and insight export; not part of the metrics payload.
    filtered_bookings: List[BookingRecord] = Field(default_factory=list, exclude=True)


class BookingRow(BaseSchema):
    id: Optional[str] = None
    guest_name: Optional[str] = None
    arrival: Optional[date] = None
    departure: Optional[date] = None
    source: Optional[str] = None
    total_amount: float = 0.0
    status: Optional[str] = None


class DashboardFilters(BaseSchema):
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class BookingTableFilters(DashboardFilters):
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=50, ge=1, le=500)
