from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from src.analytics.booking_metrics import aggregate_bookings
from src.analytics.date_range import filter_by_arrival
from src.core.errors import AppError
from src.models.bookings import BookingRecord, BookingSourceResult
from src.models.dashboard_state import ActiveView, DashboardViewState
from src.schemas.bookings import BookingMetrics, BookingRow
from src.schemas.insights import InsightAnswer, InsightQuestionRequest
from src.services.bookings_service import BookingsService
from src.services.insights_service import InsightsService

logger = logging.getLogger(__name__)

_LATEST = datetime.max.replace(tzinfo=timezone.utc)


class DashboardService:
    def __init__(self, bookings_service: BookingsService, insights_service: InsightsService) -> None:
        self.bookings_service = bookings_service
        self.insights_service = insights_service

    def get_metrics(
        self, start_date: Optional[date], end_date: Optional[date]
    ) -> Tuple[BookingMetrics, BookingSourceResult]:
        source = self.bookings_service.load_bookings()
        filtered = filter_by_arrival(source.bookings, start_date, end_date)
        return aggregate_bookings(filtered), source

    def list_bookings(
        self, start_date: Optional[date], end_date: Optional[date]
    ) -> Tuple[List[BookingRow], BookingSourceResult]:
        source = self.bookings_service.load_bookings()
        filtered = filter_by_arrival(source.bookings, start_date, end_date)
        ordered = sorted(filtered, key=lambda booking: booking.arrival or _LATEST)
        return [self._to_booking_row(booking) for booking in ordered], source

    def get_state(
        self, view: ActiveView, start_date: Optional[date], end_date: Optional[date]
    ) -> DashboardViewState:
        return self._loaded_state(view, start_date, end_date, self.bookings_service.load_bookings())

    def ask(self, request: InsightQuestionRequest) -> Tuple[InsightAnswer, BookingSourceResult]:
        source = self.bookings_service.load_bookings()
        filtered = filter_by_arrival(source.bookings, request.start_date, request.end_date)
        return self.insights_service.ask(request.question, filtered), source

    def ask_into_state(self, view: ActiveView, request: InsightQuestionRequest) -> DashboardViewState:
        """Answer a question the way the dashboard screen shows it.

        Failures land in ``insights_error`` instead of propagating.
        """
        source = self.bookings_service.load_bookings()
        state = self._loaded_state(view, request.start_date, request.end_date, source)
        state = state.insight_requested()
        filtered = filter_by_arrival(source.bookings, request.start_date, request.end_date)
        try:
            answer = self.insights_service.ask(request.question, filtered)
        except AppError as exc:
            logger.warning("Insight request failed: %s", exc.message)
            return state.insight_failed(exc.message)
        return state.insight_received(answer.answer_html)

    @staticmethod
    def _loaded_state(
        view: ActiveView,
        start_date: Optional[date],
        end_date: Optional[date],
        source: BookingSourceResult,
    ) -> DashboardViewState:
        state = DashboardViewState().select_view(view).set_date_range(start_date, end_date)
        return state.start_loading().bookings_loaded(source)

    @staticmethod
    def _to_booking_row(booking: BookingRecord) -> BookingRow:
        return BookingRow(
            id=booking.id,
            guest_name=booking.guest_name,
            arrival=booking.arrival_date,
            departure=booking.departure_date,
            source=booking.source,
            total_amount=booking.total_amount,
            status=booking.status,
        )
