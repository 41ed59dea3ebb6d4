from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import ConfigDict

from src.models.bookings import BookingSourceResult
from src.shared.base import BaseSchema

ActiveView = Literal["dashboard", "bookings"]
DataStatus = Literal["ok", "fallback"]


class DashboardViewState(BaseSchema):
    """Everything the dashboard screen shows, as one immutable snapshot.

    Each transition returns a new state; the current one is never modified.
    """

    model_config = ConfigDict(frozen=True)

    active_view: ActiveView = "dashboard"
    is_loading: bool = False
    error: Optional[str] = None
    data_status: Optional[DataStatus] = None
    booking_count: int = 0
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_generating_insights: bool = False
    insights: Optional[str] = None
    insights_error: Optional[str] = None

    def select_view(self, view: ActiveView) -> DashboardViewState:
        return self.model_copy(update={"active_view": view})

    def set_date_range(
        self, start_date: Optional[date], end_date: Optional[date]
    ) -> DashboardViewState:
        return self.model_copy(update={"start_date": start_date, "end_date": end_date})

    def start_loading(self) -> DashboardViewState:
        return self.model_copy(update={"is_loading": True, "error": None})

    def bookings_loaded(self, result: BookingSourceResult) -> DashboardViewState:
        return self.model_copy(
            update={
                "is_loading": False,
                "error": result.reason if result.is_fallback else None,
                "data_status": result.status,
                "booking_count": len(result.bookings),
            }
        )

    def insight_requested(self) -> DashboardViewState:
        return self.model_copy(
            update={"is_generating_insights": True, "insights": None, "insights_error": None}
        )

    def insight_received(self, text: str) -> DashboardViewState:
        return self.model_copy(update={"is_generating_insights": False, "insights": text})

    def insight_failed(self, message: str) -> DashboardViewState:
        return self.model_copy(
            update={"is_generating_insights": False, "insights_error": message}
        )
