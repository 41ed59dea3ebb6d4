from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_dashboard_service
from src.models.bookings import BookingSourceResult
from src.models.dashboard_state import ActiveView, DashboardViewState
from src.schemas.bookings import BookingMetrics, BookingRow, BookingTableFilters, DashboardFilters
from src.schemas.insights import InsightAnswer, InsightQuestionRequest
from src.services.dashboard_service import DashboardService
from src.shared.response import Meta, ResponseEnvelope, paginate_list


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_filters(
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
) -> DashboardFilters:
    return DashboardFilters(start_date=start_date, end_date=end_date)


def get_table_filters(
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=50, ge=1, le=500),
) -> BookingTableFilters:
    return BookingTableFilters(
        start_date=start_date, end_date=end_date, page=page, page_size=page_size
    )


def build_meta(
    source: BookingSourceResult, start_date: Optional[date], end_date: Optional[date]
) -> Meta:
    return Meta(
        as_of_date=date.today().isoformat(),
        source="sample" if source.is_fallback else "lodgify",
        calculation_version="v1",
        start_date=start_date,
        end_date=end_date,
        data_status=source.status,
        degraded=source.is_fallback,
        warning=source.reason,
    )


def build_state_meta(state: DashboardViewState) -> Meta:
    is_fallback = state.data_status == "fallback"
    return Meta(
        as_of_date=date.today().isoformat(),
        source="sample" if is_fallback else "lodgify",
        calculation_version="v1",
        start_date=state.start_date,
        end_date=state.end_date,
        data_status=state.data_status,
        degraded=is_fallback,
        warning=state.error,
    )


@router.get("/metrics")
def dashboard_metrics(
    filters: DashboardFilters = Depends(get_dashboard_filters),
    service: DashboardService = Depends(get_dashboard_service),
) -> ResponseEnvelope[BookingMetrics]:
    data, source = service.get_metrics(filters.start_date, filters.end_date)
    meta = build_meta(source, filters.start_date, filters.end_date)
    return ResponseEnvelope(data=data, meta=meta)


@router.get("/bookings")
def dashboard_bookings(
    filters: BookingTableFilters = Depends(get_table_filters),
    service: DashboardService = Depends(get_dashboard_service),
) -> ResponseEnvelope[List[BookingRow]]:
    data, source = service.list_bookings(filters.start_date, filters.end_date)
    paged_data, pagination = paginate_list(data, filters.page, filters.page_size)
    meta = build_meta(source, filters.start_date, filters.end_date)
    return ResponseEnvelope(data=paged_data, pagination=pagination, meta=meta)


@router.get("/state")
def dashboard_state(
    view: ActiveView = Query(default="dashboard"),
    filters: DashboardFilters = Depends(get_dashboard_filters),
    service: DashboardService = Depends(get_dashboard_service),
) -> ResponseEnvelope[DashboardViewState]:
    data = service.get_state(view, filters.start_date, filters.end_date)
    return ResponseEnvelope(data=data, meta=build_state_meta(data))


@router.post("/state/ask")
def dashboard_state_ask(
    request: InsightQuestionRequest,
    view: ActiveView = Query(default="dashboard"),
    service: DashboardService = Depends(get_dashboard_service),
) -> ResponseEnvelope[DashboardViewState]:
    data = service.ask_into_state(view, request)
    return ResponseEnvelope(data=data, meta=build_state_meta(data))


@router.post("/ask")
def dashboard_ask(
    request: InsightQuestionRequest,
    service: DashboardService = Depends(get_dashboard_service),
) -> ResponseEnvelope[InsightAnswer]:
    data, source = service.ask(request)
    meta = build_meta(source, request.start_date, request.end_date)
    return ResponseEnvelope(data=data, meta=meta)
