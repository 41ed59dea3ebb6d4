from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import (
    get_bookings_service,
    get_dashboard_service,
    get_insights_service,
)
from src.core.errors import UpstreamError
from src.main import create_app
from src.models.bookings import BookingSourceResult
from src.models.sample_bookings import SAMPLE_BOOKINGS
from src.services.dashboard_service import DashboardService
from src.services.insights_service import InsightsService


class StaticBookingsService:
    def __init__(self, result: BookingSourceResult) -> None:
        self.result = result

    def load_bookings(self) -> BookingSourceResult:
        return self.result


class StubGeminiClient:
    def __init__(self, text: str = "**Airbnb** brought 1 booking.") -> None:
        self.text = text
        self.error: Optional[Exception] = None

    def generate_content(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if self.error:
            raise self.error
        return {"candidates": [{"content": {"parts": [{"text": self.text}]}}]}


class FakeBookingsService:
    def __init__(self, payload: Any = None, error: Optional[Exception] = None) -> None:
        self.payload = payload if payload is not None else {"items": []}
        self.error = error

    def fetch_raw(self) -> Any:
        if self.error:
            raise self.error
        return self.payload


class FakeInsightsService:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.received: List[Dict[str, Any]] = []

    def forward(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if self.error:
            raise self.error
        self.received.append(payload)
        return {"candidates": [{"content": {"parts": [{"text": "Revenue is up."}]}}]}


@pytest.fixture()
def bookings_source() -> StaticBookingsService:
    return StaticBookingsService(BookingSourceResult.ok(list(SAMPLE_BOOKINGS)))


@pytest.fixture()
def gemini_client() -> StubGeminiClient:
    return StubGeminiClient()


@pytest.fixture()
def client(bookings_source: StaticBookingsService, gemini_client: StubGeminiClient) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_dashboard_service] = lambda: DashboardService(
        bookings_service=bookings_source,
        insights_service=InsightsService(client=gemini_client),
    )
    app.dependency_overrides[get_bookings_service] = lambda: FakeBookingsService(
        payload={"items": [{"id": 1, "status": "Booked"}]}
    )
    app.dependency_overrides[get_insights_service] = lambda: FakeInsightsService()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def failing_proxy_client() -> TestClient:
    app = create_app()
    app.dependency_overrides[get_bookings_service] = lambda: FakeBookingsService(
        error=UpstreamError("Lodgify API Error: 401 - Unauthorized")
    )
    app.dependency_overrides[get_insights_service] = lambda: FakeInsightsService(
        error=UpstreamError("API key not valid.")
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
