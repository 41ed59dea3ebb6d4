from __future__ import annotations

from functools import lru_cache

from src.core.config import get_settings
from src.core.gemini import GeminiClient
from src.core.lodgify import LodgifyClient
from src.services.bookings_service import BookingsService
from src.services.dashboard_service import DashboardService
from src.services.insights_service import InsightsService


@lru_cache
def get_lodgify_client() -> LodgifyClient:
    return LodgifyClient()


@lru_cache
def get_gemini_client() -> GeminiClient:
    return GeminiClient()


def get_bookings_service() -> BookingsService:
    return BookingsService(
        client=get_lodgify_client(),
        allow_sample_fallback=get_settings().bookings_sample_fallback,
    )


def get_insights_service() -> InsightsService:
    return InsightsService(client=get_gemini_client())


def get_dashboard_service() -> DashboardService:
    return DashboardService(
        bookings_service=get_bookings_service(),
        insights_service=get_insights_service(),
    )
