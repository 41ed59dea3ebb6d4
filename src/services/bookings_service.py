from __future__ import annotations

import logging
from typing import Any, List

from pydantic import ValidationError

from src.core.errors import AppError, UpstreamError
from src.core.lodgify import LodgifyClient
from src.models.bookings import BookingRecord, BookingSourceResult
from src.models.sample_bookings import SAMPLE_BOOKINGS


logger = logging.getLogger(__name__)

FALLBACK_WARNING = (
    "Failed to fetch bookings from the server. This could mean the Lodgify API key is "
    "missing or incorrect in your server settings. The app is showing sample data. "
    "Error: {message}"
)


class BookingsService:
    def __init__(self, client: LodgifyClient, allow_sample_fallback: bool = True) -> None:
        self.client = client
        self.allow_sample_fallback = allow_sample_fallback

    def fetch_raw(self) -> Any:
        return self.client.fetch_bookings()

    def load_bookings(self) -> BookingSourceResult:
        try:
            payload = self.client.fetch_bookings()
            bookings = self.parse_bookings(payload)
        except AppError as exc:
            if not self.allow_sample_fallback:
                raise
            logger.warning("Serving sample bookings after fetch failure: %s", exc.message)
            return BookingSourceResult.fallback(
                bookings=list(SAMPLE_BOOKINGS),
                reason=FALLBACK_WARNING.format(message=exc.message),
            )
        return BookingSourceResult.ok(bookings)

    @staticmethod
    def parse_bookings(payload: Any) -> List[BookingRecord]:
        if not isinstance(payload, dict):
            raise UpstreamError("Lodgify API returned an unexpected payload")
        items = payload.get("items") or []
        if not isinstance(items, list):
            raise UpstreamError("Lodgify API returned an unexpected payload")
        try:
            return [BookingRecord.model_validate(item) for item in items]
        except ValidationError as exc:
            raise UpstreamError(f"Could not read bookings: {exc.error_count()} invalid field(s)") from exc
