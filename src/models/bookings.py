from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, List, Literal, Optional

from pydantic import AliasChoices, AliasPath, BaseModel, ConfigDict, Field, field_validator

BOOKED_STATUS = "Booked"
CANCELLED_STATUS = "Cancelled"
UNKNOWN_SOURCE = "Unknown"

SECONDS_PER_DAY = 24 * 60 * 60


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO date or timestamp into an aware UTC datetime.

    Bare dates land on midnight UTC and naive timestamps are read as UTC.
    Values that cannot be parsed yield ``None`` instead of raising.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def days_between(start: Optional[datetime], end: Optional[datetime]) -> Optional[float]:
    if start is None or end is None:
        return None
    return (end - start).total_seconds() / SECONDS_PER_DAY


class BookingRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    guest_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("guest_name", "guestName", AliasPath("guest", "name")),
    )
    arrival: Optional[datetime] = None
    departure: Optional[datetime] = None
    total_amount: float = Field(
        default=0.0, validation_alias=AliasChoices("total_amount", "totalAmount")
    )
    source: Optional[str] = None
    status: Optional[str] = None
    creation_date: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("creation_date", "creationDate")
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @field_validator("guest_name", "source", "status", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        return None

    @field_validator("arrival", "departure", "creation_date", mode="before")
    @classmethod
    def _parse_dates(cls, value: Any) -> Optional[datetime]:
        return parse_timestamp(value)

    @field_validator("total_amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        if value is None or isinstance(value, bool):
            return 0.0
        try:
            amount = float(value)
        except (TypeError, ValueError):
            return 0.0
        return amount if math.isfinite(amount) else 0.0

    @property
    def is_confirmed(self) -> bool:
        return self.status == BOOKED_STATUS

    @property
    def is_cancelled(self) -> bool:
        return self.status == CANCELLED_STATUS

    @property
    def channel(self) -> str:
        return self.source or UNKNOWN_SOURCE

    @property
    def arrival_date(self) -> Optional[date]:
        return self.arrival.date() if self.arrival else None

    @property
    def departure_date(self) -> Optional[date]:
        return self.departure.date() if self.departure else None

    @property
    def nights(self) -> Optional[float]:
        return days_between(self.arrival, self.departure)

    @property
    def lead_time_days(self) -> Optional[float]:
        return days_between(self.creation_date, self.arrival)


class BookingSourceResult(BaseModel):
    """Bookings handed to the dashboard, tagged with where they came from.

    ``status == "fallback"`` means the live fetch failed and ``bookings`` holds
    the built-in sample set; ``reason`` carries the user-facing warning.
    """

    status: Literal["ok", "fallback"]
    bookings: List[BookingRecord]
    reason: Optional[str] = None

    @classmethod
    def ok(cls, bookings: List[BookingRecord]) -> "BookingSourceResult":
        return cls(status="ok", bookings=bookings)

    @classmethod
    def fallback(cls, bookings: List[BookingRecord], reason: str) -> "BookingSourceResult":
        return cls(status="fallback", bookings=bookings, reason=reason)

    @property
    def is_fallback(self) -> bool:
        return self.status == "fallback"
