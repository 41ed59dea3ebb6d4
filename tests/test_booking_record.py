from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.models.bookings import BookingRecord, BookingSourceResult, parse_timestamp


def test_reads_lodgify_payload_shape() -> None:
    record = BookingRecord.model_validate(
        {
            "id": 42,
            "guest": {"name": "John Doe", "email": "john@example.com"},
            "arrival": "2024-01-15",
            "departure": "2024-01-20",
            "total_amount": "500.50",
            "source": "Airbnb",
            "status": "Booked",
            "creation_date": "2023-12-15T10:00:00Z",
            "rooms": [{"room_type_id": 1}],
        }
    )
    assert record.id == "42"
    assert record.guest_name == "John Doe"
    assert record.total_amount == 500.5
    assert record.arrival == datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert record.creation_date == datetime(2023, 12, 15, 10, tzinfo=timezone.utc)
    assert record.nights == 5
    assert record.channel == "Airbnb"
    assert record.is_confirmed and not record.is_cancelled


def test_reads_camel_case_shape() -> None:
    record = BookingRecord.model_validate(
        {
            "guestName": "Jane Smith",
            "arrival": "2024-02-10",
            "departure": "2024-02-15",
            "totalAmount": 650,
            "creationDate": "2024-01-10T10:00:00+02:00",
        }
    )
    assert record.guest_name == "Jane Smith"
    assert record.total_amount == 650
    assert record.creation_date == datetime(2024, 1, 10, 8, tzinfo=timezone.utc)


def test_optional_fields_default() -> None:
    record = BookingRecord.model_validate({"guest": None, "total_amount": None})
    assert record.guest_name is None
    assert record.total_amount == 0
    assert record.channel == "Unknown"
    assert record.nights is None
    assert record.lead_time_days is None


@pytest.mark.parametrize("value", ["", "not a date", "2024-13-01", 12345, ["2024-01-01"]])
def test_unparseable_dates_become_none(value: object) -> None:
    assert parse_timestamp(value) is None
    assert BookingRecord.model_validate({"arrival": value}).arrival is None


@pytest.mark.parametrize("value", ["-Infinity", "inf", "nan", float("-inf"), float("nan"), "abc"])
def test_non_finite_amounts_become_zero(value: object) -> None:
    assert BookingRecord.model_validate({"total_amount": value}).total_amount == 0


def test_naive_timestamps_are_read_as_utc() -> None:
    assert parse_timestamp("2024-01-15T12:00:00") == datetime(2024, 1, 15, 12, tzinfo=timezone.utc)


def test_records_are_immutable() -> None:
    record = BookingRecord.model_validate({"status": "Booked"})
    with pytest.raises(Exception):
        record.status = "Cancelled"  # type: ignore[misc]


def test_source_result_tags() -> None:
    ok = BookingSourceResult.ok([])
    fallback = BookingSourceResult.fallback([], reason="offline")
    assert not ok.is_fallback and ok.reason is None
    assert fallback.is_fallback and fallback.reason == "offline"
