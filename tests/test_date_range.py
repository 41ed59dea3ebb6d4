from __future__ import annotations

from datetime import date, datetime, timezone

from src.analytics.date_range import filter_by_arrival
from src.models.bookings import BookingRecord


JANUARY = BookingRecord.model_validate(
    {"id": "jan", "arrival": "2024-01-15", "departure": "2024-01-20", "status": "Booked"}
)
FEBRUARY = BookingRecord.model_validate(
    {"id": "feb", "arrival": "2024-02-10", "departure": "2024-02-15", "status": "Booked"}
)
LATE_FEBRUARY = BookingRecord.model_validate(
    {"id": "feb-late", "arrival": "2024-02-28T18:30:00Z", "status": "Booked"}
)
BROKEN = BookingRecord.model_validate({"id": "broken", "arrival": "31/02/2024"})

BOOKINGS = [JANUARY, FEBRUARY, LATE_FEBRUARY, BROKEN]


def test_no_bounds_returns_everything_in_order() -> None:
    assert filter_by_arrival(BOOKINGS) == BOOKINGS


def test_start_bound_only() -> None:
    result = filter_by_arrival(BOOKINGS, start_date=date(2024, 2, 10))
    assert [booking.id for booking in result] == ["feb", "feb-late"]


def test_end_bound_only() -> None:
    result = filter_by_arrival(BOOKINGS, end_date=date(2024, 2, 10))
    assert [booking.id for booking in result] == ["jan", "feb"]


def test_both_bounds_are_inclusive_on_calendar_dates() -> None:
    result = filter_by_arrival(BOOKINGS, date(2024, 2, 1), date(2024, 2, 28))
    assert [booking.id for booking in result] == ["feb", "feb-late"]


def test_february_range_over_two_bookings() -> None:
    result = filter_by_arrival([JANUARY, FEBRUARY], date(2024, 2, 1), date(2024, 2, 28))
    assert result == [FEBRUARY]


def test_unparseable_arrival_is_excluded_once_bounded() -> None:
    assert BROKEN.arrival is None
    assert BROKEN not in filter_by_arrival(BOOKINGS, start_date=date(2000, 1, 1))
    assert BROKEN not in filter_by_arrival(BOOKINGS, end_date=date(2100, 1, 1))


def test_empty_result_is_not_an_error() -> None:
    assert filter_by_arrival(BOOKINGS, date(2030, 1, 1), date(2030, 12, 31)) == []
    assert filter_by_arrival(BOOKINGS, date(2024, 3, 1), date(2024, 1, 1)) == []
    assert filter_by_arrival([], date(2024, 1, 1)) == []


def test_filtering_is_idempotent() -> None:
    ranges = [
        (None, None),
        (date(2024, 2, 1), None),
        (None, date(2024, 1, 31)),
        (date(2024, 1, 15), date(2024, 2, 10)),
    ]
    for start_date, end_date in ranges:
        once = filter_by_arrival(BOOKINGS, start_date, end_date)
        assert filter_by_arrival(once, start_date, end_date) == once


def test_datetime_bounds_compare_by_calendar_date() -> None:
    start = datetime(2024, 2, 10, 23, 59, tzinfo=timezone.utc)
    end = datetime(2024, 2, 28, 0, 0)
    result = filter_by_arrival(BOOKINGS, start, end)
    assert [booking.id for booking in result] == ["feb", "feb-late"]
