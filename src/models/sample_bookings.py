from __future__ import annotations

from typing import Any, Dict, List

from src.models.bookings import BookingRecord

# Served when the live booking fetch fails so the dashboard stays usable.
SAMPLE_BOOKING_ROWS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "guest": {"name": "John Doe"},
        "arrival": "2024-01-15",
        "departure": "2024-01-20",
        "total_amount": 500,
        "source": "Airbnb",
        "status": "Booked",
        "creation_date": "2023-12-15T10:00:00Z",
    },
    {
        "id": 2,
        "guest": {"name": "Jane Smith"},
        "arrival": "2024-02-10",
        "departure": "2024-02-15",
        "total_amount": 650,
        "source": "Booking.com",
        "status": "Booked",
        "creation_date": "2024-01-10T10:00:00Z",
    },
    {
        "id": 3,
        "guest": {"name": "Peter Jones"},
        "arrival": "2024-02-20",
        "departure": "2024-02-25",
        "total_amount": 550,
        "source": "Direct",
        "status": "Booked",
        "creation_date": "2024-02-01T10:00:00Z",
    },
    {
        "id": 4,
        "guest": {"name": "Mary Williams"},
        "arrival": "2024-03-05",
        "departure": "2024-03-10",
        "total_amount": 700,
        "source": "Airbnb",
        "status": "Cancelled",
        "creation_date": "2024-02-15T10:00:00Z",
    },
]

SAMPLE_BOOKINGS: List[BookingRecord] = [
    BookingRecord.model_validate(row) for row in SAMPLE_BOOKING_ROWS
]
