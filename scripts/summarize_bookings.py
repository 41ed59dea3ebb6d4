from __future__ import annotations

import argparse
import json
import os
import sys
from datetime import date
from typing import Any, Dict, Optional

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def load_env_file(env_path: str) -> None:
    if not os.path.exists(env_path):
        return
    with open(env_path, "r", encoding="utf-8") as env_file:
        for line in env_file:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key, value)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print booking KPIs and chart series for a date range."
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Lodgify bookings JSON export ({\"items\": [...]}). Fetches live when omitted.",
    )
    parser.add_argument("--start-date", type=date.fromisoformat, default=None)
    parser.add_argument("--end-date", type=date.fromisoformat, default=None)
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Environment file path (default: .env).",
    )
    return parser.parse_args()


def summarize(
    payload: Optional[Dict[str, Any]], start_date: Optional[date], end_date: Optional[date]
) -> Dict[str, Any]:
    from src.analytics.booking_metrics import aggregate_bookings
    from src.analytics.date_range import filter_by_arrival
    from src.api.dependencies import get_bookings_service
    from src.services.bookings_service import BookingsService

    warning = None
    if payload is not None:
        bookings = BookingsService.parse_bookings(payload)
    else:
        source = get_bookings_service().load_bookings()
        bookings = source.bookings
        warning = source.reason

    metrics = aggregate_bookings(filter_by_arrival(bookings, start_date, end_date))
    return {"metrics": metrics.to_payload(), "warning": warning}


def main() -> int:
    args = parse_args()
    load_env_file(os.path.join(PROJECT_ROOT, args.env_file))

    from src.core.errors import AppError
    from src.core.logging import configure_logging

    configure_logging(os.environ.get("LOG_LEVEL"))

    payload = None
    if args.input:
        with open(args.input, "r", encoding="utf-8") as input_file:
            payload = json.load(input_file)

    try:
        result = summarize(payload, args.start_date, args.end_date)
    except AppError as exc:
        print(f"Failed to summarize bookings: {exc.message}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
