from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from src.api.dependencies import get_bookings_service, get_insights_service
from src.core.errors import AppError, proxy_error_response
from src.services.bookings_service import BookingsService
from src.services.insights_service import InsightsService


logger = logging.getLogger(__name__)

router = APIRouter(tags=["proxy"])


@router.get("/bookings")
def bookings_proxy(
    service: BookingsService = Depends(get_bookings_service),
) -> JSONResponse:
    try:
        data = service.fetch_raw()
    except AppError as exc:
        logger.error("Error proxying to Lodgify: %s", exc.message)
        return proxy_error_response(exc)
    return JSONResponse(status_code=200, content=data)


@router.post("/generate-insights")
def generate_insights_proxy(
    payload: Dict[str, Any] = Body(...),
    service: InsightsService = Depends(get_insights_service),
) -> JSONResponse:
    try:
        data = service.forward(payload)
    except AppError as exc:
        logger.error("Error proxying to Gemini: %s", exc.message)
        return proxy_error_response(exc)
    return JSONResponse(status_code=200, content=data)
