from __future__ import annotations

from fastapi import APIRouter

from src.api.dashboard import router as dashboard_router
from src.api.health import router as health_router
from src.api.proxy import router as proxy_router


api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(dashboard_router)

# Mounted under the proxy prefix, outside the versioned API.
proxy_api_router = APIRouter()
proxy_api_router.include_router(proxy_router)
