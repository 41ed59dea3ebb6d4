from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Optional

import httpx

from src.core.config import get_settings
from src.core.errors import UpstreamConfigurationError, UpstreamError


logger = logging.getLogger(__name__)


class LodgifyClient:
    _shared_client: httpx.Client | None = None
    _client_lock: Lock = Lock()

    def __init__(self, http_client: Optional[httpx.Client] = None) -> None:
        settings = get_settings()
        self.api_url = settings.lodgify_api_url
        self.api_key = settings.lodgify_api_key
        self.timeout = settings.lodgify_timeout_seconds
        self._client = http_client or self._get_shared_client()

    @classmethod
    def _get_shared_client(cls) -> httpx.Client:
        if cls._shared_client is not None:
            return cls._shared_client
        with cls._client_lock:
            if cls._shared_client is None:
                cls._shared_client = httpx.Client(
                    timeout=30.0,
                    limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
                )
        return cls._shared_client

    def fetch_bookings(self) -> Any:
        if not self.api_key:
            raise UpstreamConfigurationError("API key is not configured on the server.")

        headers = {
            "Accept": "application/json",
            "X-ApiKey": self.api_key,
        }
        try:
            response = self._client.get(self.api_url, headers=headers, timeout=self.timeout)
        except httpx.HTTPError as exc:
            logger.error("Lodgify request failed: %s", exc)
            raise UpstreamError(f"Lodgify API request failed: {exc}") from exc

        if response.is_error:
            raise UpstreamError(f"Lodgify API Error: {response.status_code} - {response.text}")
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError("Lodgify API returned a response that is not JSON") from exc
