from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Dict, Optional

import httpx

from src.core.config import get_settings
from src.core.errors import UpstreamConfigurationError, UpstreamError


logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to get a valid response from the Gemini API."


class GeminiClient:
    _shared_client: httpx.Client | None = None
    _client_lock: Lock = Lock()

    def __init__(self, http_client: Optional[httpx.Client] = None) -> None:
        settings = get_settings()
        self.base_url = settings.gemini_api_base_url.rstrip("/")
        self.model = settings.gemini_model
        self.api_key = settings.gemini_api_key
        self.timeout = settings.gemini_timeout_seconds
        self._client = http_client or self._get_shared_client()

    @classmethod
    def _get_shared_client(cls) -> httpx.Client:
        if cls._shared_client is not None:
            return cls._shared_client
        with cls._client_lock:
            if cls._shared_client is None:
                cls._shared_client = httpx.Client(timeout=60.0)
        return cls._shared_client

    def generate_content(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise UpstreamConfigurationError("Gemini API key is not configured on the server.")

        url = f"{self.base_url}/models/{self.model}:generateContent"
        try:
            response = self._client.post(
                url,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            logger.error("Gemini request failed: %s", type(exc).__name__)
            raise UpstreamError(f"Gemini API request failed: {type(exc).__name__}") from exc

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_error:
            logger.error("Gemini API error: status=%s body=%s", response.status_code, data)
            raise UpstreamError(self._error_message(data) or DEFAULT_ERROR_MESSAGE)
        if not isinstance(data, dict):
            raise UpstreamError(DEFAULT_ERROR_MESSAGE)
        return data

    @staticmethod
    def _error_message(data: Any) -> Optional[str]:
        if not isinstance(data, dict):
            return None
        error = data.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str):
            return error
        return None
