"""Client for the ``/api/gemini/generate`` proxy."""

from __future__ import annotations

import os
from typing import Any, Optional

import requests

from ..ai.model import data_url_to_inline_data

__all__ = ["GeminiProxyError", "GeminiProxyClient", "data_url_to_inline_data"]


class GeminiProxyError(Exception):
    pass


class GeminiProxyClient:
    def __init__(self, base_url: Optional[str] = None, *, timeout: float = 120.0, session: Optional[requests.Session] = None):
        self._base_url = (base_url or os.getenv("GEMINI_PROXY_URL") or "http://localhost:8080").rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def generate(
        self,
        model: str,
        *,
        prompt: Optional[str] = None,
        parts: Optional[list[dict[str, Any]]] = None,
        config: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"model": model}
        if prompt is not None:
            body["prompt"] = prompt
        if parts is not None:
            body["parts"] = parts
        if config is not None:
            body["config"] = config

        response = self._session.post(
            f"{self._base_url}/api/gemini/generate",
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=self._timeout,
        )
        if not response.ok:
            raise GeminiProxyError(response.text or f"Gemini request failed ({response.status_code})")
        return response.json()
