"""Thin client for the Gemini ``generateContent`` REST endpoint."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.exceptions import ServiceUnavailableError, UpstreamError
from .model import GenerateRequest, GenerateResult, InlineImage

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


def build_body(req: GenerateRequest) -> dict[str, Any]:
    body: dict[str, Any] = {"contents": req.contents()}
    config = req.config or {}
    if "systemInstruction" in config:
        body["systemInstruction"] = {"parts": [{"text": config["systemInstruction"]}]}
    if "responseMimeType" in config:
        body["generationConfig"] = {"responseMimeType": config["responseMimeType"]}
    if "tools" in config:
        body["tools"] = config["tools"]
    return body


def parse_response(payload: dict[str, Any]) -> GenerateResult:
    """Text and inline images of the first candidate."""
    candidates = payload.get("candidates") or []
    first = candidates[0] if candidates and isinstance(candidates[0], dict) else {}
    parts = (first.get("content") or {}).get("parts") or []

    texts: list[str] = []
    images: list[InlineImage] = []
    for part in parts:
        if not isinstance(part, dict):
            continue
        if isinstance(part.get("text"), str) and not part.get("thought"):
            texts.append(part["text"])
        inline = part.get("inlineData") or {}
        if inline.get("data") and inline.get("mimeType"):
            images.append(InlineImage(data=inline["data"], mime_type=inline["mimeType"]))

    return GenerateResult(text="".join(texts) if texts else None, images=images)


class GeminiService:
    def __init__(
        self,
        api_key: Optional[str],
        *,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 60.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key or None
        self._api_base = api_base.rstrip("/")
        self._timeout = float(timeout)
        self._session = session or requests.Session()
        if not self._api_key:
            logger.warning("GEMINI_API_KEY is not set; AI endpoints will answer 503")

    @property
    def configured(self) -> bool:
        return self._api_key is not None

    def generate(self, req: GenerateRequest) -> GenerateResult:
        if not self._api_key:
            raise ServiceUnavailableError("Gemini is not configured on this server.")

        url = f"{self._api_base}/models/{req.model}:generateContent"
        try:
            response = self._session.post(
                url,
                json=build_body(req),
                headers={"x-goog-api-key": self._api_key},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.exception("Gemini request to %s failed", req.model)
            raise UpstreamError("Gemini request failed.") from e

        if response.status_code >= 400:
            logger.error("Gemini returned %s: %s", response.status_code, response.text[:500])
            raise UpstreamError("Gemini request failed.")

        try:
            payload = response.json()
        except ValueError as e:
            logger.exception("Gemini answered with a non-JSON body")
            raise UpstreamError("Gemini request failed.") from e

        return parse_response(payload if isinstance(payload, dict) else {})
