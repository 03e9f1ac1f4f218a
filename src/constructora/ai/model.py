from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.exceptions import ValidationError

FLASH_MODEL = "gemini-3-flash-preview"
PRO_MODEL = "gemini-3-pro-preview"
IMAGE_MODEL = "gemini-2.5-flash-image"

ALLOWED_MODELS = frozenset({FLASH_MODEL, PRO_MODEL, IMAGE_MODEL})

_DATA_URL_HEADER = re.compile(r"^data:(.*?);base64$")


def sanitize_config(config: Any) -> Optional[dict[str, Any]]:
    """Keep only responseMimeType, systemInstruction and the googleSearch tool."""
    if not isinstance(config, dict):
        return None

    out: dict[str, Any] = {}
    if isinstance(config.get("responseMimeType"), str):
        out["responseMimeType"] = config["responseMimeType"]
    if isinstance(config.get("systemInstruction"), str):
        out["systemInstruction"] = config["systemInstruction"]

    tools = config.get("tools")
    if isinstance(tools, list):
        allowed = [{"googleSearch": {}} for t in tools if isinstance(t, dict) and "googleSearch" in t]
        if allowed:
            out["tools"] = allowed

    return out or None


@dataclass(frozen=True)
class GenerateRequest:
    model: str
    prompt: Optional[str] = None
    parts: Optional[list[Any]] = None
    config: Optional[dict[str, Any]] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "GenerateRequest":
        model = payload.get("model")
        if not isinstance(model, str) or model not in ALLOWED_MODELS:
            raise ValidationError("Model not allowed.")

        prompt = payload.get("prompt")
        parts = payload.get("parts")
        if not isinstance(prompt, str) and not isinstance(parts, list):
            raise ValidationError("Request must include prompt (string) or parts (array).")

        return cls(
            model=model,
            prompt=prompt if isinstance(prompt, str) else None,
            parts=parts if isinstance(parts, list) else None,
            config=sanitize_config(payload.get("config")),
        )

    def contents(self) -> list[dict[str, Any]]:
        parts = self.parts if self.parts is not None else [{"text": self.prompt or ""}]
        return [{"role": "user", "parts": parts}]


@dataclass(frozen=True)
class InlineImage:
    data: str
    mime_type: str

    def to_dict(self) -> dict[str, str]:
        return {"data": self.data, "mimeType": self.mime_type}

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


@dataclass(frozen=True)
class GenerateResult:
    text: Optional[str]
    images: list[InlineImage] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"text": self.text}
        if self.images:
            out["images"] = [i.to_dict() for i in self.images]
        return out


def data_url_to_inline_data(data_url: str) -> dict[str, str]:
    """``data:<mime>;base64,<payload>`` -> ``{"mimeType", "data"}``."""
    header, sep, data = (data_url or "").partition(",")
    if not sep:
        raise ValueError("Invalid data URL")
    match = _DATA_URL_HEADER.match(header)
    if not match:
        raise ValueError("Invalid data URL header (expected base64)")
    return {"mimeType": match.group(1), "data": data}
