from __future__ import annotations

from flask import Flask, current_app, jsonify

from ..auth.decorators import admin_required
from ..common.http import client_ip, json_body
from ..container import Container
from ..core.exceptions import DomainError
from .model import GenerateRequest


def _plain(message: str, status: int):
    return message, status, {"Content-Type": "text/plain; charset=utf-8"}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/gemini/generate", methods=["POST"], endpoint="gemini_generate")
    def gemini_generate():
        """Pass-through to Gemini; errors go back as plain text."""
        try:
            container.rate_limiter.hit(client_ip())
            if not container.gemini_service.configured:
                return _plain("Gemini is not configured on this server.", 503)
            req = GenerateRequest.from_payload(json_body())
            return jsonify(container.gemini_service.generate(req).to_dict())
        except DomainError as e:
            if e.status_code >= 500:
                return _plain("Gemini request failed.", 500)
            return _plain(str(e), e.status_code)
        except Exception:
            current_app.logger.exception("gemini proxy failed")
            return _plain("Gemini request failed.", 500)

    @app.route("/api/purchasing/advice", methods=["POST"], endpoint="purchasing_advice")
    @admin_required
    def purchasing_advice():
        data = json_body()
        text = container.insight_service.purchasing_advice(
            str(data.get("message") or ""),
            specs=data.get("specs") or None,
            image=data.get("image") or None,
        )
        return jsonify({"text": text})

    @app.route("/api/images/edit", methods=["POST"], endpoint="images_edit")
    @admin_required
    def edit_image():
        data = json_body()
        image = container.insight_service.edit_image(str(data.get("image") or ""), str(data.get("prompt") or ""))
        return jsonify({"image": image})
