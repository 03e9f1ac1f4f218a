from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.decorators import admin_required
from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.budget_service

    @app.route("/api/budgets/draft", methods=["GET"], endpoint="budgets_draft")
    @admin_required
    def draft():
        return jsonify(
            service.draft(project_id=request.args.get("projectId"), typology=request.args.get("typology"))
        )

    @app.route("/api/budgets/compute", methods=["POST"], endpoint="budgets_compute")
    @admin_required
    def compute():
        return jsonify(service.recompute(json_body().get("items")))

    @app.route("/api/budgets/phases", methods=["POST"], endpoint="budgets_phases")
    @admin_required
    def phases():
        data = json_body()
        return jsonify(container.insight_service.budget_phases(data.get("projectId"), data.get("items")))
