from __future__ import annotations

from flask import Flask, jsonify

from ..auth.decorators import admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard_metrics")
    @admin_required
    def dashboard():
        return jsonify(container.metrics_service.workspace_metrics().to_dict())

    @app.route("/api/dashboard/briefing", methods=["POST"], endpoint="dashboard_briefing")
    @admin_required
    def briefing():
        return jsonify({"briefing": container.insight_service.executive_briefing()})

    @app.route("/api/reports/executive", methods=["POST"], endpoint="reports_executive")
    @admin_required
    def executive_report():
        return jsonify({"report": container.insight_service.executive_report()})
