from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.decorators import admin_required
from ..common.http import json_body
from ..container import Container
from ..core.constants import COVER_TYPES
from ..core.enums import ProjectStatus


def register(app: Flask, container: Container) -> None:
    service = container.project_service

    @app.route("/api/projects", methods=["GET"], endpoint="projects_list")
    @admin_required
    def list_projects():
        projects = service.list_projects(
            search=request.args.get("q", ""),
            status=request.args.get("status"),
        )
        return jsonify({"projects": [service.to_view(p) for p in projects]})

    @app.route("/api/projects/catalog", methods=["GET"], endpoint="projects_catalog")
    @admin_required
    def catalog():
        return jsonify(
            {
                "typologies": service.typologies(),
                "coverTypes": COVER_TYPES,
                "statuses": [s.value for s in ProjectStatus],
            }
        )

    @app.route("/api/projects", methods=["POST"], endpoint="projects_create")
    @admin_required
    def create_project():
        saved = service.create(json_body())
        return jsonify({"project": service.to_view(saved.project), "warnings": saved.warnings}), 201

    @app.route("/api/projects/<project_id>", methods=["GET"], endpoint="projects_get")
    @admin_required
    def get_project(project_id: str):
        return jsonify({"project": service.to_view(service.get(project_id))})

    @app.route("/api/projects/<project_id>", methods=["PUT", "PATCH"], endpoint="projects_update")
    @admin_required
    def update_project(project_id: str):
        saved = service.update(project_id, json_body())
        return jsonify({"project": service.to_view(saved.project), "warnings": saved.warnings})

    @app.route("/api/projects/<project_id>", methods=["DELETE"], endpoint="projects_delete")
    @admin_required
    def delete_project(project_id: str):
        service.delete(project_id)
        return jsonify({"ok": True})

    @app.route("/api/projects/<project_id>/timeline", methods=["POST"], endpoint="projects_timeline")
    @admin_required
    def project_timeline(project_id: str):
        return jsonify({"milestones": container.insight_service.project_timeline(project_id)})
