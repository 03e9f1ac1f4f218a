from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.decorators import admin_required
from ..common.http import json_body
from ..container import Container
from ..core.constants import POSITIONS


def register(app: Flask, container: Container) -> None:
    hr = container.workspace_hr_service

    @app.route("/api/hr/positions", methods=["GET"], endpoint="hr_positions")
    @admin_required
    def positions():
        return jsonify({"positions": [{"title": t, "pay": p, "type": "Mensual"} for t, p in POSITIONS.items()]})

    @app.route("/api/hr/employees", methods=["GET"], endpoint="hr_employees")
    @admin_required
    def list_employees():
        return jsonify({"employees": hr.list_employees()})

    @app.route("/api/hr/employees", methods=["POST"], endpoint="hr_hire")
    @admin_required
    def hire():
        return jsonify({"employee": hr.hire(json_body())}), 201

    @app.route("/api/hr/applications", methods=["GET"], endpoint="hr_applications")
    @admin_required
    def list_applications():
        return jsonify({"applications": hr.list_applications()})

    @app.route("/api/hr/applications", methods=["POST"], endpoint="hr_add_application")
    @admin_required
    def add_application():
        return jsonify({"application": hr.add_application(json_body())}), 201

    @app.route("/api/hr/applications/<application_id>", methods=["PATCH"], endpoint="hr_decide_application")
    @admin_required
    def decide_application(application_id: str):
        prefill = hr.decide_application(application_id, json_body().get("status"))
        return jsonify({"ok": True, "hireForm": prefill})

    @app.route("/api/hr/payroll", methods=["GET"], endpoint="hr_payroll")
    @admin_required
    def payroll():
        if request.args.get("source") == "portal":
            employees = container.employee_service.list_employees()
        else:
            employees = hr.list_employees()
        report = container.payroll_service.weekly(employees, today=container.employee_service.today())
        return jsonify(report.to_dict())
