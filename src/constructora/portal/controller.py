"""Portal functions: worker attendance, job applications and admin HR."""

from __future__ import annotations

import hmac
from typing import Optional

from flask import Flask, current_app, jsonify, request, send_file

from ..common.http import apply_cors, error_response, json_body, json_error
from ..container import Container
from ..core.enums import PortalMode
from ..core.exceptions import AuthenticationError, ConfigurationError, DomainError
from .qr import portal_link, qr_png

PREFIX = "/functions/v1"
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# path prefix -> (token header, allowed methods)
CORS_RULES = {
    f"{PREFIX}/mark-attendance": ("x-portal-token", ("POST", "OPTIONS")),
    f"{PREFIX}/submit-contract": ("x-portal-token", ("POST", "OPTIONS")),
    f"{PREFIX}/admin-rh": ("x-admin-token", ("GET", "POST", "PATCH", "OPTIONS")),
}


def _check_secret(expected: Optional[str], env_name: str, header: str, message: str) -> None:
    if not expected:
        raise ConfigurationError(f"Missing env: {env_name}")
    presented = request.headers.get(header, "")
    if not hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8")):
        raise AuthenticationError(message)


def _unexpected(exc: Exception):
    current_app.logger.exception("portal function failed")
    return json_error(str(exc) or exc.__class__.__name__, 500)


def register(app: Flask, container: Container) -> None:
    settings = container.portal_settings

    @app.after_request
    def portal_cors(response):
        for prefix, (token_header, methods) in CORS_RULES.items():
            if request.path == prefix or request.path.startswith(prefix + "/"):
                return apply_cors(response, extra_headers=[token_header], methods=methods)
        return response

    @app.route(f"{PREFIX}/mark-attendance", methods=ALL_METHODS, endpoint="fn_mark_attendance")
    def mark_attendance():
        if request.method == "OPTIONS":
            return "", 204
        if request.method != "POST":
            return json_error("Method not allowed", 405)
        try:
            _check_secret(settings.attendance_token, "PORTAL_ATTENDANCE_TOKEN", "x-portal-token", "Invalid portal token")
            result = container.attendance_service.mark(
                json_body(),
                admin_token=request.headers.get("x-admin-token"),
            )
            return jsonify(result.to_dict())
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return _unexpected(e)

    @app.route(f"{PREFIX}/submit-contract", methods=ALL_METHODS, endpoint="fn_submit_contract")
    def submit_contract():
        if request.method == "OPTIONS":
            return "", 204
        if request.method != "POST":
            return json_error("Method not allowed", 405)
        try:
            _check_secret(
                settings.applications_token, "PORTAL_APPLICATIONS_TOKEN", "x-portal-token", "Invalid portal token"
            )
            application_id = container.application_service.submit(json_body())
            return jsonify({"ok": True, "applicationId": application_id})
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return _unexpected(e)

    @app.route(f"{PREFIX}/admin-rh", defaults={"sub_path": ""}, methods=ALL_METHODS, endpoint="fn_admin_rh_root")
    @app.route(f"{PREFIX}/admin-rh/", defaults={"sub_path": ""}, methods=ALL_METHODS, endpoint="fn_admin_rh_slash")
    @app.route(f"{PREFIX}/admin-rh/<path:sub_path>", methods=ALL_METHODS, endpoint="fn_admin_rh")
    def admin_rh(sub_path: str):
        if request.method == "OPTIONS":
            return "", 204
        try:
            _check_secret(settings.admin_token, "ADMIN_TOKEN", "x-admin-token", "Invalid admin token")
            settings.require_org_id()
            return _admin_dispatch(request.method, "/" + sub_path if sub_path else "")
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return _unexpected(e)

    def _admin_dispatch(method: str, sub: str):
        if method == "GET" and sub in ("", "/", "/health"):
            return jsonify({"ok": True})

        if sub == "/employees":
            if method == "GET":
                return jsonify({"employees": container.employee_service.list_employees()})
            if method == "POST":
                hired = container.employee_service.hire(json_body())
                return jsonify({"ok": True, "employeeId": hired.employee_id, "workerId": hired.worker_id})

        if method == "GET" and sub == "/applications":
            apps = container.application_service.list_applications()
            return jsonify({"applications": [a.to_api() for a in apps]})

        if method == "PATCH" and sub.startswith("/applications/"):
            application_id = sub.split("/")[2]
            container.application_service.set_status(application_id, json_body().get("status"))
            return jsonify({"ok": True})

        if method == "GET" and sub == "/portal-qr":
            try:
                mode = PortalMode(request.args.get("portal", PortalMode.ATTENDANCE.value).upper())
            except ValueError:
                return json_error("Invalid portal", 400)
            base = current_app.config.get("PUBLIC_BASE_URL") or request.host_url
            return send_file(qr_png(portal_link(base, mode)), mimetype="image/png")

        return json_error("Not found", 404)
