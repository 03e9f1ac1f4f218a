from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import json_body
from ..container import Container
from ..core.enums import Role
from .decorators import admin_required


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        data = json_body()
        container.auth_service.login(str(data.get("password") or ""))
        session.clear()
        session["role"] = Role.ADMIN.value
        return jsonify({"ok": True, "role": Role.ADMIN.value})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        session.clear()
        return jsonify({"ok": True})

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    def me():
        role = session.get("role")
        return jsonify({"authenticated": role == Role.ADMIN.value, "role": role})

    @app.route("/api/auth/password", methods=["POST"], endpoint="auth_change_password")
    @admin_required
    def change_password():
        data = json_body()
        container.auth_service.change_password(
            str(data.get("password") or ""),
            str(data.get("newPassword") or ""),
        )
        return jsonify({"ok": True})
