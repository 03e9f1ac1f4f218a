from __future__ import annotations

from flask import Flask, jsonify

from ..auth.decorators import admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    storage = container.storage

    @app.route("/api/notifications", methods=["GET"], endpoint="notifications_list")
    @admin_required
    def list_notifications():
        notifications = storage.get_notifications()
        unread = sum(1 for n in notifications if not n.get("read"))
        return jsonify({"notifications": notifications, "unread": unread})

    @app.route("/api/notifications/read", methods=["POST"], endpoint="notifications_read")
    @admin_required
    def mark_read():
        storage.mark_notifications_read()
        return jsonify({"ok": True})
