from __future__ import annotations

import json
import logging
import uuid
from typing import Any, Optional

from ..common.datetime_utils import utc_now_iso
from ..core.constants import NOTIFICATIONS_CAP
from ..core.enums import NotificationType
from .repository import KeyValueStore

logger = logging.getLogger(__name__)

PROJECTS = "mys_projects"
TRANSACTIONS = "mys_transactions"
EMPLOYEES = "mys_employees"
NOTIFICATIONS = "mys_notifications"
ADMIN_PASS = "mys_admin_pass"
APPLICATIONS = "mys_applications"

ALL_KEYS = (PROJECTS, TRANSACTIONS, EMPLOYEES, NOTIFICATIONS, ADMIN_PASS, APPLICATIONS)


class WorkspaceStorage:
    """JSON arrays under fixed keys.

    Every mutation reads the whole array and writes it back; there is no
    partial update and no locking, last writer wins.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _get_list(self, key: str) -> list[dict[str, Any]]:
        raw = self._store.get(key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("stored value under %s is not valid JSON, treating as empty", key)
            return []
        if not isinstance(data, list):
            logger.warning("stored value under %s is not a list, treating as empty", key)
            return []
        return [item for item in data if isinstance(item, dict)]

    def _save_list(self, key: str, items: list[dict[str, Any]]) -> None:
        self._store.set(key, json.dumps(items, ensure_ascii=False))

    def _upsert(self, key: str, item: dict[str, Any]) -> None:
        items = self._get_list(key)
        for index, existing in enumerate(items):
            if existing.get("id") == item.get("id"):
                items[index] = item
                break
        else:
            items.append(item)
        self._save_list(key, items)

    # Projects
    def get_projects(self) -> list[dict[str, Any]]:
        return self._get_list(PROJECTS)

    def save_project(self, project: dict[str, Any]) -> None:
        self._upsert(PROJECTS, project)

    def delete_project(self, project_id: str) -> bool:
        projects = self.get_projects()
        remaining = [p for p in projects if p.get("id") != project_id]
        self._save_list(PROJECTS, remaining)
        return len(remaining) != len(projects)

    # Transactions
    def get_transactions(self) -> list[dict[str, Any]]:
        return self._get_list(TRANSACTIONS)

    def save_transaction(self, transaction: dict[str, Any]) -> None:
        transactions = self.get_transactions()
        transactions.append(transaction)
        self._save_list(TRANSACTIONS, transactions)

    # Employees
    def get_employees(self) -> list[dict[str, Any]]:
        return self._get_list(EMPLOYEES)

    def save_employee(self, employee: dict[str, Any]) -> None:
        self._upsert(EMPLOYEES, employee)

    def generate_worker_id(self, year: int) -> str:
        return f"MS-{year}-{len(self.get_employees()) + 1:03d}"

    # Applications
    def get_applications(self) -> list[dict[str, Any]]:
        return self._get_list(APPLICATIONS)

    def save_application(self, application: dict[str, Any]) -> None:
        applications = self.get_applications()
        applications.append(application)
        self._save_list(APPLICATIONS, applications)

    def update_application_status(self, application_id: str, status: str) -> Optional[dict[str, Any]]:
        applications = self.get_applications()
        updated = None
        for app in applications:
            if app.get("id") == application_id:
                app["status"] = status
                updated = app
        self._save_list(APPLICATIONS, applications)
        return updated

    # Notifications
    def get_notifications(self) -> list[dict[str, Any]]:
        return self._get_list(NOTIFICATIONS)

    def add_notification(
        self,
        title: str,
        message: str,
        type: NotificationType = NotificationType.INFO,
    ) -> dict[str, Any]:
        notification = {
            "id": str(uuid.uuid4()),
            "title": title,
            "message": message,
            "type": NotificationType(type).value,
            "timestamp": utc_now_iso(),
            "read": False,
        }
        notifications = [notification, *self.get_notifications()][:NOTIFICATIONS_CAP]
        self._save_list(NOTIFICATIONS, notifications)
        return notification

    def mark_notifications_read(self) -> None:
        notifications = self.get_notifications()
        for n in notifications:
            n["read"] = True
        self._save_list(NOTIFICATIONS, notifications)

    # Admin password (stored as a werkzeug hash, JSON-encoded string)
    def get_admin_password_hash(self) -> Optional[str]:
        raw = self._store.get(ADMIN_PASS)
        if not raw:
            return None
        try:
            value = json.loads(raw)
        except ValueError:
            return None
        return value if isinstance(value, str) and value else None

    def set_admin_password_hash(self, password_hash: str) -> None:
        self._store.set(ADMIN_PASS, json.dumps(password_hash))

    def clear(self) -> None:
        for key in ALL_KEYS:
            self._store.delete(key)
