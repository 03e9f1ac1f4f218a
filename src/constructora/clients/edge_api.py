"""HTTP client for the portal functions (attendance, applications, admin HR)."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """status 0 means the request never left this process (missing config)."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


@dataclass(frozen=True)
class EdgeApiSettings:
    base_url: str = ""
    api_key: str = ""
    org_id: str = ""
    portal_attendance_token: str = ""
    portal_applications_token: str = ""
    admin_token: str = ""

    @classmethod
    def from_env(cls) -> "EdgeApiSettings":
        def env(name: str) -> str:
            return (os.getenv(name) or "").strip()

        return cls(
            base_url=env("EDGE_API_URL"),
            api_key=env("EDGE_API_KEY"),
            org_id=env("WM_ORG_ID"),
            portal_attendance_token=env("PORTAL_ATTENDANCE_TOKEN"),
            portal_applications_token=env("PORTAL_APPLICATIONS_TOKEN"),
            admin_token=env("ADMIN_TOKEN"),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.api_key and self.org_id)

    @property
    def functions_base_url(self) -> str:
        return self.base_url.rstrip("/") + "/functions/v1"


class EdgeApi:
    def __init__(self, settings: EdgeApiSettings, *, timeout: float = 20.0, session: Optional[requests.Session] = None):
        self._settings = settings
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return self._settings.is_configured

    def _request(self, path: str, method: str, body: Any = None, headers: Optional[dict[str, str]] = None) -> dict:
        s = self._settings
        if not s.is_configured:
            raise ApiError(0, "Edge API env not configured")

        merged = {
            "content-type": "application/json",
            "apikey": s.api_key,
            "Authorization": f"Bearer {s.api_key}",
            **(headers or {}),
        }
        try:
            response = self._session.request(
                method,
                s.functions_base_url + path,
                json=body,
                headers=merged,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(0, str(e)) from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if not response.ok:
            message = payload.get("error") or payload.get("message") or f"HTTP {response.status_code}"
            raise ApiError(response.status_code, str(message))
        return payload

    def _require(self, value: str, env_name: str) -> str:
        if not value:
            raise ApiError(0, f"Missing {env_name}")
        return value

    def portal_mark_attendance(
        self,
        *,
        worker_id: str,
        lat: float,
        lng: float,
        method: str = "SELF",
        device_label: Optional[str] = None,
        note: Optional[str] = None,
    ) -> dict:
        token = self._require(self._settings.portal_attendance_token, "PORTAL_ATTENDANCE_TOKEN")
        if method == "EMERGENCY":
            raise ApiError(403, "EMERGENCY is admin-only")
        return self._request(
            "/mark-attendance",
            "POST",
            {
                "orgId": self._settings.org_id,
                "workerId": worker_id,
                "lat": lat,
                "lng": lng,
                "method": method,
                "deviceLabel": device_label,
                "note": note,
            },
            {"x-portal-token": token},
        )

    def admin_mark_attendance_emergency(
        self,
        *,
        worker_id: str,
        lat: float,
        lng: float,
        device_label: Optional[str] = None,
        note: Optional[str] = None,
    ) -> dict:
        token = self._require(self._settings.portal_attendance_token, "PORTAL_ATTENDANCE_TOKEN")
        admin = self._require(self._settings.admin_token, "ADMIN_TOKEN")
        return self._request(
            "/mark-attendance",
            "POST",
            {
                "orgId": self._settings.org_id,
                "workerId": worker_id,
                "lat": lat,
                "lng": lng,
                "method": "EMERGENCY",
                "deviceLabel": device_label,
                "note": note,
            },
            {"x-portal-token": token, "x-admin-token": admin},
        )

    def portal_submit_contract(
        self,
        *,
        name: str,
        phone: str,
        dpi: str,
        experience: str,
        position_applied: str,
    ) -> dict:
        token = self._require(self._settings.portal_applications_token, "PORTAL_APPLICATIONS_TOKEN")
        return self._request(
            "/submit-contract",
            "POST",
            {
                "orgId": self._settings.org_id,
                "name": name,
                "phone": phone,
                "dpi": dpi,
                "experience": experience,
                "positionApplied": position_applied,
            },
            {"x-portal-token": token},
        )

    def _admin_headers(self) -> dict[str, str]:
        return {"x-admin-token": self._require(self._settings.admin_token, "ADMIN_TOKEN")}

    def admin_list_employees(self) -> list[dict]:
        return self._request("/admin-rh/employees", "GET", headers=self._admin_headers()).get("employees", [])

    def admin_list_applications(self) -> list[dict]:
        return self._request("/admin-rh/applications", "GET", headers=self._admin_headers()).get("applications", [])

    def admin_update_application_status(self, application_id: str, status: str) -> dict:
        return self._request(
            f"/admin-rh/applications/{quote(application_id, safe='')}",
            "PATCH",
            {"status": status},
            self._admin_headers(),
        )

    def admin_hire_employee(
        self,
        *,
        name: str,
        dpi: str,
        phone: str,
        position: str,
        salary: float,
        worker_id: Optional[str] = None,
    ) -> dict:
        body: dict[str, Any] = {"name": name, "dpi": dpi, "phone": phone, "position": position, "salary": salary}
        if worker_id:
            body["workerId"] = worker_id
        return self._request("/admin-rh/employees", "POST", body, self._admin_headers())


def format_api_error(err: object) -> str:
    message = getattr(err, "message", None)
    if isinstance(message, str):
        return message
    return "Error inesperado"


def attendance_error_to_user_message(message: str) -> str:
    if re.search(r"Outside attendance window", message, re.IGNORECASE):
        return "Ventana cerrada (07:00–07:30)."
    if re.search(r"Already marked today", message, re.IGNORECASE):
        return "Ya ha marcado asistencia hoy."
    if re.search(r"Worker ID not found", message, re.IGNORECASE):
        return "ID no reconocido."
    return message
