from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta
from typing import Any, Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_in_zone
from ..common.validators import as_float, optional_text
from ..core.constants import ATTENDANCE_HISTORY_DAYS, DAYS_PER_MONTH, DPI_LENGTH, WORKER_ID_SCAN_LIMIT
from ..core.enums import EmployeeStatus, PresenceStatus
from ..core.exceptions import ValidationError
from ..core.settings import PortalSettings
from .model import Employee, HireResult
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_WORKER_ID_RE = re.compile(r"ID-PRO-(\d{4,})", re.IGNORECASE)


def next_worker_id(existing: list[str] | tuple[str, ...]) -> str:
    """ID-PRO-NNNN, one above the highest number already used."""
    highest = 0
    for worker_id in existing:
        match = _WORKER_ID_RE.search(worker_id or "")
        if match:
            highest = max(highest, int(match.group(1)))
    return f"ID-PRO-{highest + 1:04d}"


class EmployeeService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        settings: PortalSettings,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._settings = settings
        self._clock = clock or (lambda: now_in_zone(settings.timezone))

    def today(self) -> date:
        return self._clock().date()

    def list_employees(self) -> list[dict[str, Any]]:
        """Roster with the last two weeks of attendance, in the admin UI shape."""
        org_id = self._settings.require_org_id()
        today = self.today()
        since = today - timedelta(days=ATTENDANCE_HISTORY_DAYS)

        employees = list(self._employees.list_for_org(org_id))
        by_employee: dict[str, list[dict]] = {}
        if employees:
            for r in self._attendance.list_since(org_id, since):
                by_employee.setdefault(r.employee_id, []).append(
                    {
                        "id": r.id,
                        "date": r.day.isoformat(),
                        "lat": r.lat if r.lat is not None else 0,
                        "lng": r.lng if r.lng is not None else 0,
                        "method": r.method.value,
                    }
                )

        return [self._to_api(e, by_employee.get(e.id, []), today) for e in employees]

    def _to_api(self, e: Employee, history: list[dict], today: date) -> dict[str, Any]:
        today_iso = today.isoformat()
        today_record = next((h for h in history if h["date"] == today_iso), None)
        row = {
            "id": e.id,
            "workerId": e.worker_id,
            "name": e.name,
            "address": "",
            "phone": e.phone or "",
            "dpi": e.dpi or "",
            "position": e.position_title,
            "salary": e.monthly_salary,
            "experience": "",
            "status": (EmployeeStatus.ACTIVE if e.active else EmployeeStatus.INACTIVE).value,
            "attendanceStatus": (PresenceStatus.IN if today_record else PresenceStatus.OUT).value,
            "attendanceHistory": history,
            "hiringDate": e.created_at.date().isoformat() if e.created_at else today_iso,
            "isContractAccepted": True,
        }
        if today_record:
            row["lastAttendance"] = today_record
        return row

    def hire(self, payload: dict[str, Any]) -> HireResult:
        org_id = self._settings.require_org_id()

        name = str(payload.get("name") or "").strip()
        dpi = str(payload.get("dpi") or "").strip()
        position = str(payload.get("position") or "").strip()
        monthly = as_float(payload.get("salary"))

        if not name or len(dpi) != DPI_LENGTH:
            raise ValidationError("Invalid name/dpi")
        if not position:
            raise ValidationError("position is required")

        requested = optional_text(payload.get("workerId"))
        if requested:
            worker_id = requested.upper()
        else:
            worker_id = next_worker_id(list(self._employees.recent_worker_ids(org_id, WORKER_ID_SCAN_LIMIT)))

        employee_id = self._employees.create(
            org_id=org_id,
            worker_id=worker_id,
            name=name,
            phone=optional_text(payload.get("phone")),
            dpi=dpi,
            position_title=position,
            daily_salary=monthly / DAYS_PER_MONTH if monthly > 0 else 0.0,
        )
        logger.info("hired %s as %s", worker_id, position)
        return HireResult(employee_id=employee_id, worker_id=worker_id)
