from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_in_zone
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError
from ..core.settings import PortalSettings
from ..employees.repository import EmployeeRepository
from ..notifications.service import NotificationService
from .factory import AttendanceStrategyFactory
from .model import MarkAttendanceCommand, MarkResult
from .repository import AttendanceRepository
from .strategies.base import CheckInContext
from .window import AttendanceWindow

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        notifications: NotificationService,
        settings: PortalSettings,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._notifications = notifications
        self._settings = settings
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._clock = clock or (lambda: now_in_zone(settings.timezone))
        self._window = AttendanceWindow(settings.window_start, settings.window_minutes)

    @property
    def window(self) -> AttendanceWindow:
        return self._window

    def mark(self, payload: dict[str, Any], *, admin_token: Optional[str] = None) -> MarkResult:
        """Register today's attendance for a worker.

        Checks run in a fixed order and the first failing one decides the
        error: body shape, org, method rules (window or admin secret),
        worker lookup, then the one-mark-per-day rule.
        """
        self._settings.require_org_id()
        cmd = MarkAttendanceCommand.from_payload(payload)
        org_id = self._settings.resolve_org(cmd.org_id)

        now = self._clock()
        strategy = self._factory.for_method(cmd.method)
        strategy.authorize(
            CheckInContext(now=now, window=self._window, settings=self._settings, admin_token=admin_token)
        )
        day = now.date()

        employee = self._employees.get_by_worker_id(org_id, cmd.worker_id)
        if not employee:
            raise NotFoundError("Worker ID not found")
        if not employee.active:
            raise AuthorizationError("Employee inactive")

        if self._attendance.get_for_employee_and_day(org_id, employee.id, day):
            raise ConflictError("Already marked today")

        self._attendance.create(
            org_id=org_id,
            employee_id=employee.id,
            day=day,
            method=cmd.method,
            lat=cmd.lat,
            lng=cmd.lng,
            device_label=cmd.device_label,
            note=cmd.note,
        )
        logger.info("attendance %s marked for %s on %s", cmd.method.value, cmd.worker_id, day)

        self._notifications.notify_best_effort(
            org_id=org_id,
            title="Asistencia registrada",
            message=f"{employee.name} ({cmd.worker_id}) marcó asistencia ({cmd.method.value}) el {day.isoformat()}.",
        )
        return MarkResult(day=day, employee_name=employee.name, method=cmd.method)
