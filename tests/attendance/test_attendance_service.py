from __future__ import annotations

from datetime import date, datetime, time

import pytest

from constructora.attendance.service import AttendanceService
from constructora.core.enums import AttendanceMethod
from constructora.core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from constructora.core.settings import PortalSettings
from constructora.notifications.service import NotificationService

from fakes import FixedClock, InMemoryAttendance, InMemoryEmployees, InMemoryNotifications

SETTINGS = PortalSettings(org_id="org-test", window_start=time(7, 0), window_minutes=30, admin_token="adm")


def _service(now: datetime, *, settings: PortalSettings = SETTINGS, notifications=None):
    employees = InMemoryEmployees()
    attendance = InMemoryAttendance()
    notifications = notifications or InMemoryNotifications()
    service = AttendanceService(
        attendance,
        employees,
        NotificationService(notifications),
        settings,
        clock=FixedClock(now),
    )
    return service, employees, attendance, notifications


def test_mark_inside_window_creates_record_and_notifies():
    service, employees, attendance, notifications = _service(datetime(2025, 3, 10, 7, 15))
    employees.add("ID-PRO-0001", "Juan Pérez")

    result = service.mark({"workerId": " id-pro-0001 ", "lat": 14.6, "lng": -90.5})

    assert result.to_dict() == {
        "ok": True,
        "day": "2025-03-10",
        "employeeName": "Juan Pérez",
        "method": "SELF",
    }
    assert len(attendance.rows) == 1
    assert attendance.rows[0].method == AttendanceMethod.SELF
    assert notifications.rows[0]["title"] == "Asistencia registrada"
    assert "Juan Pérez (ID-PRO-0001) marcó asistencia (SELF) el 2025-03-10." == notifications.rows[0]["message"]


def test_second_mark_same_day_conflicts():
    service, employees, attendance, _ = _service(datetime(2025, 3, 10, 7, 15))
    employees.add("ID-PRO-0001", "Juan")
    service.mark({"workerId": "ID-PRO-0001", "lat": 1, "lng": 2})

    with pytest.raises(ConflictError) as exc:
        service.mark({"workerId": "ID-PRO-0001", "lat": 1, "lng": 2})

    assert str(exc.value) == "Already marked today"
    assert len(attendance.rows) == 1


def test_outside_window_rejected_before_lookup():
    service, _, attendance, _ = _service(datetime(2025, 3, 10, 8, 0))

    with pytest.raises(AuthorizationError) as exc:
        service.mark({"workerId": "ID-PRO-9999", "lat": 1, "lng": 2})

    assert "Outside attendance window" in str(exc.value)
    assert attendance.rows == []


def test_emergency_with_admin_token_any_time():
    service, employees, attendance, _ = _service(datetime(2025, 3, 10, 18, 45))
    employees.add("ID-PRO-0002", "Ana")

    result = service.mark({"workerId": "ID-PRO-0002", "lat": 1, "lng": 2, "method": "EMERGENCY"}, admin_token="adm")

    assert result.method == AttendanceMethod.EMERGENCY
    assert attendance.rows[0].day == date(2025, 3, 10)


def test_emergency_without_admin_token_forbidden():
    service, employees, _, _ = _service(datetime(2025, 3, 10, 7, 5))
    employees.add("ID-PRO-0002", "Ana")

    with pytest.raises(AuthorizationError):
        service.mark({"workerId": "ID-PRO-0002", "lat": 1, "lng": 2, "method": "EMERGENCY"})


def test_unknown_worker_and_inactive_worker():
    service, employees, _, _ = _service(datetime(2025, 3, 10, 7, 5))
    employees.add("ID-PRO-0003", "Luis", active=False)

    with pytest.raises(NotFoundError):
        service.mark({"workerId": "ID-PRO-0404", "lat": 1, "lng": 2})
    with pytest.raises(AuthorizationError) as exc:
        service.mark({"workerId": "ID-PRO-0003", "lat": 1, "lng": 2})
    assert str(exc.value) == "Employee inactive"


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"lat": 1, "lng": 2}, "workerId is required"),
        ({"workerId": "   ", "lat": 1, "lng": 2}, "workerId is required"),
        ({"workerId": "ID-PRO-0001", "lat": None, "lng": 2}, "lat/lng are required"),
        ({"workerId": "ID-PRO-0001", "lat": True, "lng": 2}, "lat/lng are required"),
        ({"workerId": "ID-PRO-0001", "lat": float("nan"), "lng": 2}, "lat/lng are required"),
        ({"workerId": "ID-PRO-0001", "lat": 1, "lng": 2, "method": "REMOTE"}, "Invalid method"),
    ],
)
def test_invalid_payloads(payload, message):
    service, _, _, _ = _service(datetime(2025, 3, 10, 7, 5))

    with pytest.raises(ValidationError) as exc:
        service.mark(payload)

    assert str(exc.value) == message


def test_foreign_org_is_rejected():
    service, employees, _, _ = _service(datetime(2025, 3, 10, 7, 5))
    employees.add("ID-PRO-0001", "Juan")

    with pytest.raises(AuthorizationError) as exc:
        service.mark({"workerId": "ID-PRO-0001", "lat": 1, "lng": 2, "orgId": "other-org"})

    assert str(exc.value) == "Invalid org"


def test_missing_org_configuration():
    service, _, _, _ = _service(datetime(2025, 3, 10, 7, 5), settings=PortalSettings())

    with pytest.raises(ConfigurationError) as exc:
        service.mark({"workerId": "ID-PRO-0001", "lat": 1, "lng": 2})

    assert str(exc.value) == "Missing env: WM_ORG_ID"


def test_notification_failure_does_not_fail_the_mark():
    service, employees, attendance, _ = _service(
        datetime(2025, 3, 10, 7, 5), notifications=InMemoryNotifications(fail=True)
    )
    employees.add("ID-PRO-0001", "Juan")

    result = service.mark({"workerId": "ID-PRO-0001", "lat": "14.6", "lng": "-90.5"})

    assert result.employee_name == "Juan"
    assert attendance.rows[0].lat == 14.6
