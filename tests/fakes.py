"""In-memory stand-ins for the repositories, the key-value store and Gemini."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Optional

from constructora.ai.model import GenerateResult
from constructora.applications.model import CandidateApplication
from constructora.attendance.model import AttendanceRecord
from constructora.core.enums import ApplicationStatus
from constructora.core.exceptions import ConflictError, ServiceUnavailableError
from constructora.employees.model import Employee

ORG = "org-test"


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@dataclass
class InMemoryEmployees:
    rows: list[Employee] = field(default_factory=list)

    def add(self, worker_id: str, name: str, *, daily_salary: float = 100.0, active: bool = True, org_id: str = ORG):
        emp = Employee(
            id=str(uuid.uuid4()),
            org_id=org_id,
            worker_id=worker_id,
            name=name,
            phone=None,
            dpi="1234567890123",
            position_title="Albañil",
            daily_salary=daily_salary,
            active=active,
            created_at=datetime(2025, 1, 2, 8, 0),
        )
        self.rows.append(emp)
        return emp

    def get_by_worker_id(self, org_id: str, worker_id: str) -> Optional[Employee]:
        return next((e for e in self.rows if e.org_id == org_id and e.worker_id == worker_id), None)

    def list_for_org(self, org_id: str):
        return [e for e in self.rows if e.org_id == org_id]

    def recent_worker_ids(self, org_id: str, limit: int):
        return [e.worker_id for e in reversed(self.rows) if e.org_id == org_id][:limit]

    def create(self, *, org_id, worker_id, name, phone, dpi, position_title, daily_salary) -> str:
        if self.get_by_worker_id(org_id, worker_id):
            raise ConflictError("Worker ID already exists")
        emp = Employee(
            id=str(uuid.uuid4()),
            org_id=org_id,
            worker_id=worker_id,
            name=name,
            phone=phone,
            dpi=dpi,
            position_title=position_title,
            daily_salary=daily_salary,
        )
        self.rows.append(emp)
        return emp.id


@dataclass
class InMemoryAttendance:
    rows: list[AttendanceRecord] = field(default_factory=list)

    def get_for_employee_and_day(self, org_id: str, employee_id: str, day: date):
        return next(
            (r for r in self.rows if r.org_id == org_id and r.employee_id == employee_id and r.day == day),
            None,
        )

    def create(self, *, org_id, employee_id, day, method, lat, lng, device_label=None, note=None) -> str:
        if self.get_for_employee_and_day(org_id, employee_id, day):
            raise ConflictError("Already marked today")
        record = AttendanceRecord(
            id=str(uuid.uuid4()),
            org_id=org_id,
            employee_id=employee_id,
            day=day,
            method=method,
            lat=lat,
            lng=lng,
            device_label=device_label,
            note=note,
        )
        self.rows.append(record)
        return record.id

    def list_since(self, org_id: str, since: date):
        return sorted((r for r in self.rows if r.org_id == org_id and r.day >= since), key=lambda r: r.day)


@dataclass
class InMemoryApplications:
    rows: list[CandidateApplication] = field(default_factory=list)

    def create(self, *, org_id, name, phone, dpi, experience, position_applied, contract_data, source, meta) -> str:
        app = CandidateApplication(
            id=str(uuid.uuid4()),
            org_id=org_id,
            name=name,
            phone=phone,
            dpi=dpi,
            experience=experience,
            position_applied=position_applied,
            contract_data=contract_data,
            source=source,
            meta=meta,
            submitted_at=datetime(2025, 3, 10, 9, 0),
        )
        self.rows.append(app)
        return app.id

    def list_for_org(self, org_id: str):
        return [a for a in reversed(self.rows) if a.org_id == org_id]

    def update_status(self, *, org_id: str, application_id: str, status: ApplicationStatus) -> bool:
        for index, a in enumerate(self.rows):
            if a.org_id == org_id and a.id == application_id:
                self.rows[index] = replace(a, status=status)
                return True
        return False


@dataclass
class InMemoryNotifications:
    rows: list[dict[str, Any]] = field(default_factory=list)
    fail: bool = False

    def create(self, *, org_id, title, message, type, target_user_id=None) -> str:
        if self.fail:
            raise RuntimeError("notifications table unavailable")
        self.rows.append({"org_id": org_id, "title": title, "message": message, "type": type})
        return str(len(self.rows))


class DictStore:
    def __init__(self):
        self.data: dict[str, str] = {}

    def get(self, key: str):
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class FakeGemini:
    """Stand-in for GeminiService: returns queued results and records requests."""

    def __init__(self, *results: GenerateResult, configured: bool = True):
        self.results = list(results)
        self.requests = []
        self.configured = configured

    def generate(self, req):
        if not self.configured:
            raise ServiceUnavailableError("Gemini is not configured on this server.")
        self.requests.append(req)
        return self.results.pop(0) if self.results else GenerateResult(text=None)


