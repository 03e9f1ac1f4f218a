from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..common.validators import finite_number, optional_text
from ..core.enums import AttendanceMethod
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Una marca de asistencia por empleado y día."""

    id: str
    org_id: str
    employee_id: str
    day: date
    method: AttendanceMethod
    lat: Optional[float] = None
    lng: Optional[float] = None
    device_label: Optional[str] = None
    note: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class MarkAttendanceCommand:
    worker_id: str
    lat: float
    lng: float
    method: AttendanceMethod = AttendanceMethod.SELF
    org_id: Optional[str] = None
    device_label: Optional[str] = None
    note: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "MarkAttendanceCommand":
        raw_worker = payload.get("workerId")
        worker_id = raw_worker.strip().upper() if isinstance(raw_worker, str) else ""
        if not worker_id:
            raise ValidationError("workerId is required")

        lat = finite_number(payload.get("lat"))
        lng = finite_number(payload.get("lng"))
        if lat is None or lng is None:
            raise ValidationError("lat/lng are required")

        raw_method = payload.get("method")
        if raw_method is None:
            raw_method = AttendanceMethod.SELF.value
        try:
            method = AttendanceMethod(raw_method)
        except ValueError:
            raise ValidationError("Invalid method") from None

        return cls(
            worker_id=worker_id,
            lat=lat,
            lng=lng,
            method=method,
            org_id=payload.get("orgId"),
            device_label=optional_text(payload.get("deviceLabel")),
            note=optional_text(payload.get("note")),
        )


@dataclass(frozen=True)
class MarkResult:
    day: date
    employee_name: str
    method: AttendanceMethod

    def to_dict(self) -> dict:
        return {
            "ok": True,
            "day": self.day.isoformat(),
            "employeeName": self.employee_name,
            "method": self.method.value,
        }
