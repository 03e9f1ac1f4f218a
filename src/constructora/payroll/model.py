from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..common.validators import as_float


@dataclass(frozen=True)
class PayrollEmployee:
    """Minimal view of an employee needed to pay a week."""

    id: str
    worker_id: str
    name: str
    position: str
    monthly_salary: float
    attendance_dates: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PayrollEmployee":
        history = data.get("attendanceHistory") or []
        return cls(
            id=str(data.get("id") or ""),
            worker_id=str(data.get("workerId") or ""),
            name=str(data.get("name") or ""),
            position=str(data.get("position") or ""),
            monthly_salary=as_float(data.get("salary")),
            attendance_dates=tuple(str(r.get("date")) for r in history if isinstance(r, dict) and r.get("date")),
        )


@dataclass(frozen=True)
class PayrollLine:
    employee_id: str
    worker_id: str
    name: str
    position: str
    daily_salary: float
    present_days: int
    total_to_pay: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.employee_id,
            "workerId": self.worker_id,
            "name": self.name,
            "position": self.position,
            "dailySalary": round(self.daily_salary, 2),
            "presentDays": self.present_days,
            "totalToPay": round(self.total_to_pay, 2),
        }
