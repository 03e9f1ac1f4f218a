from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.validators import round_half_up


@dataclass(frozen=True)
class Employee:
    """Empleado de campo registrado para el portal de asistencia."""

    id: str
    org_id: str
    worker_id: str
    name: str
    phone: Optional[str]
    dpi: Optional[str]
    position_title: str
    daily_salary: float
    active: bool = True
    created_at: Optional[datetime] = None

    @property
    def monthly_salary(self) -> float:
        return round_half_up(self.daily_salary * 30, 2)


@dataclass(frozen=True)
class HireResult:
    employee_id: str
    worker_id: str
