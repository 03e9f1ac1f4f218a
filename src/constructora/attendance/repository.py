from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceMethod
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_day(self, org_id: str, employee_id: str, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        org_id: str,
        employee_id: str,
        day: date,
        method: AttendanceMethod,
        lat: Optional[float],
        lng: Optional[float],
        device_label: Optional[str] = None,
        note: Optional[str] = None,
    ) -> str:
        """Raises ConflictError when the employee already has a row for that day."""
        raise NotImplementedError

    def list_since(self, org_id: str, since: date) -> Sequence[AttendanceRecord]:
        """Rows with day >= since, oldest day first."""
        raise NotImplementedError
