from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

from .calculator.base import PayrollCalculator
from .calculator.weekly_calculator import WeeklyPayrollCalculator
from .model import PayrollEmployee, PayrollLine


@dataclass(frozen=True)
class PayrollReport:
    lines: list[PayrollLine]

    @property
    def grand_total(self) -> float:
        return sum(line.total_to_pay for line in self.lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": [line.to_dict() for line in self.lines],
            "grandTotal": round(self.grand_total, 2),
        }


class PayrollService:
    def __init__(self, *, calculator: Optional[PayrollCalculator] = None):
        self._calculator = calculator or WeeklyPayrollCalculator()

    def weekly(self, employees: Iterable[dict[str, Any]], *, today: date) -> PayrollReport:
        lines = []
        for raw in employees:
            emp = PayrollEmployee.from_api(raw)
            daily = self._calculator.daily_salary(emp)
            days = self._calculator.present_days(emp, today=today)
            lines.append(
                PayrollLine(
                    employee_id=emp.id,
                    worker_id=emp.worker_id,
                    name=emp.name,
                    position=emp.position,
                    daily_salary=daily,
                    present_days=days,
                    total_to_pay=daily * days,
                )
            )
        return PayrollReport(lines=lines)
