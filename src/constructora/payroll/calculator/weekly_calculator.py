from __future__ import annotations

from datetime import date, timedelta

from ...core.constants import DAYS_PER_MONTH, DEFAULT_MONTHLY_SALARY, PAYROLL_WINDOW_DAYS
from ..model import PayrollEmployee
from .base import PayrollCalculator


class WeeklyPayrollCalculator(PayrollCalculator):
    """Daily rate = monthly / 30; pay every marked day of the last 7 (today included)."""

    def daily_salary(self, employee: PayrollEmployee) -> float:
        return (employee.monthly_salary or DEFAULT_MONTHLY_SALARY) / DAYS_PER_MONTH

    def present_days(self, employee: PayrollEmployee, *, today: date) -> int:
        window = {(today - timedelta(days=i)).isoformat() for i in range(PAYROLL_WINDOW_DAYS)}
        return sum(1 for d in employee.attendance_dates if d[:10] in window)
