from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ..model import PayrollEmployee


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def daily_salary(self, employee: PayrollEmployee) -> float:
        raise NotImplementedError

    @abstractmethod
    def present_days(self, employee: PayrollEmployee, *, today: date) -> int:
        raise NotImplementedError
