from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.enums import ProjectStatus
from ..finance.service import compute_metrics
from ..finance.model import Transaction
from ..projects.model import Project
from ..storage.service import WorkspaceStorage


@dataclass(frozen=True)
class WorkspaceMetrics:
    total_income: float
    total_expense: float
    active: int
    paused: int
    pending: int
    executed: int
    total_projects: int
    employees: int
    applications: int

    @property
    def profit(self) -> float:
        return self.total_income - self.total_expense

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalIncome": self.total_income,
            "totalExpense": self.total_expense,
            "profit": self.profit,
            "active": self.active,
            "paused": self.paused,
            "totalCount": self.total_projects,
            "projectStats": {"active": self.active, "pending": self.pending, "executed": self.executed},
            "employees": self.employees,
            "applications": self.applications,
        }


class MetricsService:
    """Headline numbers for the dashboard and the executive report."""

    def __init__(self, storage: WorkspaceStorage):
        self._storage = storage

    def workspace_metrics(self) -> WorkspaceMetrics:
        txs = [Transaction.from_dict(t) for t in self._storage.get_transactions()]
        projects = [Project.from_dict(p) for p in self._storage.get_projects()]
        finance = compute_metrics(txs)

        def count(status: ProjectStatus) -> int:
            return sum(1 for p in projects if p.status == status)

        return WorkspaceMetrics(
            total_income=finance.income,
            total_expense=finance.expense,
            active=count(ProjectStatus.ACTIVE),
            paused=count(ProjectStatus.PAUSED),
            pending=count(ProjectStatus.PENDING),
            executed=count(ProjectStatus.EXECUTED),
            total_projects=len(projects),
            employees=len(self._storage.get_employees()),
            applications=len(self._storage.get_applications()),
        )
