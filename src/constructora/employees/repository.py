from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_worker_id(self, org_id: str, worker_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_for_org(self, org_id: str) -> Sequence[Employee]:
        """Oldest first."""
        raise NotImplementedError

    def recent_worker_ids(self, org_id: str, limit: int) -> Sequence[str]:
        """Newest first."""
        raise NotImplementedError

    def create(
        self,
        *,
        org_id: str,
        worker_id: str,
        name: str,
        phone: Optional[str],
        dpi: Optional[str],
        position_title: str,
        daily_salary: float,
    ) -> str:
        """Raises ConflictError when the worker id is taken."""
        raise NotImplementedError
