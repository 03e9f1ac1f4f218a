from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.enums import ApplicationStatus
from .model import CandidateApplication


class ApplicationRepository(Protocol):
    def create(
        self,
        *,
        org_id: str,
        name: str,
        phone: Optional[str],
        dpi: str,
        experience: Optional[str],
        position_applied: str,
        contract_data: Optional[Any],
        source: str,
        meta: Optional[Any],
    ) -> str:
        raise NotImplementedError

    def list_for_org(self, org_id: str) -> Sequence[CandidateApplication]:
        """Newest submission first."""
        raise NotImplementedError

    def update_status(self, *, org_id: str, application_id: str, status: ApplicationStatus) -> bool:
        raise NotImplementedError
