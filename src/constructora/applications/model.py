from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..core.enums import ApplicationStatus

PORTAL_CONTRACT_SOURCE = "PORTAL_CONTRACT"


@dataclass(frozen=True)
class CandidateApplication:
    """Postulación recibida desde el portal público."""

    id: str
    org_id: str
    name: str
    phone: Optional[str]
    dpi: str
    experience: Optional[str]
    position_applied: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    contract_data: Optional[Any] = None
    source: str = PORTAL_CONTRACT_SOURCE
    meta: Optional[Any] = None
    submitted_at: Optional[datetime] = None

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone or "",
            "dpi": self.dpi,
            "experience": self.experience or "",
            "positionApplied": self.position_applied,
            "status": self.status.to_ui(),
            "timestamp": self.submitted_at.isoformat() if self.submitted_at else None,
        }
