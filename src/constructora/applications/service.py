from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import optional_text, strip_all_whitespace
from ..core.constants import DPI_LENGTH
from ..core.enums import ApplicationStatus
from ..core.exceptions import ValidationError
from ..core.settings import PortalSettings
from ..notifications.service import NotificationService
from .model import PORTAL_CONTRACT_SOURCE, CandidateApplication
from .repository import ApplicationRepository

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


class ApplicationService:
    def __init__(
        self,
        applications: ApplicationRepository,
        notifications: NotificationService,
        settings: PortalSettings,
    ):
        self._applications = applications
        self._notifications = notifications
        self._settings = settings

    def submit(self, payload: dict[str, Any]) -> str:
        self._settings.require_org_id()

        name = _text(payload.get("name"))
        dpi = strip_all_whitespace(payload.get("dpi") if isinstance(payload.get("dpi"), str) else "")
        position_applied = _text(payload.get("positionApplied"))

        if not name:
            raise ValidationError("name is required")
        if len(dpi) != DPI_LENGTH:
            raise ValidationError("dpi must be 13 digits")
        if not position_applied:
            raise ValidationError("positionApplied is required")

        org_id = self._settings.resolve_org(payload.get("orgId"))

        application_id = self._applications.create(
            org_id=org_id,
            name=name,
            phone=optional_text(payload.get("phone")),
            dpi=dpi,
            experience=optional_text(payload.get("experience")),
            position_applied=position_applied,
            contract_data=payload.get("contractData"),
            source=PORTAL_CONTRACT_SOURCE,
            meta=payload.get("meta"),
        )
        logger.info("application %s received for %s", application_id, position_applied)

        self._notifications.notify_best_effort(
            org_id=org_id,
            title="Nueva postulación",
            message=f"Nuevo aplicante: {name} (DPI {dpi}) para {position_applied}.",
        )
        return application_id

    def list_applications(self) -> Sequence[CandidateApplication]:
        return self._applications.list_for_org(self._settings.require_org_id())

    def set_status(self, application_id: str, status: Any) -> bool:
        """ACCEPTED/REJECTED from the UI, stored as APPROVED/REJECTED.

        Unknown ids are not an error; the caller just gets False back.
        """
        if not application_id:
            raise ValidationError("Missing id")
        if status not in ("ACCEPTED", "REJECTED"):
            raise ValidationError("Invalid status")
        return self._applications.update_status(
            org_id=self._settings.require_org_id(),
            application_id=application_id,
            status=ApplicationStatus.from_ui(status),
        )
