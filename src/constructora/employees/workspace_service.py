from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Any, Callable, Optional

from ..common.validators import as_float
from ..core.constants import POSITIONS
from ..core.enums import EmployeeStatus, PresenceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.service import WorkspaceStorage

logger = logging.getLogger(__name__)


class WorkspaceHRService:
    """Cuadrilla y postulaciones guardadas en el espacio de trabajo local.

    Independent from the portal tables: worker ids here follow the
    MS-<year>-<NNN> sequence of the workspace.
    """

    def __init__(self, storage: WorkspaceStorage, *, today: Optional[Callable[[], date]] = None):
        self._storage = storage
        self._today = today or (lambda: datetime.now().date())

    def list_employees(self) -> list[dict[str, Any]]:
        return self._storage.get_employees()

    def hire(self, payload: dict[str, Any]) -> dict[str, Any]:
        name = str(payload.get("name") or "").strip()
        dpi = str(payload.get("dpi") or "").strip()
        if not name or not dpi:
            raise ValidationError("Faltan datos críticos.")

        today = self._today()
        position = str(payload.get("position") or "").strip() or next(iter(POSITIONS))
        employee = {
            "id": str(uuid.uuid4()),
            "workerId": self._storage.generate_worker_id(today.year),
            "name": name,
            "dpi": dpi,
            "phone": str(payload.get("phone") or ""),
            "address": str(payload.get("address") or ""),
            "position": position,
            "salary": as_float(payload.get("salary"), float(POSITIONS.get(position, 0))),
            "experience": str(payload.get("experience") or ""),
            "hiringDate": str(payload.get("hiringDate") or today.isoformat()),
            "status": EmployeeStatus.ACTIVE.value,
            "attendanceStatus": PresenceStatus.OUT.value,
            "attendanceHistory": [],
            "isContractAccepted": True,
        }
        self._storage.save_employee(employee)
        logger.info("workspace hire %s", employee["workerId"])
        return employee

    def list_applications(self) -> list[dict[str, Any]]:
        return self._storage.get_applications()

    def add_application(self, payload: dict[str, Any]) -> dict[str, Any]:
        name = str(payload.get("name") or "").strip()
        dpi = "".join(str(payload.get("dpi") or "").split())
        position = str(payload.get("positionApplied") or "").strip()
        if not name or not dpi or not position:
            raise ValidationError("Nombre, DPI y puesto son obligatorios")
        application = {
            "id": str(uuid.uuid4()),
            "name": name,
            "phone": str(payload.get("phone") or ""),
            "dpi": dpi,
            "experience": str(payload.get("experience") or ""),
            "positionApplied": position,
            "status": "PENDING",
            "timestamp": datetime.now().isoformat(),
        }
        self._storage.save_application(application)
        return application

    def decide_application(self, application_id: str, action: str) -> Optional[dict[str, Any]]:
        """Store the decision; on ACCEPTED return a prefilled hire form."""
        if action not in ("ACCEPTED", "REJECTED"):
            raise ValidationError("Invalid status")
        app = self._storage.update_application_status(application_id, action)
        if app is None:
            raise NotFoundError("Postulación no encontrada")
        if action != "ACCEPTED":
            return None
        return {
            "name": app.get("name", ""),
            "dpi": app.get("dpi", ""),
            "phone": app.get("phone", ""),
            "experience": app.get("experience", ""),
            "position": app.get("positionApplied", ""),
            "salary": POSITIONS.get(app.get("positionApplied", ""), 0),
        }
