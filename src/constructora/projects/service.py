from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import round_half_up
from ..core.constants import DEFAULT_PROJECT_DAYS
from ..core.enums import ProjectStatus, Typology
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.service import WorkspaceStorage
from .model import Project

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedProject:
    project: Project
    warnings: list[str]


def calculate_progress(project: Project, today: date) -> int:
    """Percent of the planned duration already elapsed, clamped to 0..100."""
    if not project.start_date:
        return 0
    try:
        start = parse_iso_date(project.start_date)
    except ValueError:
        return 0
    total_days = project.estimated_days or DEFAULT_PROJECT_DAYS
    elapsed = (today - start).days
    return max(0, min(100, int(round_half_up(elapsed / total_days * 100))))


def area_warnings(project: Project) -> list[str]:
    if project.construction_area > project.land_area:
        return ["El área de construcción supera el área del terreno."]
    return []


class ProjectService:
    def __init__(self, storage: WorkspaceStorage, *, today: Optional[Callable[[], date]] = None):
        self._storage = storage
        self._today = today or (lambda: datetime.now().date())

    def list_projects(self, *, search: str = "", status: Optional[str] = None) -> list[Project]:
        term = (search or "").strip().lower()
        projects = [Project.from_dict(p) for p in self._storage.get_projects()]
        if term:
            projects = [p for p in projects if term in p.name.lower() or term in p.client_name.lower()]
        if status and status != "ALL":
            projects = [p for p in projects if p.status.value == status]
        return projects

    def get(self, project_id: str) -> Project:
        for p in self._storage.get_projects():
            if p.get("id") == project_id:
                return Project.from_dict(p)
        raise NotFoundError("Proyecto no encontrado")

    def to_view(self, project: Project) -> dict[str, Any]:
        data = project.to_dict()
        data["progress"] = calculate_progress(project, self._today())
        return data

    def create(self, payload: dict[str, Any]) -> SavedProject:
        if not str(payload.get("name") or "").strip() or not str(payload.get("clientName") or "").strip():
            raise ValidationError("Nombre y cliente son obligatorios")
        try:
            project = Project.from_dict(
                {
                    "startDate": self._today().isoformat(),
                    "estimatedDays": DEFAULT_PROJECT_DAYS,
                    **payload,
                    "id": str(uuid.uuid4()),
                    "status": ProjectStatus.PENDING.value,
                }
            )
        except ValueError as e:
            raise ValidationError(f"Proyecto inválido: {e}") from e
        project = replace(project, name=project.name.strip(), client_name=project.client_name.strip())
        self._storage.save_project(project.to_dict())
        logger.info("project %s created", project.id)
        return SavedProject(project=project, warnings=area_warnings(project))

    def update(self, project_id: str, payload: dict[str, Any]) -> SavedProject:
        current = self.get(project_id)
        try:
            project = Project.from_dict({**current.to_dict(), **payload, "id": current.id})
        except ValueError as e:
            raise ValidationError(f"Proyecto inválido: {e}") from e
        if not project.name.strip() or not project.client_name.strip():
            raise ValidationError("Nombre y cliente son obligatorios")
        self._storage.save_project(project.to_dict())
        return SavedProject(project=project, warnings=area_warnings(project))

    def delete(self, project_id: str) -> None:
        if not self._storage.delete_project(project_id):
            raise NotFoundError("Proyecto no encontrado")

    @staticmethod
    def typologies() -> list[str]:
        return [t.value for t in Typology]
