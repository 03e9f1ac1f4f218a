from __future__ import annotations

from typing import Any, Iterable, Optional

from ..core.constants import INDIRECT_COSTS_PERCENT, TAX_PERCENT, UTILITY_PERCENT
from ..core.enums import Typology
from ..core.exceptions import ValidationError
from ..projects.model import Project
from ..projects.service import ProjectService
from .catalog import TYPOLOGY_BUDGETS
from .model import BudgetItem, BudgetMetrics


def initial_quantity(unit: str, name: str, project: Optional[Project]) -> float:
    if project is None:
        return 0.0
    if unit == "m2":
        return project.construction_area
    if "limpieza" in name.lower():
        return project.land_area
    return 0.0


def build_items(typology: Typology, project: Optional[Project] = None) -> list[BudgetItem]:
    return [
        BudgetItem(
            id=f"{typology.value.lower()}-{index + 1}",
            name=item.name,
            category=item.category,
            unit=item.unit,
            unit_price=float(item.price),
            quantity=initial_quantity(item.unit, item.name, project),
        )
        for index, item in enumerate(TYPOLOGY_BUDGETS[typology])
    ]


def compute_metrics(items: Iterable[BudgetItem]) -> BudgetMetrics:
    direct = sum(i.total for i in items)
    indirect = direct * INDIRECT_COSTS_PERCENT
    utility = direct * UTILITY_PERCENT
    taxes = (direct + indirect + utility) * TAX_PERCENT
    return BudgetMetrics(direct=direct, indirect=indirect, utility=utility, taxes=taxes)


class BudgetService:
    def __init__(self, projects: ProjectService):
        self._projects = projects

    def draft(self, *, project_id: Optional[str] = None, typology: Optional[str] = None) -> dict[str, Any]:
        project = self._projects.get(project_id) if project_id else None
        try:
            chosen = Typology(typology) if typology else (project.typology if project else Typology.RESIDENCIAL)
        except ValueError:
            raise ValidationError("Tipología inválida") from None
        items = build_items(chosen, project)
        return self._summary(items, typology=chosen, project=project)

    def recompute(self, raw_items: Any) -> dict[str, Any]:
        if not isinstance(raw_items, list):
            raise ValidationError("items debe ser una lista")
        items = [BudgetItem.from_dict(i) for i in raw_items if isinstance(i, dict)]
        return self._summary(items)

    def _summary(
        self,
        items: list[BudgetItem],
        *,
        typology: Optional[Typology] = None,
        project: Optional[Project] = None,
    ) -> dict[str, Any]:
        out: dict[str, Any] = {
            "items": [i.to_dict() for i in items],
            "metrics": compute_metrics(items).to_dict(),
        }
        if typology is not None:
            out["typology"] = typology.value
        if project is not None:
            out["projectId"] = project.id
        return out
