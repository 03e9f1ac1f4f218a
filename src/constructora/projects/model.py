from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from ..common.validators import as_float, finite_number
from ..core.enums import ProjectStatus, Typology

_CAMEL = {
    "client_name": "clientName",
    "land_area": "landArea",
    "construction_area": "constructionArea",
    "needs_program": "needsProgram",
    "start_date": "startDate",
    "cover_type": "coverType",
    "estimated_days": "estimatedDays",
    "ai_justification": "aiJustification",
    "budget_total": "budgetTotal",
}


@dataclass(frozen=True)
class Project:
    """Obra o proyecto del portafolio, guardado como JSON en el espacio de trabajo."""

    id: str
    name: str
    client_name: str
    land_area: float = 0.0
    construction_area: float = 0.0
    location: str = ""
    needs_program: bool = False
    status: ProjectStatus = ProjectStatus.PENDING
    start_date: str = ""
    typology: Typology = Typology.RESIDENCIAL
    cover_type: str = "Otros"
    estimated_days: Optional[int] = None
    ai_justification: Optional[str] = None
    budget_total: Optional[float] = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        known = {"id", "name", "location", "status", "typology", *(_CAMEL.values())}
        estimated = finite_number(data.get("estimatedDays"))
        budget = finite_number(data.get("budgetTotal"))
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            client_name=str(data.get("clientName") or ""),
            land_area=as_float(data.get("landArea")),
            construction_area=as_float(data.get("constructionArea")),
            location=str(data.get("location") or ""),
            needs_program=bool(data.get("needsProgram", False)),
            status=ProjectStatus(data.get("status") or ProjectStatus.PENDING.value),
            start_date=str(data.get("startDate") or ""),
            typology=Typology(data.get("typology") or Typology.RESIDENCIAL.value),
            cover_type=str(data.get("coverType") or "Otros"),
            estimated_days=int(estimated) if estimated is not None else None,
            ai_justification=data.get("aiJustification"),
            budget_total=budget,
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        raw = asdict(self)
        extra = raw.pop("extra")
        out: dict[str, Any] = {**extra}
        for key, value in raw.items():
            if value is None:
                continue
            if key in ("status", "typology"):
                value = value.value
            out[_CAMEL.get(key, key)] = value
        return out
