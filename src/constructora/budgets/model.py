from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common.validators import as_float


@dataclass(frozen=True)
class BudgetItem:
    """Renglón de presupuesto; total siempre = precio unitario x cantidad."""

    id: str
    name: str
    category: str
    unit: str
    unit_price: float
    quantity: float

    @property
    def total(self) -> float:
        return self.unit_price * self.quantity

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BudgetItem":
        # Any incoming "total" is ignored and recomputed.
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            category=str(data.get("category") or ""),
            unit=str(data.get("unit") or ""),
            unit_price=as_float(data.get("unitPrice")),
            quantity=as_float(data.get("quantity")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "unit": self.unit,
            "unitPrice": self.unit_price,
            "quantity": self.quantity,
            "total": self.total,
        }


@dataclass(frozen=True)
class BudgetMetrics:
    direct: float
    indirect: float
    utility: float
    taxes: float

    @property
    def grand_total(self) -> float:
        return self.direct + self.indirect + self.utility + self.taxes

    def to_dict(self) -> dict[str, float]:
        return {
            "direct": self.direct,
            "indirect": self.indirect,
            "utility": self.utility,
            "taxes": self.taxes,
            "grandTotal": self.grand_total,
        }
