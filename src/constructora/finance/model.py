from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import as_float, optional_text
from ..core.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Movimiento de ingreso o egreso ligado a un proyecto."""

    id: str
    project_id: str
    type: TransactionType
    description: str
    quantity: float
    unit: str
    cost: float
    category: str
    date: str
    month: str
    provider: Optional[str] = None
    rental_start: Optional[str] = None
    rental_end: Optional[str] = None

    @property
    def amount(self) -> float:
        return self.cost * self.quantity

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        return cls(
            id=str(data.get("id") or ""),
            project_id=str(data.get("projectId") or ""),
            type=TransactionType(data.get("type") or TransactionType.EXPENSE.value),
            description=str(data.get("description") or ""),
            quantity=as_float(data.get("quantity"), 1.0),
            unit=str(data.get("unit") or "Quetzal"),
            cost=as_float(data.get("cost")),
            category=str(data.get("category") or ""),
            date=str(data.get("date") or ""),
            month=str(data.get("month") or ""),
            provider=optional_text(data.get("provider")),
            rental_start=optional_text(data.get("rentalStart")),
            rental_end=optional_text(data.get("rentalEnd")),
        )

    def to_dict(self) -> dict[str, Any]:
        out = {
            "id": self.id,
            "projectId": self.project_id,
            "type": self.type.value,
            "description": self.description,
            "quantity": self.quantity,
            "unit": self.unit,
            "cost": self.cost,
            "category": self.category,
            "date": self.date,
            "month": self.month,
        }
        if self.provider:
            out["provider"] = self.provider
        if self.rental_start:
            out["rentalStart"] = self.rental_start
        if self.rental_end:
            out["rentalEnd"] = self.rental_end
        return out


@dataclass(frozen=True)
class FinanceMetrics:
    income: float
    expense: float

    @property
    def balance(self) -> float:
        return self.income - self.expense

    def to_dict(self) -> dict:
        return {"income": self.income, "expense": self.expense, "balance": self.balance}
