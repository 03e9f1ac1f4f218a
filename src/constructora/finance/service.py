from __future__ import annotations

import csv
import io
import logging
import uuid
from datetime import date, datetime
from typing import Any, Callable, Iterable, Optional

from ..common.datetime_utils import parse_iso_date, spanish_month
from ..common.validators import finite_number
from ..core.enums import NotificationType, TransactionType
from ..core.exceptions import ValidationError
from ..storage.service import WorkspaceStorage
from .model import FinanceMetrics, Transaction

logger = logging.getLogger(__name__)

CONSOLIDATED = "CONSOLIDATED"


def compute_metrics(transactions: Iterable[Transaction]) -> FinanceMetrics:
    income = 0.0
    expense = 0.0
    for t in transactions:
        if t.type == TransactionType.INCOME:
            income += t.amount
        else:
            expense += t.amount
    return FinanceMetrics(income=income, expense=expense)


def daily_series(transactions: Iterable[Transaction]) -> list[dict[str, Any]]:
    """Income/expense totals per date, oldest first (chart data)."""
    by_date: dict[str, dict[str, Any]] = {}
    for t in transactions:
        point = by_date.setdefault(t.date, {"date": t.date, "income": 0.0, "expense": 0.0})
        key = "income" if t.type == TransactionType.INCOME else "expense"
        point[key] += t.amount
    return [by_date[d] for d in sorted(by_date)]


class FinanceService:
    def __init__(self, storage: WorkspaceStorage, *, today: Optional[Callable[[], date]] = None):
        self._storage = storage
        self._today = today or (lambda: datetime.now().date())

    def all_transactions(self) -> list[Transaction]:
        return [Transaction.from_dict(t) for t in self._storage.get_transactions()]

    def list_transactions(self, *, project_id: str = CONSOLIDATED, search: str = "") -> list[Transaction]:
        """Filtered by project (or all) and search term, newest date first."""
        term = (search or "").strip().lower()
        txs = self.all_transactions()
        if project_id and project_id != CONSOLIDATED:
            txs = [t for t in txs if t.project_id == project_id]
        if term:
            txs = [t for t in txs if term in t.description.lower() or term in t.category.lower()]
        return sorted(txs, key=lambda t: t.date, reverse=True)

    def metrics(self, *, project_id: str = CONSOLIDATED) -> FinanceMetrics:
        return compute_metrics(self.list_transactions(project_id=project_id))

    def create(self, payload: dict[str, Any]) -> Transaction:
        project_id = str(payload.get("projectId") or "").strip()
        description = str(payload.get("description") or "").strip()
        category = str(payload.get("category") or "").strip()
        cost = finite_number(payload.get("cost"))
        if not project_id or not description or not cost or not category:
            raise ValidationError("Proyecto, descripción, costo y categoría son obligatorios")

        raw_date = str(payload.get("date") or self._today().isoformat())
        try:
            tx_date = parse_iso_date(raw_date)
        except ValueError:
            raise ValidationError("Fecha inválida") from None

        try:
            tx = Transaction.from_dict(
                {
                    **payload,
                    "id": str(uuid.uuid4()),
                    "projectId": project_id,
                    "description": description,
                    "category": category,
                    "cost": cost,
                    "date": tx_date.isoformat(),
                    "month": spanish_month(tx_date),
                }
            )
        except ValueError as e:
            raise ValidationError(f"Movimiento inválido: {e}") from e

        self._storage.save_transaction(tx.to_dict())
        if tx.rental_end:
            self._storage.add_notification(
                "Alerta de Alquiler",
                f'El equipo "{tx.description}" debe devolverse el {tx.rental_end}.',
                NotificationType.WARNING,
            )
        logger.info("transaction %s saved for project %s", tx.id, tx.project_id)
        return tx

    def export_csv(self, transactions: Iterable[Transaction]) -> bytes:
        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(
            ["Fecha", "Mes", "Proyecto", "Tipo", "Descripción", "Categoría", "Cantidad", "Unidad", "Costo", "Total", "Proveedor"]
        )
        for t in transactions:
            writer.writerow(
                [
                    t.date,
                    t.month,
                    t.project_id,
                    t.type.value,
                    t.description,
                    t.category,
                    t.quantity,
                    t.unit,
                    t.cost,
                    t.amount,
                    t.provider or "",
                ]
            )
        # utf-8-sig so Excel opens accents correctly
        return buf.getvalue().encode("utf-8-sig")
