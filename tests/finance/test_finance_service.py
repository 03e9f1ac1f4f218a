from datetime import date

import pytest

from constructora.core.exceptions import ValidationError
from constructora.finance.model import Transaction
from constructora.finance.service import FinanceService, compute_metrics, daily_series
from constructora.storage.service import WorkspaceStorage

from fakes import DictStore


def _service():
    storage = WorkspaceStorage(DictStore())
    return FinanceService(storage, today=lambda: date(2025, 3, 10)), storage


def _tx(**kw):
    base = {"projectId": "p1", "description": "Cemento", "cost": 80, "category": "Materiales", "quantity": 10}
    return {**base, **kw}


def test_metrics_use_cost_times_quantity():
    txs = [
        Transaction.from_dict({"type": "INCOME", "cost": 1000, "quantity": 2, "date": "2025-03-01"}),
        Transaction.from_dict({"type": "EXPENSE", "cost": 80, "quantity": 10, "date": "2025-03-01"}),
        Transaction.from_dict({"type": "EXPENSE", "cost": 50, "date": "2025-03-02"}),
    ]

    m = compute_metrics(txs)

    assert (m.income, m.expense, m.balance) == (2000, 850, 1150)
    assert daily_series(txs) == [
        {"date": "2025-03-01", "income": 2000, "expense": 800},
        {"date": "2025-03-02", "income": 0.0, "expense": 50},
    ]


def test_create_sets_spanish_month_and_defaults_date():
    service, _ = _service()

    tx = service.create(_tx())

    assert tx.date == "2025-03-10"
    assert tx.month == "marzo"
    assert tx.amount == 800


def test_create_validation():
    service, _ = _service()

    with pytest.raises(ValidationError):
        service.create(_tx(description=""))
    with pytest.raises(ValidationError):
        service.create(_tx(cost=0))
    with pytest.raises(ValidationError) as exc:
        service.create(_tx(date="10/03/2025"))
    assert str(exc.value) == "Fecha inválida"


def test_rental_end_adds_warning_notification():
    service, storage = _service()

    service.create(_tx(description="Mezcladora", category="Alquiler de Equipo", rentalEnd="2025-03-20"))

    (notification,) = storage.get_notifications()
    assert notification["type"] == "WARNING"
    assert notification["title"] == "Alerta de Alquiler"
    assert notification["message"] == 'El equipo "Mezcladora" debe devolverse el 2025-03-20.'


def test_list_filters_and_sorts_newest_first():
    service, _ = _service()
    service.create(_tx(date="2025-03-01"))
    service.create(_tx(projectId="p2", description="Varilla", category="Acero", date="2025-03-05"))
    service.create(_tx(date="2025-03-08", description="Arena"))

    assert [t.date for t in service.list_transactions()] == ["2025-03-08", "2025-03-05", "2025-03-01"]
    assert [t.description for t in service.list_transactions(project_id="p2")] == ["Varilla"]
    assert [t.description for t in service.list_transactions(search="acero")] == ["Varilla"]


def test_csv_export_has_bom_and_header():
    service, _ = _service()
    service.create(_tx())

    data = service.export_csv(service.list_transactions())

    assert data.startswith(b"\xef\xbb\xbf")
    lines = data.decode("utf-8-sig").splitlines()
    assert lines[0].startswith("Fecha,Mes,Proyecto")
    assert "Cemento" in lines[1]
