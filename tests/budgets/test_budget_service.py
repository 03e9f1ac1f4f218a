import pytest

from constructora.budgets.model import BudgetItem
from constructora.budgets.service import BudgetService, build_items, compute_metrics
from constructora.core.enums import Typology
from constructora.core.exceptions import ValidationError
from constructora.projects.model import Project
from constructora.projects.service import ProjectService
from constructora.storage.service import WorkspaceStorage

from fakes import DictStore


def test_initial_quantities_follow_project_areas():
    project = Project(id="p", name="Casa", client_name="X", land_area=200, construction_area=120)

    items = build_items(Typology.RESIDENCIAL, project)

    by_name = {i.name: i for i in items}
    assert by_name["Levantado de Block 0.14 Poma"].quantity == 120
    assert by_name["Excavación Cimiento Corrido"].quantity == 0
    assert all(i.quantity == 0 for i in build_items(Typology.RESIDENCIAL))


def test_metrics_percentages():
    items = [BudgetItem(id="1", name="A", category="C", unit="m2", unit_price=100, quantity=10)]

    m = compute_metrics(items)

    assert m.direct == 1000
    assert m.indirect == pytest.approx(150)
    assert m.utility == pytest.approx(100)
    assert m.taxes == pytest.approx(150)
    assert m.grand_total == pytest.approx(1400)


def test_recompute_ignores_incoming_total():
    service = BudgetService(ProjectService(WorkspaceStorage(DictStore())))

    out = service.recompute([{"id": "1", "name": "A", "unitPrice": 10, "quantity": 3, "total": 999}])

    assert out["items"][0]["total"] == 30
    assert out["metrics"]["direct"] == 30


def test_draft_rejects_unknown_typology():
    service = BudgetService(ProjectService(WorkspaceStorage(DictStore())))

    with pytest.raises(ValidationError):
        service.draft(typology="NAVAL")
    with pytest.raises(ValidationError):
        service.recompute("no-list")
