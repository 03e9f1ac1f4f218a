from datetime import date

import pytest

from constructora.core.enums import ProjectStatus
from constructora.core.exceptions import NotFoundError, ValidationError
from constructora.projects.model import Project
from constructora.projects.service import ProjectService, calculate_progress
from constructora.storage.service import WorkspaceStorage

from fakes import DictStore

TODAY = date(2025, 3, 10)


def _service():
    return ProjectService(WorkspaceStorage(DictStore()), today=lambda: TODAY)


def test_progress_is_clamped_percentage_of_estimated_days():
    p = Project(id="p", name="Casa", client_name="Cliente", start_date="2025-02-08", estimated_days=60)

    assert calculate_progress(p, TODAY) == 50
    assert calculate_progress(p, date(2025, 1, 1)) == 0
    assert calculate_progress(p, date(2026, 1, 1)) == 100


def test_progress_defaults_to_120_days():
    p = Project(id="p", name="Casa", client_name="Cliente", start_date="2025-01-09")

    assert calculate_progress(p, TODAY) == 50


def test_create_defaults_and_area_warning():
    service = _service()

    saved = service.create({"name": " Casa Ruiz ", "clientName": "Ruiz", "landArea": 100, "constructionArea": 150})

    p = saved.project
    assert p.name == "Casa Ruiz"
    assert p.status == ProjectStatus.PENDING
    assert p.start_date == "2025-03-10"
    assert p.estimated_days == 120
    assert p.id
    assert saved.warnings == ["El área de construcción supera el área del terreno."]
    assert service.get(p.id) == p


def test_create_requires_name_and_client():
    with pytest.raises(ValidationError):
        _service().create({"name": "Casa"})


def test_search_status_update_delete():
    service = _service()
    a = service.create({"name": "Bodega Norte", "clientName": "Agro SA"}).project
    b = service.create({"name": "Casa", "clientName": "Familia Norte"}).project
    service.update(b.id, {"status": "ACTIVE"})

    assert {p.id for p in service.list_projects(search="norte")} == {a.id, b.id}
    assert [p.id for p in service.list_projects(status="ACTIVE")] == [b.id]
    assert len(service.list_projects(status="ALL")) == 2

    service.delete(a.id)
    with pytest.raises(NotFoundError):
        service.get(a.id)
    with pytest.raises(NotFoundError):
        service.delete(a.id)


def test_unknown_fields_survive_round_trip():
    service = _service()
    p = service.create({"name": "Casa", "clientName": "X", "notes": "ver planos"}).project

    assert service.get(p.id).to_dict()["notes"] == "ver planos"


def test_progress_rounds_half_up():
    p = Project(id="p", name="Casa", client_name="Cliente", start_date="2025-01-01", estimated_days=120)

    assert calculate_progress(p, date(2025, 1, 16)) == 13
