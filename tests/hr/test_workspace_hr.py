from datetime import date

import pytest

from constructora.core.exceptions import NotFoundError, ValidationError
from constructora.employees.service import next_worker_id
from constructora.employees.workspace_service import WorkspaceHRService
from constructora.storage.service import WorkspaceStorage

from fakes import DictStore


def _service():
    return WorkspaceHRService(WorkspaceStorage(DictStore()), today=lambda: date(2025, 3, 10))


def test_next_worker_id_scans_highest_number():
    assert next_worker_id([]) == "ID-PRO-0001"
    assert next_worker_id(["ID-PRO-0003", "id-pro-0010", "MS-2025-001", ""]) == "ID-PRO-0011"


def test_hire_assigns_sequential_ms_ids():
    service = _service()

    first = service.hire({"name": "Juan", "dpi": "1234567890123", "position": "Albañil"})
    second = service.hire({"name": "Ana", "dpi": "9876543210123", "position": "Albañil", "salary": 4200})

    assert first["workerId"] == "MS-2025-001"
    assert second["workerId"] == "MS-2025-002"
    assert second["salary"] == 4200
    assert first["status"] == "ACTIVE"
    assert first["attendanceStatus"] == "OUT"
    assert [e["id"] for e in service.list_employees()] == [first["id"], second["id"]]


def test_hire_requires_name_and_dpi():
    with pytest.raises(ValidationError) as exc:
        _service().hire({"name": "Juan"})
    assert str(exc.value) == "Faltan datos críticos."


def test_accepting_application_prefills_hire_form():
    service = _service()
    app = service.add_application({"name": "María", "dpi": "1234567890123", "positionApplied": "Albañil"})

    form = service.decide_application(app["id"], "ACCEPTED")

    assert form["name"] == "María"
    assert form["position"] == "Albañil"
    assert service.list_applications()[0]["status"] == "ACCEPTED"


def test_reject_and_unknown_application():
    service = _service()
    app = service.add_application({"name": "María", "dpi": "1234567890123", "positionApplied": "Albañil"})

    assert service.decide_application(app["id"], "REJECTED") is None
    with pytest.raises(NotFoundError):
        service.decide_application("missing", "REJECTED")
    with pytest.raises(ValidationError):
        service.decide_application(app["id"], "MAYBE")
