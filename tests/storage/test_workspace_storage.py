import json

from constructora.storage.service import EMPLOYEES, NOTIFICATIONS, PROJECTS, WorkspaceStorage

from fakes import DictStore


def test_invalid_json_reads_as_empty_list():
    store = DictStore()
    store.set(PROJECTS, "{not json")
    store.set(EMPLOYEES, json.dumps({"a": 1}))
    storage = WorkspaceStorage(store)

    assert storage.get_projects() == []
    assert storage.get_employees() == []


def test_upsert_replaces_by_id():
    storage = WorkspaceStorage(DictStore())
    storage.save_project({"id": "p1", "name": "A"})
    storage.save_project({"id": "p2", "name": "B"})
    storage.save_project({"id": "p1", "name": "A2"})

    assert storage.get_projects() == [{"id": "p1", "name": "A2"}, {"id": "p2", "name": "B"}]
    assert storage.delete_project("p1") is True
    assert storage.delete_project("p1") is False


def test_notifications_newest_first_capped_and_mark_read():
    store = DictStore()
    storage = WorkspaceStorage(store)
    for i in range(55):
        storage.add_notification(f"n{i}", "msg")

    notifications = storage.get_notifications()
    assert len(notifications) == 50
    assert notifications[0]["title"] == "n54"
    assert notifications[0]["read"] is False

    storage.mark_notifications_read()
    assert all(n["read"] for n in json.loads(store.get(NOTIFICATIONS)))


def test_worker_id_sequence_and_clear():
    store = DictStore()
    storage = WorkspaceStorage(store)
    assert storage.generate_worker_id(2025) == "MS-2025-001"
    storage.save_employee({"id": "e1"})
    assert storage.generate_worker_id(2025) == "MS-2025-002"

    storage.set_admin_password_hash("hash")
    storage.clear()

    assert store.data == {}
