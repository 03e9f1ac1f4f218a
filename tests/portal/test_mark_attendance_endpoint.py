from datetime import datetime

URL = "/functions/v1/mark-attendance"
PORTAL = {"x-portal-token": "portal-attendance"}


def test_preflight_returns_cors_headers(client):
    resp = client.options(URL, headers={"Origin": "https://portal.example.com"})

    assert resp.status_code == 204
    assert resp.headers["Access-Control-Allow-Origin"] == "https://portal.example.com"
    assert "x-portal-token" in resp.headers["Access-Control-Allow-Headers"]
    assert resp.headers["Access-Control-Max-Age"] == "86400"


def test_get_not_allowed(client):
    resp = client.get(URL, headers=PORTAL)

    assert resp.status_code == 405
    assert resp.get_json() == {"error": "Method not allowed"}


def test_wrong_portal_token(client):
    resp = client.post(URL, json={"workerId": "ID-PRO-0001", "lat": 1, "lng": 2}, headers={"x-portal-token": "nope"})

    assert resp.status_code == 401
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_mark_ok(client, employees):
    employees.add("ID-PRO-0001", "Juan Pérez")

    resp = client.post(URL, json={"workerId": "ID-PRO-0001", "lat": 14.6, "lng": -90.5}, headers=PORTAL)

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "day": "2025-03-10", "employeeName": "Juan Pérez", "method": "SELF"}


def test_mark_twice_conflicts(client, employees):
    employees.add("ID-PRO-0001", "Juan Pérez")
    body = {"workerId": "ID-PRO-0001", "lat": 14.6, "lng": -90.5}

    assert client.post(URL, json=body, headers=PORTAL).status_code == 200
    resp = client.post(URL, json=body, headers=PORTAL)

    assert resp.status_code == 409
    assert resp.get_json() == {"error": "Already marked today"}


def test_outside_window(client, employees, clock):
    employees.add("ID-PRO-0001", "Juan Pérez")
    clock.now = datetime(2025, 3, 10, 9, 0)

    resp = client.post(URL, json={"workerId": "ID-PRO-0001", "lat": 1, "lng": 2}, headers=PORTAL)

    assert resp.status_code == 403
    assert resp.get_json()["error"] == "Outside attendance window (07:00-07:30)"


def test_emergency_with_admin_header(client, employees, clock):
    employees.add("ID-PRO-0001", "Juan Pérez")
    clock.now = datetime(2025, 3, 10, 20, 0)

    resp = client.post(
        URL,
        json={"workerId": "ID-PRO-0001", "lat": 1, "lng": 2, "method": "EMERGENCY"},
        headers={**PORTAL, "x-admin-token": "admin-secret"},
    )

    assert resp.status_code == 200
    assert resp.get_json()["method"] == "EMERGENCY"


def test_unknown_worker(client):
    resp = client.post(URL, json={"workerId": "ID-PRO-0404", "lat": 1, "lng": 2}, headers=PORTAL)

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Worker ID not found"}


def test_unexpected_error_is_500_with_message(client, employees, monkeypatch):
    employees.add("ID-PRO-0001", "Juan Pérez")

    def boom(*args, **kwargs):
        raise RuntimeError("db down")

    monkeypatch.setattr(employees, "get_by_worker_id", boom)
    resp = client.post(URL, json={"workerId": "ID-PRO-0001", "lat": 1, "lng": 2}, headers=PORTAL)

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "db down"}
