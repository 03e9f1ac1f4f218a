URL = "/functions/v1/submit-contract"
PORTAL = {"x-portal-token": "portal-apply"}

VALID = {
    "name": "María López",
    "phone": "5555-1234",
    "dpi": "1234 56789 0123",
    "experience": "5 años",
    "positionApplied": "Albañil",
}


def test_submit_ok_stores_pending_application_and_notifies(client, applications, notifications):
    resp = client.post(URL, json=VALID, headers=PORTAL)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["ok"] is True
    stored = applications.rows[0]
    assert body["applicationId"] == stored.id
    assert stored.dpi == "1234567890123"
    assert stored.status.value == "PENDING"
    assert stored.source == "PORTAL_CONTRACT"
    assert notifications.rows[0]["title"] == "Nueva postulación"
    assert notifications.rows[0]["message"] == "Nuevo aplicante: María López (DPI 1234567890123) para Albañil."


def test_submit_rejects_short_dpi(client, applications):
    resp = client.post(URL, json={**VALID, "dpi": "12345"}, headers=PORTAL)

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "dpi must be 13 digits"}
    assert applications.rows == []


def test_submit_requires_name_and_position(client):
    assert client.post(URL, json={**VALID, "name": " "}, headers=PORTAL).get_json() == {"error": "name is required"}
    resp = client.post(URL, json={**VALID, "positionApplied": ""}, headers=PORTAL)
    assert resp.get_json() == {"error": "positionApplied is required"}


def test_submit_with_foreign_org(client):
    resp = client.post(URL, json={**VALID, "orgId": "other"}, headers=PORTAL)

    assert resp.status_code == 403
    assert resp.get_json() == {"error": "Invalid org"}


def test_submit_uses_applications_token_not_attendance_token(client):
    resp = client.post(URL, json=VALID, headers={"x-portal-token": "portal-attendance"})

    assert resp.status_code == 401
