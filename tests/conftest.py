from __future__ import annotations

import importlib
from datetime import datetime

import pytest

from constructora.container import assemble
from fakes import (
    DictStore,
    FakeGemini,
    FixedClock,
    InMemoryApplications,
    InMemoryAttendance,
    InMemoryEmployees,
    InMemoryNotifications,
)


@pytest.fixture
def settings():
    return importlib.import_module("config.testing")


@pytest.fixture
def clock():
    # Monday, inside the 07:00-07:30 window
    return FixedClock(datetime(2025, 3, 10, 7, 10))


@pytest.fixture
def employees():
    return InMemoryEmployees()


@pytest.fixture
def attendance():
    return InMemoryAttendance()


@pytest.fixture
def applications():
    return InMemoryApplications()


@pytest.fixture
def notifications():
    return InMemoryNotifications()


@pytest.fixture
def kv_store():
    return DictStore()


@pytest.fixture
def gemini():
    return FakeGemini()


@pytest.fixture
def container(settings, clock, employees, attendance, applications, notifications, kv_store, gemini):
    return assemble(
        settings=settings,
        employees_repo=employees,
        attendance_repo=attendance,
        applications_repo=applications,
        notifications_repo=notifications,
        kv_store=kv_store,
        gemini_service=gemini,
        clock=clock,
        rate_clock=lambda: 0.0,
    )


@pytest.fixture
def app(container):
    from constructora import create_app

    return create_app(settings_module="config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/auth/login", json={"password": "admin123"})
    assert resp.status_code == 200
    return client
