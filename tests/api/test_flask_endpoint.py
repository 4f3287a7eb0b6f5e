from __future__ import annotations

import json

import pytest

from src.school_erp.school_erp.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    return app.test_client()


def test_health_probe_reports_active_session(client):
    res = client.get("/api")

    body = res.get_json()
    assert res.status_code == 200
    assert body["success"] is True
    assert body["data"] == {"status": "active", "session": "2024-25"}


def test_post_accepts_text_plain_json(client):
    res = client.post(
        "/api",
        data=json.dumps({"action": "getSystemConfig"}),
        headers={"Content-Type": "text/plain;charset=utf-8"},
    )

    assert res.get_json() == {"success": True, "data": {"activeYear": "2024-25"}, "message": ""}


def test_empty_body_is_an_envelope_not_an_http_error(client):
    res = client.post("/api", data="")

    assert res.status_code == 200
    assert res.get_json() == {"success": False, "message": "No payload received"}


def test_seeded_admin_can_log_in(client):
    res = client.post("/api", json={"action": "login", "username": "admin", "pass": "admin123"})

    body = res.get_json()
    assert body["success"] is True
    assert body["data"]["user"]["role"] == "ADMIN"
    assert body["data"]["token"].startswith("TK-")


def test_collect_fee_then_read_summary(client):
    client.post(
        "/api",
        json={"action": "addStudent", "student": {"admissionNo": "A1", "name": "Asha", "class": "5", "section": "A"}},
    )
    client.post("/api", json={"action": "collectFee", "admissionNo": "A1", "amount": 500, "mode": "Cash"})
    client.post("/api", json={"action": "collectFee", "admissionNo": "A1", "amount": 300, "mode": "UPI"})

    body = client.post("/api", json={"action": "getStudentFees", "admissionNo": "A1", "totalFees": 1000}).get_json()

    assert body["data"]["paidFees"] == 800
    assert body["data"]["dueFees"] == 200
