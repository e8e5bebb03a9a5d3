# backend/tests/test_main.py

from fastapi.testclient import TestClient

from refund_form.health import validate_config
from refund_form.main import create_app


def create_test_client() -> TestClient:
    return TestClient(create_app())


def test_form_page_is_served():
    resp = create_test_client().get("/")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert 'id="refund-form"' in resp.text
    assert "/api/refund" in resp.text


def test_health_ok_with_full_config(monkeypatch):
    monkeypatch.delenv("SUBGROUPS", raising=False)

    resp = create_test_client().get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "errors": []}


def test_health_degraded_reports_config_errors(monkeypatch):
    monkeypatch.delenv("SLACK_BOT_TOKEN", raising=False)
    monkeypatch.setenv("SUBGROUPS", "invalid")

    resp = create_test_client().get("/health")

    assert resp.status_code == 200
    assert resp.json() == {
        "status": "degraded",
        "errors": ["SLACK_BOT_TOKEN is not configured", "No subgroups configured"],
    }


def test_validate_config_missing_token_only(monkeypatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", " ")
    monkeypatch.delenv("SUBGROUPS", raising=False)

    status = validate_config()

    assert not status.is_valid
    assert status.errors == ["SLACK_BOT_TOKEN is not configured"]


def test_form_page_shows_subgroup_contact_hint():
    resp = create_test_client().get("/")

    assert 'id="contact-handle"' in resp.text
    assert "@nalbam" in resp.text
    assert "contactId" in resp.text
    assert "addEventListener('change', updateContactHint)" in resp.text
