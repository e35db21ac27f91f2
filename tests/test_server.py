from datetime import datetime, timezone

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")
from fastapi.testclient import TestClient

import server
from backend.config import load_config
from backend.crud import sync_records
from backend.schemas import HackathonRecord


@pytest.fixture
def client(monkeypatch, config):
    monkeypatch.setattr(server, "get_config", lambda: config)
    return TestClient(server.app)


def test_preflight_returns_empty_response_with_cors_headers(client):
    response = client.options("/sync-hackathons")

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert "apikey" in response.headers["access-control-allow-headers"]


@pytest.mark.parametrize("method", ["post", "get", "put", "patch", "delete"])
def test_trigger_returns_sync_summary(client, monkeypatch, method):
    summary = {
        "success": True,
        "message": "Sync completed. Inserted: 2, Updated: 1, Skipped: 0",
        "stats": {"inserted": 2, "updated": 1, "skipped": 0, "rejected": 0, "deactivated": 0, "total": 3},
    }
    calls = []

    def fake_run_sync(config):
        calls.append(config)
        return summary

    monkeypatch.setattr(server, "run_sync", fake_run_sync)

    response = getattr(client, method)("/sync-hackathons")

    assert response.status_code == 200
    assert response.json() == summary
    assert response.headers["access-control-allow-origin"] == "*"
    assert len(calls) == 1


def test_trigger_reports_unhandled_error_as_500(client, monkeypatch):
    def broken_run_sync(config):
        raise RuntimeError("database unreachable")

    monkeypatch.setattr(server, "run_sync", broken_run_sync)

    response = client.post("/sync-hackathons")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "database unreachable"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_missing_configuration_is_reported_as_500(monkeypatch):
    monkeypatch.setattr(server, "load_config", lambda: load_config({}))
    server.get_config.cache_clear()

    response = TestClient(server.app).post("/sync-hackathons")

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert "DATABASE_URL" in response.json()["error"]
    server.get_config.cache_clear()


def test_list_hackathons_returns_active_rows(client, monkeypatch, session_factory, make_raw):
    now = datetime.now(timezone.utc)
    db = session_factory()
    sync_records(db, [
        HackathonRecord(**make_raw(title="Open", deadline_days=10, now=now)),
        HackathonRecord(**make_raw(title="Other", source="mlh", deadline_days=20, now=now)),
    ])
    db.close()
    monkeypatch.setattr(server, "get_session_factory", lambda config: session_factory)

    response = client.get("/hackathons", params={"source": "devfolio"})

    assert response.status_code == 200
    body = response.json()
    assert [h["title"] for h in body] == ["Open"]
    assert body[0]["skills"] == ["Python", "React"]


def test_head_request_triggers_sync(client, monkeypatch):
    calls = []
    monkeypatch.setattr(server, "run_sync", lambda config: calls.append(config) or {"success": True})

    response = client.head("/sync-hackathons")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert len(calls) == 1


def test_preflight_without_cors_request_headers_still_returns_204(client, monkeypatch):
    monkeypatch.setattr(server, "run_sync", lambda config: pytest.fail("OPTIONS must not sync"))

    response = client.options("/sync-hackathons", headers={"Origin": "https://app.example.com"})

    assert response.status_code == 204
    assert response.content == b""
