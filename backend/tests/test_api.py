"""
API tests for the sync manager endpoints (FastAPI TestClient, no live backend).
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from conftest import make_response
from sync_manager.main import create_app
from sync_manager.schemas.outcome import Outcome

LOG_REQUEST = "sync_manager.services.log_source_service.requests.request"


@pytest.fixture
def client(settings, session):
    app = create_app(settings, session)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def authed(client):
    resp = client.post("/api/v1/auth/login", json={"password": "letmein"})
    assert resp.status_code == 200
    return client


def test_health_and_root_are_open(client) -> None:
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["endpoints"]["operations"] == "/api/v1/operations"


def test_api_requires_login(client) -> None:
    assert client.get("/api/v1/operations").status_code == 401
    assert client.get("/api/v1/auth/status").json() == {"is_authenticated": False}


def test_wrong_password(client) -> None:
    resp = client.post("/api/v1/auth/login", json={"password": "nope"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Incorrect password. Please try again."


def test_logout_locks_again(authed) -> None:
    assert authed.post("/api/v1/auth/logout").json() == {"is_authenticated": False}
    assert authed.get("/api/v1/operations").status_code == 401


def test_list_operations(authed) -> None:
    ops = authed.get("/api/v1/operations").json()
    assert [op["id"] for op in ops][:2] == ["fetch-customers", "fetch-articles"]
    assert all(op["status"] == "idle" for op in ops)
    groups = authed.get("/api/v1/operations/groups").json()
    assert groups[-1]["label"] == "System Operations"


def test_empty_history_reports_no_activity(authed) -> None:
    body = authed.get("/api/v1/sync-logs").json()
    assert body["entries"] == []
    assert body["empty"] is True
    assert body["message"] == "No sync operations have been performed yet"


def test_trigger_records_entry_and_updates_status(authed, fake_invoker) -> None:
    fake_invoker.outcomes.append(Outcome.success("Fetched 42 customers", records_processed=42))
    entry = authed.post("/api/v1/operations/fetch-customers/trigger").json()
    assert entry["status"] == "success"
    assert entry["records_processed"] == 42

    op = authed.get("/api/v1/operations/fetch-customers").json()
    assert op["status"] == "success"
    assert op["records_processed"] == 42

    logs = authed.get("/api/v1/sync-logs", params={"search": "customers"}).json()
    assert logs["empty"] is False
    assert [e["id"] for e in logs["entries"]] == [entry["id"]]
    assert authed.get(f"/api/v1/sync-logs/{entry['id']}").json()["message"] == "Fetched 42 customers"

    summary = authed.get("/api/v1/operations/summary").json()
    assert summary["success"] == 1 and summary["total"] == 6

    notes = authed.get("/api/v1/notifications").json()
    assert notes[0]["title"] == "Success"


def test_trigger_failure_is_not_an_http_error(authed, fake_invoker) -> None:
    fake_invoker.outcomes.append(Outcome.failure("HTTP 500: Server Error", "http_status", 500))
    resp = authed.post("/api/v1/operations/full-sync/trigger")
    assert resp.status_code == 200
    assert resp.json()["message"] == "HTTP 500: Server Error"
    errors = authed.get("/api/v1/sync-logs", params={"level": "error"}).json()
    assert errors["total"] == 1


def test_trigger_unknown_operation(authed, fake_invoker) -> None:
    resp = authed.post("/api/v1/operations/nope/trigger")
    assert resp.status_code == 404
    assert fake_invoker.calls == []
    assert authed.get("/api/v1/sync-logs").json()["total"] == 0


def test_unknown_log_entry(authed) -> None:
    assert authed.get("/api/v1/sync-logs/missing").status_code == 404


def test_export_csv(authed) -> None:
    authed.post("/api/v1/operations/fetch-inventory/trigger")
    resp = authed.get("/api/v1/sync-logs/export", params={"format": "csv"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert resp.text.splitlines()[0].startswith("id,operation_id")
    assert authed.get("/api/v1/sync-logs/export", params={"format": "xml"}).status_code == 422


def test_auto_sync_toggle(authed) -> None:
    assert authed.get("/api/v1/auto-sync").json()["enabled"] is False
    state = authed.put("/api/v1/auto-sync", json={"enabled": True, "interval_minutes": 15}).json()
    assert state["enabled"] is True
    assert state["interval_minutes"] == 15
    assert authed.put("/api/v1/auto-sync", json={"enabled": False}).json()["enabled"] is False


def test_log_endpoints(authed) -> None:
    body = {"logs": [{"level": "ERROR", "message": "Failed to connect to ERP endpoint"}, {"message": "ok"}]}
    with patch(LOG_REQUEST, return_value=make_response(body=body)):
        resp = authed.get("/api/v1/logs/system", params={"level": "error"})
    assert resp.status_code == 200
    assert resp.json()["total"] == 1
    assert resp.json()["entries"][0]["message"] == "Failed to connect to ERP endpoint"


def test_log_source_failure_is_bad_gateway(authed) -> None:
    with patch(LOG_REQUEST, return_value=make_response(500, {}, reason="Server Error")):
        resp = authed.get("/api/v1/logs/stats")
    assert resp.status_code == 502
    assert resp.json()["detail"] == "HTTP 500: Server Error"


def test_log_download_streams_file(authed) -> None:
    with patch(LOG_REQUEST, return_value=make_response(raw=b"raw log bytes")):
        resp = authed.get("/api/v1/logs/download/system")
    assert resp.status_code == 200
    assert resp.content == b"raw log bytes"
    assert "system.log" in resp.headers["content-disposition"]


def test_unknown_log_source(authed) -> None:
    assert authed.get("/api/v1/logs/other").status_code == 422


def test_display_metadata(authed) -> None:
    meta = authed.get("/api/v1/operations/display").json()
    assert meta["categories"]["pricing"]["label"] == "Pricing Management"
    assert meta["statuses"]["running"]["icon"] == "refresh-cw"


def test_trigger_while_running_conflicts(authed, session, fake_invoker) -> None:
    session.operations.begin("fetch-articles")
    resp = authed.post("/api/v1/operations/fetch-articles/trigger")
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Sync operation already running: fetch-articles"
    assert fake_invoker.calls == []


def test_level_filter_ignores_case(authed, fake_invoker) -> None:
    fake_invoker.outcomes.append(Outcome.failure("HTTP 500: Server Error", "http_status", 500))
    authed.post("/api/v1/operations/fetch-inventory/trigger")
    assert authed.get("/api/v1/sync-logs", params={"level": "Error"}).json()["total"] == 1
