"""
Shared fixtures: isolated settings, canned HTTP responses, a fresh sync session.
"""

import json
from typing import Any

import pytest
import requests

from sync_manager.core.config import Settings
from sync_manager.schemas.outcome import Outcome
from sync_manager.services.session import SyncSession

BASE_URL = "http://integration.test"


def make_response(
    status_code: int = 200,
    body: Any = None,
    reason: str = "OK",
    raw: bytes | None = None,
) -> requests.Response:
    """Build a real requests.Response with the given status and JSON (or raw) body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    resp._content_consumed = True
    resp.headers["Content-Type"] = "application/json"
    return resp


class FakeInvoker:
    """Returns queued outcomes and records which operations were invoked."""

    def __init__(self, *outcomes: Outcome) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[str] = []

    async def invoke(self, operation):
        self.calls.append(operation.id)
        if self.outcomes:
            return self.outcomes.pop(0)
        return Outcome.success(f"{operation.name} completed successfully", records_processed=0)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        INTEGRATION_BASE_URL=BASE_URL,
        SYNC_LOG_LIMIT=50,
        REQUEST_TIMEOUT_SECONDS=5,
        APP_PASSWORD="letmein",
        AUTH_STATE_FILE=tmp_path / "auth.json",
    )


@pytest.fixture
def fake_invoker() -> FakeInvoker:
    return FakeInvoker()


@pytest.fixture
def session(settings, fake_invoker) -> SyncSession:
    return SyncSession(settings, invoker=fake_invoker)
