"""
Integration backend client: POSTs to the /integration/* sync endpoints and
normalizes every response or failure into an Outcome.
Uses the requests library; blocking calls run in a worker thread so the event loop stays free.
"""

import asyncio
import logging
from typing import Any

import requests

from sync_manager.core.config import get_settings
from sync_manager.core.exceptions import (
    ApplicationError,
    HttpStatusError,
    IntegrationError,
    TransportError,
)
from sync_manager.schemas.outcome import Outcome
from sync_manager.schemas.sync_operation import SyncOperation

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Operation failed"


def _as_count(value: Any) -> int:
    """Non-negative integer from an int, float or numeric string; 0 otherwise."""
    if isinstance(value, bool) or value is None:
        return 0
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(count, 0)


def records_processed_from(data: Any) -> int:
    """Best-effort record count: data.count, then data.length, else 0."""
    if isinstance(data, dict):
        for key in ("count", "length"):
            value = _as_count(data.get(key))
            if value:
                return value
        return 0
    if isinstance(data, (list, tuple, str)):
        return len(data)
    return 0


class IntegrationService:
    """
    Remote invoker for sync operations. One POST per call, no body, no retries.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.integration_base_url).rstrip("/")
        self._timeout = timeout or settings.request_timeout_seconds

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    def _post(self, endpoint: str) -> dict[str, Any]:
        """
        Execute the POST and return the decoded envelope.
        Raises TransportError, HttpStatusError or ApplicationError, in that priority.
        """
        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        logger.info("POST %s", url)
        try:
            resp = requests.request(
                method="POST",
                url=url,
                headers=self._get_headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Network error: {e!s}", cause=e) from e

        if not resp.ok:
            raise HttpStatusError(resp.status_code, resp.reason or "")

        try:
            body = resp.json()
        except ValueError as e:
            raise ApplicationError(f"Invalid response from backend: {e!s}") from e
        if not isinstance(body, dict):
            raise ApplicationError("Invalid response from backend: expected a JSON object", detail=body)

        if not body.get("success"):
            raise ApplicationError(body.get("error") or DEFAULT_FAILURE_MESSAGE, detail=body)
        return body

    def call(self, operation: SyncOperation) -> Outcome:
        """Blocking invocation. Never raises for network-originated failures."""
        if not operation.endpoint:
            raise ValueError(f"Sync operation {operation.id} has no endpoint")
        try:
            body = self._post(operation.endpoint)
        except IntegrationError as e:
            logger.warning("%s failed (%s): %s", operation.id, e.kind, e.message)
            return Outcome.failure(
                e.message,
                error_kind=e.kind,
                status_code=getattr(e, "status_code", None),
            )
        data = body.get("data")
        return Outcome.success(
            body.get("message") or f"{operation.name} completed successfully",
            records_processed=records_processed_from(data),
            data=data,
        )

    async def invoke(self, operation: SyncOperation) -> Outcome:
        """Async invocation used by the orchestrator."""
        return await asyncio.to_thread(self.call, operation)
