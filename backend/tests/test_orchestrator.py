"""
Tests for the sync orchestrator: trigger lifecycle, log entries, notifications, rejections.
"""

import asyncio
from unittest.mock import patch

import pytest

from conftest import BASE_URL, FakeInvoker, make_response
from sync_manager.core.exceptions import OperationAlreadyRunningError, UnknownOperationError
from sync_manager.schemas.outcome import Outcome
from sync_manager.schemas.sync_operation import OperationStatus
from sync_manager.services.catalog import SYNC_OPERATIONS
from sync_manager.services.integration_service import IntegrationService
from sync_manager.services.log_store import SyncLogStore
from sync_manager.services.notifications import NotificationCenter
from sync_manager.services.operation_store import OperationStore
from sync_manager.services.orchestrator import SyncOrchestrator

REQUEST = "sync_manager.services.integration_service.requests.request"


def build(invoker, reject=True, limit=50) -> SyncOrchestrator:
    return SyncOrchestrator(
        OperationStore(),
        SyncLogStore(limit=limit),
        invoker,
        NotificationCenter(),
        reject_concurrent_trigger=reject,
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("operation_id", [op.id for op in SYNC_OPERATIONS])
async def test_each_trigger_adds_exactly_one_entry(operation_id) -> None:
    orch = build(FakeInvoker())
    entry = await orch.trigger(operation_id)
    matching = [e for e in orch.sync_logs.entries() if e.operation_id == operation_id]
    assert matching == [entry]
    assert entry.status == "success"
    assert orch.operations.get(operation_id).status == OperationStatus.SUCCESS


@pytest.mark.asyncio
async def test_success_end_to_end_with_http() -> None:
    orch = build(IntegrationService(base_url=BASE_URL, timeout=5))
    with patch(REQUEST, return_value=make_response(body={"success": True, "data": {"count": 42}})):
        entry = await orch.trigger("fetch-customers")
    assert entry.records_processed == 42
    assert entry.message == "Customer Sync completed successfully"
    assert entry.operation_name == "Customer Sync"
    assert entry.error is None
    op = orch.operations.get("fetch-customers")
    assert op.records_processed == 42
    assert op.duration_ms == entry.duration_ms
    assert op.last_run is not None


@pytest.mark.asyncio
async def test_http_failure_logged_and_notified() -> None:
    orch = build(IntegrationService(base_url=BASE_URL, timeout=5))
    with patch(REQUEST, return_value=make_response(500, {}, reason="Server Error")):
        entry = await orch.trigger("full-sync")
    assert entry.status == "error"
    assert entry.message == "HTTP 500: Server Error"
    assert entry.error == "HTTP 500: Server Error"
    assert orch.operations.get("full-sync").status == OperationStatus.ERROR
    notes = orch._notifier.recent()
    assert len(notes) == 1
    assert notes[0].variant == "destructive"
    assert notes[0].description == "Failed to execute Full System Sync: HTTP 500: Server Error"


@pytest.mark.asyncio
async def test_application_error_message_is_backend_error() -> None:
    orch = build(IntegrationService(base_url=BASE_URL, timeout=5))
    with patch(REQUEST, return_value=make_response(body={"success": False, "error": "bad request"})):
        entry = await orch.trigger("sync-pricelists")
    assert entry.status == "error"
    assert entry.message == "bad request"


@pytest.mark.asyncio
async def test_unknown_operation_makes_no_request_and_no_entry() -> None:
    orch = build(IntegrationService(base_url=BASE_URL, timeout=5))
    with patch(REQUEST) as request:
        with pytest.raises(UnknownOperationError):
            await orch.trigger("nope")
    request.assert_not_called()
    assert orch.sync_logs.entries() == []
    assert orch._notifier.recent() == []


@pytest.mark.asyncio
async def test_success_notification() -> None:
    orch = build(FakeInvoker())
    await orch.trigger_full_sync()
    note = orch._notifier.recent()[0]
    assert (note.title, note.variant) == ("Success", "default")
    assert note.description == "Full System Sync has been executed successfully"


class BlockingInvoker(FakeInvoker):
    """Holds every invocation until `release` is set."""

    def __init__(self, *outcomes: Outcome) -> None:
        super().__init__(*outcomes)
        self.release = asyncio.Event()

    async def invoke(self, operation):
        await self.release.wait()
        return await super().invoke(operation)


@pytest.mark.asyncio
async def test_retrigger_while_running_is_rejected() -> None:
    invoker = BlockingInvoker()
    orch = build(invoker)
    first = asyncio.create_task(orch.trigger("fetch-articles"))
    await asyncio.sleep(0)
    assert orch.operations.is_running("fetch-articles")

    with pytest.raises(OperationAlreadyRunningError):
        await orch.trigger("fetch-articles")

    invoker.release.set()
    await first
    assert len(orch.sync_logs) == 1
    assert invoker.calls == ["fetch-articles"]


@pytest.mark.asyncio
async def test_retrigger_allowed_when_policy_disabled() -> None:
    invoker = BlockingInvoker(
        Outcome.success("first", records_processed=1),
        Outcome.failure("second", "transport"),
    )
    orch = build(invoker, reject=False)
    tasks = [asyncio.create_task(orch.trigger("fetch-articles")) for _ in range(2)]
    await asyncio.sleep(0)
    invoker.release.set()
    await asyncio.gather(*tasks)
    assert len(orch.sync_logs) == 2
    # last completion wins
    assert orch.operations.get("fetch-articles").status == OperationStatus.ERROR


@pytest.mark.asyncio
async def test_different_operations_run_concurrently() -> None:
    invoker = BlockingInvoker()
    orch = build(invoker)
    tasks = [asyncio.create_task(orch.trigger(i)) for i in ("fetch-customers", "fetch-inventory")]
    await asyncio.sleep(0)
    assert orch.operations.summary().running == 2
    invoker.release.set()
    await asyncio.gather(*tasks)
    assert orch.operations.summary().success == 2


class ExplodingInvoker:
    async def invoke(self, operation):
        raise RuntimeError("boom")


@pytest.mark.asyncio
async def test_unexpected_invoker_error_does_not_leave_running() -> None:
    orch = build(ExplodingInvoker())
    with pytest.raises(RuntimeError):
        await orch.trigger("fetch-customers")
    assert orch.operations.get("fetch-customers").status == OperationStatus.ERROR


@pytest.mark.asyncio
async def test_log_bound_applies_to_triggers() -> None:
    orch = build(FakeInvoker(), limit=3)
    for _ in range(5):
        await orch.trigger("fetch-customers")
    assert len(orch.sync_logs) == 3


@pytest.mark.asyncio
async def test_cancelled_trigger_is_finalized_as_error() -> None:
    invoker = BlockingInvoker()
    orch = build(invoker)
    task = asyncio.create_task(orch.trigger("fetch-customers"))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert orch.operations.get("fetch-customers").status == OperationStatus.ERROR
    entries = orch.sync_logs.entries()
    assert [(e.status, e.message) for e in entries] == [("error", "Operation cancelled")]
    # the operation can be triggered again
    invoker.release.set()
    entry = await orch.trigger("fetch-customers")
    assert entry.status == "success"


def test_notifier_is_abstract() -> None:
    from sync_manager.services.notifications import Notifier

    with pytest.raises(TypeError):
        Notifier()
