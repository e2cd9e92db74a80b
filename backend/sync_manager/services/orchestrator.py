"""
Sync orchestrator: trigger -> invoke -> track -> log -> notify, for one operation at a time.
"""

import asyncio
import logging
import time
import uuid
from datetime import datetime, timezone

from sync_manager.core.exceptions import OperationAlreadyRunningError
from sync_manager.schemas.outcome import Outcome
from sync_manager.schemas.sync_log import SyncLogEntry
from sync_manager.schemas.sync_operation import SyncOperation
from sync_manager.services.catalog import FULL_SYNC_ID
from sync_manager.services.integration_service import IntegrationService
from sync_manager.services.log_store import SyncLogStore
from sync_manager.services.notifications import Notifier
from sync_manager.services.operation_store import OperationStore

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> int:
    return int(round((time.monotonic() - started) * 1000))


def build_log_entry(operation: SyncOperation, outcome: Outcome, duration_ms: int) -> SyncLogEntry:
    """Snapshot one finished invocation as a log entry."""
    return SyncLogEntry(
        id=uuid.uuid4().hex,
        operation_id=operation.id,
        operation_name=operation.name,
        timestamp=datetime.now(timezone.utc),
        status="success" if outcome.ok else "error",
        message=outcome.message,
        duration_ms=duration_ms,
        records_processed=outcome.records_processed if outcome.ok else None,
        error=None if outcome.ok else outcome.message,
    )


class SyncOrchestrator:
    """
    Runs sync operations against the integration backend.

    Network failures never escape trigger(); they become an error log entry and
    a destructive notification. Unknown ids and (by default) re-triggers of a
    running operation are rejected before any request is made.
    """

    def __init__(
        self,
        operations: OperationStore,
        sync_logs: SyncLogStore,
        invoker: IntegrationService,
        notifier: Notifier,
        reject_concurrent_trigger: bool = True,
    ) -> None:
        self.operations = operations
        self.sync_logs = sync_logs
        self._invoker = invoker
        self._notifier = notifier
        self._reject_concurrent = reject_concurrent_trigger

    async def trigger(self, operation_id: str) -> SyncLogEntry:
        """Run one operation to completion and return the log entry it produced."""
        operation = self.operations.get(operation_id)
        if self._reject_concurrent and self.operations.is_running(operation_id):
            raise OperationAlreadyRunningError(operation_id)

        self.operations.begin(operation_id)
        logger.info("Starting %s (%s)", operation.name, operation.endpoint)
        started = time.monotonic()
        try:
            outcome = await self._invoker.invoke(operation)
        except BaseException as e:
            # never leave the operation marked running, even when cancelled
            message = "Operation cancelled" if isinstance(e, asyncio.CancelledError) else "Unknown error occurred"
            self._finish(operation, Outcome.failure(message, error_kind="application"), _elapsed_ms(started))
            raise
        return self._finish(operation, outcome, _elapsed_ms(started))

    def _finish(self, operation: SyncOperation, outcome: Outcome, duration_ms: int) -> SyncLogEntry:
        """Apply the outcome to the store, record it and notify once."""
        self.operations.complete(operation.id, outcome, duration_ms)
        entry = build_log_entry(operation, outcome, duration_ms)
        self.sync_logs.record(entry)

        if outcome.ok:
            logger.info(
                "%s completed in %dms (%s records)",
                operation.name,
                duration_ms,
                outcome.records_processed,
            )
            self._notifier.notify("Success", f"{operation.name} has been executed successfully")
        else:
            logger.warning("%s failed in %dms: %s", operation.name, duration_ms, outcome.message)
            self._notifier.notify(
                "Error",
                f"Failed to execute {operation.name}: {outcome.message}",
                variant="destructive",
            )
        return entry

    async def trigger_full_sync(self) -> SyncLogEntry:
        return await self.trigger(FULL_SYNC_ID)
