"""
Operation store: the runtime status of every catalog entry.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable

from sync_manager.core.exceptions import UnknownOperationError
from sync_manager.schemas.outcome import Outcome
from sync_manager.schemas.sync_operation import (
    CATEGORY_DISPLAY,
    OperationGroup,
    OperationStatus,
    OperationSummary,
    SyncOperation,
)
from sync_manager.services.catalog import SYNC_OPERATIONS, validate_catalog

logger = logging.getLogger(__name__)


class OperationStore:
    """
    Owns status, last_run, duration_ms and records_processed for each operation.
    Identity fields come from the catalog and are never changed here.
    Readers get copies; only begin() and complete() mutate.
    """

    def __init__(self, catalog: Iterable[SyncOperation] = SYNC_OPERATIONS) -> None:
        operations = list(catalog)
        validate_catalog(operations)
        self._operations: dict[str, SyncOperation] = {op.id: op.model_copy() for op in operations}

    def _require(self, operation_id: str) -> SyncOperation:
        try:
            return self._operations[operation_id]
        except KeyError:
            raise UnknownOperationError(operation_id) from None

    def get(self, operation_id: str) -> SyncOperation:
        return self._require(operation_id).model_copy()

    def operations(self) -> list[SyncOperation]:
        return [op.model_copy() for op in self._operations.values()]

    def is_running(self, operation_id: str) -> bool:
        return self._require(operation_id).status == OperationStatus.RUNNING

    def begin(self, operation_id: str) -> SyncOperation:
        op = self._require(operation_id)
        op.status = OperationStatus.RUNNING
        op.last_run = datetime.now(timezone.utc)
        logger.debug("%s -> running", operation_id)
        return op.model_copy()

    def complete(self, operation_id: str, outcome: Outcome, duration_ms: int) -> SyncOperation:
        """Overwrite the latest-run fields. records_processed is kept when the outcome has none."""
        op = self._require(operation_id)
        op.status = OperationStatus.SUCCESS if outcome.ok else OperationStatus.ERROR
        op.duration_ms = duration_ms
        if outcome.records_processed is not None:
            op.records_processed = outcome.records_processed
        logger.debug("%s -> %s in %dms", operation_id, op.status.value, duration_ms)
        return op.model_copy()

    def summary(self) -> OperationSummary:
        ops = self._operations.values()
        return OperationSummary(
            success=sum(1 for op in ops if op.status == OperationStatus.SUCCESS),
            error=sum(1 for op in ops if op.status == OperationStatus.ERROR),
            running=sum(1 for op in ops if op.status == OperationStatus.RUNNING),
            total=len(self._operations),
        )

    def grouped(self) -> list[OperationGroup]:
        """Operations grouped by category, in order of first appearance."""
        groups: dict = {}
        for op in self._operations.values():
            groups.setdefault(op.category, []).append(op.model_copy())
        return [
            OperationGroup(
                category=category,
                label=CATEGORY_DISPLAY[category].label,
                icon=CATEGORY_DISPLAY[category].icon,
                operations=ops,
            )
            for category, ops in groups.items()
        ]
