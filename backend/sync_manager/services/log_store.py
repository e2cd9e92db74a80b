"""
Sync log store: bounded, newest-first history of sync executions.
"""

import csv
import io
from collections import deque
from typing import Literal

from sync_manager.schemas.common import LogFilter
from sync_manager.schemas.sync_log import SyncLogEntry

ExportFormat = Literal["json", "csv"]

_CSV_FIELDS = [
    "id",
    "operation_id",
    "operation_name",
    "timestamp",
    "status",
    "message",
    "duration_ms",
    "records_processed",
    "error",
]


class SyncLogStore:
    """Keeps at most `limit` entries; the oldest are dropped first."""

    def __init__(self, limit: int = 50) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self._limit = limit
        self._entries: deque[SyncLogEntry] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._limit

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, entry: SyncLogEntry) -> None:
        self._entries.appendleft(entry)

    def entries(self, log_filter: LogFilter | None = None) -> list[SyncLogEntry]:
        """Entries in stored order (newest first) that pass the filter."""
        if log_filter is None:
            return list(self._entries)
        return [
            e for e in self._entries
            if log_filter.matches(e.status, e.message, e.operation_name)
        ]

    def get(self, entry_id: str) -> SyncLogEntry | None:
        for e in self._entries:
            if e.id == entry_id:
                return e
        return None

    def export(self, fmt: ExportFormat = "json", log_filter: LogFilter | None = None) -> str:
        """Serialize the filtered entries as JSON lines or CSV."""
        entries = self.entries(log_filter)
        if fmt == "json":
            return "".join(e.model_dump_json() + "\n" for e in entries)
        if fmt == "csv":
            buf = io.StringIO()
            writer = csv.DictWriter(buf, fieldnames=_CSV_FIELDS)
            writer.writeheader()
            for e in entries:
                writer.writerow(e.model_dump(mode="json"))
            return buf.getvalue()
        raise ValueError(f"Unsupported export format: {fmt}")
