"""Sync log schema (API contract). Used by the sync manager activity view."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

SyncLogStatus = Literal["success", "error", "running"]

NO_ACTIVITY_MESSAGE = "No sync operations have been performed yet"


class SyncLogEntry(BaseModel):
    """Single sync log entry. Immutable once recorded."""
    model_config = ConfigDict(frozen=True)

    id: str
    operation_id: str
    operation_name: str
    timestamp: datetime
    status: SyncLogStatus
    message: str
    duration_ms: int | None = None
    records_processed: int | None = None
    error: str | None = None


class SyncLogListResponse(BaseModel):
    """Filtered sync log list. `empty` is true when nothing has been recorded at all."""
    entries: list[SyncLogEntry]
    total: int
    empty: bool = False
    message: str | None = None
