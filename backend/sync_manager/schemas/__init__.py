# Pydantic request/response schemas (API contract).

from sync_manager.schemas.common import ALL_LEVELS, LogFilter
from sync_manager.schemas.auth import AuthStatus, LoginRequest
from sync_manager.schemas.auto_sync import AutoSyncState, AutoSyncUpdate
from sync_manager.schemas.log_entry import (
    FileStat,
    LogEntry,
    LogListResponse,
    LogSource,
    LogStats,
    RawLogRecord,
)
from sync_manager.schemas.notification import Notification
from sync_manager.schemas.outcome import Outcome
from sync_manager.schemas.sync_log import NO_ACTIVITY_MESSAGE, SyncLogEntry, SyncLogListResponse
from sync_manager.schemas.sync_operation import (
    CATEGORY_DISPLAY,
    STATUS_DISPLAY,
    DisplayInfo,
    DisplayMetadata,
    OperationGroup,
    OperationStatus,
    OperationSummary,
    SyncCategory,
    SyncOperation,
)

__all__ = [
    "ALL_LEVELS",
    "LogFilter",
    "AuthStatus",
    "LoginRequest",
    "AutoSyncState",
    "AutoSyncUpdate",
    "FileStat",
    "LogEntry",
    "LogListResponse",
    "LogSource",
    "LogStats",
    "RawLogRecord",
    "Notification",
    "Outcome",
    "NO_ACTIVITY_MESSAGE",
    "SyncLogEntry",
    "SyncLogListResponse",
    "CATEGORY_DISPLAY",
    "DisplayInfo",
    "DisplayMetadata",
    "STATUS_DISPLAY",
    "OperationGroup",
    "OperationStatus",
    "OperationSummary",
    "SyncCategory",
    "SyncOperation",
]
