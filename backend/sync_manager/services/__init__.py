# Services: catalog, integration client, stores, orchestrator, log source, scheduler

from sync_manager.services.catalog import FULL_SYNC_ID, SYNC_OPERATIONS
from sync_manager.services.integration_service import (
    IntegrationService,
    records_processed_from,
)
from sync_manager.services.log_source_service import (
    LogSourceService,
    normalize_record,
)
from sync_manager.services.log_store import SyncLogStore
from sync_manager.services.notifications import NotificationCenter, Notifier
from sync_manager.services.operation_store import OperationStore
from sync_manager.services.orchestrator import SyncOrchestrator
from sync_manager.services.scheduler import AutoSyncScheduler
from sync_manager.services.session import SyncSession, get_sync_session

__all__ = [
    "FULL_SYNC_ID",
    "SYNC_OPERATIONS",
    "IntegrationService",
    "records_processed_from",
    "LogSourceService",
    "normalize_record",
    "SyncLogStore",
    "NotificationCenter",
    "Notifier",
    "OperationStore",
    "SyncOrchestrator",
    "AutoSyncScheduler",
    "SyncSession",
    "get_sync_session",
]
