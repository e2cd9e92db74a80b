"""
Sync session: the per-application context owning all mutable sync state.
"""

import logging

from fastapi import Request

from sync_manager.core.config import Settings, get_settings
from sync_manager.core.security import AuthGate
from sync_manager.services.integration_service import IntegrationService
from sync_manager.services.log_source_service import LogSourceService
from sync_manager.services.log_store import SyncLogStore
from sync_manager.services.notifications import NotificationCenter
from sync_manager.services.operation_store import OperationStore
from sync_manager.services.orchestrator import SyncOrchestrator
from sync_manager.services.scheduler import AutoSyncScheduler

logger = logging.getLogger(__name__)


class SyncSession:
    """Operation store, log store, orchestrator, scheduler and log client for one app instance."""

    def __init__(
        self,
        settings: Settings | None = None,
        invoker: IntegrationService | None = None,
        log_source: LogSourceService | None = None,
        notifier: NotificationCenter | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.operations = OperationStore()
        self.sync_logs = SyncLogStore(limit=self.settings.sync_log_limit)
        self.notifications = notifier or NotificationCenter()
        self.orchestrator = SyncOrchestrator(
            self.operations,
            self.sync_logs,
            invoker
            or IntegrationService(
                base_url=self.settings.integration_base_url,
                timeout=self.settings.request_timeout_seconds,
            ),
            self.notifications,
            reject_concurrent_trigger=self.settings.reject_concurrent_trigger,
        )
        self.log_source = log_source or LogSourceService(
            base_url=self.settings.resolved_logs_base_url,
            timeout=self.settings.request_timeout_seconds,
        )
        self.scheduler = AutoSyncScheduler(
            self.orchestrator,
            interval_minutes=self.settings.auto_sync_interval_minutes,
        )
        self.auth = AuthGate(self.settings.auth_state_file, self.settings.app_password)

    async def close(self) -> None:
        await self.scheduler.disable()
        logger.info("Sync session closed")


def get_sync_session(request: Request) -> SyncSession:
    """Dependency: the SyncSession created in the app lifespan."""
    return request.app.state.sync_session
