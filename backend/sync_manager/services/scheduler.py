"""
Auto sync: runs the full system sync on a fixed interval while enabled.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from sync_manager.core.exceptions import OperationAlreadyRunningError, SyncManagerError
from sync_manager.schemas.auto_sync import AutoSyncState
from sync_manager.services.orchestrator import SyncOrchestrator

logger = logging.getLogger(__name__)


class AutoSyncScheduler:
    """Owns one background asyncio task; disabled until enable() is called."""

    def __init__(self, orchestrator: SyncOrchestrator, interval_minutes: int = 30) -> None:
        if interval_minutes < 1:
            raise ValueError("interval_minutes must be at least 1")
        self._orchestrator = orchestrator
        self._interval_minutes = interval_minutes
        self._task: asyncio.Task | None = None
        self._next_run: datetime | None = None
        self._last_result: str | None = None
        self._inflight: asyncio.Future | None = None

    @property
    def enabled(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def interval_seconds(self) -> float:
        return self._interval_minutes * 60.0

    def state(self) -> AutoSyncState:
        return AutoSyncState(
            enabled=self.enabled,
            interval_minutes=self._interval_minutes,
            next_run=self._next_run if self.enabled else None,
            last_result=self._last_result,
        )

    async def configure(self, enabled: bool | None = None, interval_minutes: int | None = None) -> AutoSyncState:
        """Apply a partial update. Changing the interval restarts a running schedule."""
        if interval_minutes is not None and interval_minutes != self._interval_minutes:
            if interval_minutes < 1:
                raise ValueError("interval_minutes must be at least 1")
            self._interval_minutes = interval_minutes
            if self.enabled:
                await self.disable()
                self.enable()
        if enabled is True:
            self.enable()
        elif enabled is False:
            await self.disable()
        return self.state()

    def enable(self) -> None:
        if self.enabled:
            return
        logger.info("Auto sync enabled (every %d min)", self._interval_minutes)
        self._next_run = datetime.now(timezone.utc) + timedelta(seconds=self.interval_seconds)
        self._task = asyncio.create_task(self._run(), name="auto-sync")

    async def disable(self) -> None:
        task, self._task = self._task, None
        self._next_run = None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Auto sync disabled")

    async def run_once(self) -> None:
        """One scheduled tick: trigger the full sync, skipping if it is already running."""
        # shielded: disable() stops the schedule, never a sync already in flight
        self._inflight = asyncio.ensure_future(self._orchestrator.trigger_full_sync())
        try:
            entry = await asyncio.shield(self._inflight)
        except OperationAlreadyRunningError:
            logger.info("Auto sync skipped: full sync still running")
            self._last_result = "skipped"
            return
        except SyncManagerError as e:
            logger.error("Auto sync could not start: %s", e.message)
            self._last_result = "error"
            return
        except Exception:
            logger.exception("Auto sync run failed")
            self._last_result = "error"
            return
        self._last_result = entry.status

    async def _run(self) -> None:
        while True:
            self._next_run = datetime.now(timezone.utc) + timedelta(seconds=self.interval_seconds)
            await asyncio.sleep(self.interval_seconds)
            await self.run_once()
