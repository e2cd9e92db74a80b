"""
Notification surface: toast-style messages raised by the orchestrator.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from datetime import datetime, timezone

from sync_manager.schemas.notification import Notification, NotificationVariant

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Fire-and-forget notification sink."""

    @abstractmethod
    def notify(self, title: str, description: str, variant: NotificationVariant = "default") -> None:
        ...


class NotificationCenter(Notifier):
    """Logs every notification and keeps the most recent ones for polling clients."""

    def __init__(self, limit: int = 20) -> None:
        self._recent: deque[Notification] = deque(maxlen=limit)

    def notify(self, title: str, description: str, variant: NotificationVariant = "default") -> None:
        level = logging.WARNING if variant == "destructive" else logging.INFO
        logger.log(level, "%s: %s", title, description)
        self._recent.appendleft(
            Notification(
                title=title,
                description=description,
                variant=variant,
                created_at=datetime.now(timezone.utc),
            )
        )

    def recent(self) -> list[Notification]:
        return list(self._recent)
