"""
Notification endpoint: recent toast messages, newest first.
"""

from fastapi import APIRouter, Depends

from sync_manager.schemas.notification import Notification
from sync_manager.services.session import SyncSession, get_sync_session

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[Notification], summary="Recent notifications")
async def list_notifications(session: SyncSession = Depends(get_sync_session)) -> list[Notification]:
    return session.notifications.recent()
