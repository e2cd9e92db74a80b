"""
Auto sync endpoints: read and change the full-sync schedule.
"""

from fastapi import APIRouter, Depends

from sync_manager.schemas.auto_sync import AutoSyncState, AutoSyncUpdate
from sync_manager.services.session import SyncSession, get_sync_session

router = APIRouter(prefix="/auto-sync", tags=["auto-sync"])


@router.get("", response_model=AutoSyncState, summary="Get auto sync state")
async def get_auto_sync(session: SyncSession = Depends(get_sync_session)) -> AutoSyncState:
    return session.scheduler.state()


@router.put(
    "",
    response_model=AutoSyncState,
    summary="Update auto sync",
    description="Enable/disable the scheduled full sync or change its interval. Only provided fields are updated.",
)
async def put_auto_sync(
    body: AutoSyncUpdate,
    session: SyncSession = Depends(get_sync_session),
) -> AutoSyncState:
    """PUT /api/v1/auto-sync"""
    return await session.scheduler.configure(
        enabled=body.enabled,
        interval_minutes=body.interval_minutes,
    )
