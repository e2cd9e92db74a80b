"""
Sync log endpoints. History of sync runs for the Sync Manager page.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from sync_manager.schemas.common import LogFilter
from sync_manager.schemas.sync_log import NO_ACTIVITY_MESSAGE, SyncLogEntry, SyncLogListResponse
from sync_manager.services.session import SyncSession, get_sync_session

router = APIRouter(prefix="/sync-logs", tags=["sync-logs"])

_EXPORT_FORMATS = {
    "json": ("application/x-ndjson", "jsonl"),
    "csv": ("text/csv", "csv"),
}


@router.get(
    "",
    response_model=SyncLogListResponse,
    summary="List sync logs",
    description="Newest-first sync log entries. Filter by status and a case-insensitive search term.",
)
async def list_sync_logs(
    session: SyncSession = Depends(get_sync_session),
    search: str = Query("", description="Substring of message or operation name"),
    level: str = Query("all", description="Filter by status: all, success, error, running"),
) -> SyncLogListResponse:
    """GET /api/v1/sync-logs"""
    entries = session.sync_logs.entries(LogFilter(search_term=search, level=level))
    empty = len(session.sync_logs) == 0
    return SyncLogListResponse(
        entries=entries,
        total=len(entries),
        empty=empty,
        message=NO_ACTIVITY_MESSAGE if empty else None,
    )


@router.get("/export", summary="Export sync logs", response_class=PlainTextResponse)
async def export_sync_logs(
    session: SyncSession = Depends(get_sync_session),
    fmt: str = Query("json", alias="format", pattern="^(json|csv)$", description="json (JSON lines) or csv"),
    search: str = Query(""),
    level: str = Query("all"),
) -> PlainTextResponse:
    """GET /api/v1/sync-logs/export: download the filtered history."""
    body = session.sync_logs.export(fmt, LogFilter(search_term=search, level=level))
    media_type, extension = _EXPORT_FORMATS[fmt]
    return PlainTextResponse(
        body,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="sync-logs.{extension}"'},
    )


@router.get("/{entry_id}", response_model=SyncLogEntry, summary="Get one sync log entry")
async def get_sync_log(
    entry_id: str,
    session: SyncSession = Depends(get_sync_session),
) -> SyncLogEntry:
    entry = session.sync_logs.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sync log entry not found")
    return entry
