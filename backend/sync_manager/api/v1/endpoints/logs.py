"""
Integration log file endpoints: stats, normalized entries, raw download.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import StreamingResponse

from sync_manager.core.exceptions import LogSourceError
from sync_manager.schemas.common import LogFilter
from sync_manager.schemas.log_entry import LogListResponse, LogSource, LogStats
from sync_manager.services.log_source_service import filter_log_entries
from sync_manager.services.session import SyncSession, get_sync_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/logs", tags=["logs"])


def _bad_gateway(e: LogSourceError) -> HTTPException:
    logger.warning("Log source failure: %s", e.message)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.get("/stats", response_model=LogStats, summary="Log file stats")
async def log_stats(session: SyncSession = Depends(get_sync_session)) -> LogStats:
    """GET /api/v1/logs/stats: existence, size and line count of both log files."""
    try:
        return await session.log_source.stats()
    except LogSourceError as e:
        raise _bad_gateway(e)


@router.get("/download/{source}", summary="Download a raw log file")
async def download_log(
    source: LogSource,
    session: SyncSession = Depends(get_sync_session),
) -> StreamingResponse:
    """GET /api/v1/logs/download/{source}: stream the raw file to the client."""
    try:
        chunks = await run_in_threadpool(session.log_source.iter_log_file, source)
    except LogSourceError as e:
        raise _bad_gateway(e)
    return StreamingResponse(
        chunks,
        media_type="text/plain",
        headers={"Content-Disposition": f'attachment; filename="{source.value}.log"'},
    )


@router.get(
    "/{source}",
    response_model=LogListResponse,
    summary="List log entries",
    description="Fetch and normalize the system or exception log. Filter by level and a case-insensitive search term.",
)
async def list_logs(
    source: LogSource,
    session: SyncSession = Depends(get_sync_session),
    search: str = Query("", description="Substring of message or source"),
    level: str = Query("all", description="Filter by level: all, success, info, warning, error"),
) -> LogListResponse:
    try:
        entries = await session.log_source.fetch_logs(source)
    except LogSourceError as e:
        raise _bad_gateway(e)
    entries = filter_log_entries(entries, LogFilter(search_term=search, level=level))
    return LogListResponse(source=source, entries=entries, total=len(entries))
