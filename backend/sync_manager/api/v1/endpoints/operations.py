"""
Sync operation endpoints: catalog with live status, summary counters, triggering.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from sync_manager.core.exceptions import OperationAlreadyRunningError, UnknownOperationError
from sync_manager.schemas.sync_log import SyncLogEntry
from sync_manager.schemas.sync_operation import (
    CATEGORY_DISPLAY,
    STATUS_DISPLAY,
    DisplayMetadata,
    OperationGroup,
    OperationSummary,
    SyncOperation,
)
from sync_manager.services.session import SyncSession, get_sync_session

router = APIRouter(prefix="/operations", tags=["operations"])


@router.get(
    "",
    response_model=list[SyncOperation],
    summary="List sync operations",
    description="Every catalog operation with the status of its latest run, in catalog order.",
)
async def list_operations(session: SyncSession = Depends(get_sync_session)) -> list[SyncOperation]:
    """GET /api/v1/operations"""
    return session.operations.operations()


@router.get("/groups", response_model=list[OperationGroup], summary="Operations by category")
async def list_operation_groups(session: SyncSession = Depends(get_sync_session)) -> list[OperationGroup]:
    """GET /api/v1/operations/groups: operations grouped by category with display labels."""
    return session.operations.grouped()


@router.get("/display", response_model=DisplayMetadata, summary="Display metadata")
async def display_metadata() -> DisplayMetadata:
    """Fixed labels, icons and colors for categories and statuses."""
    return DisplayMetadata(categories=CATEGORY_DISPLAY, statuses=STATUS_DISPLAY)


@router.get("/summary", response_model=OperationSummary, summary="Status counters")
async def operations_summary(session: SyncSession = Depends(get_sync_session)) -> OperationSummary:
    """GET /api/v1/operations/summary: success / error / running / total counts."""
    return session.operations.summary()


@router.get("/{operation_id}", response_model=SyncOperation, summary="Get one sync operation")
async def get_operation(
    operation_id: str,
    session: SyncSession = Depends(get_sync_session),
) -> SyncOperation:
    try:
        return session.operations.get(operation_id)
    except UnknownOperationError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.post(
    "/{operation_id}/trigger",
    response_model=SyncLogEntry,
    summary="Run a sync operation",
    description="Runs the operation to completion and returns the resulting log entry. Backend failures are reported in the entry, not as an HTTP error.",
)
async def trigger_operation(
    operation_id: str,
    session: SyncSession = Depends(get_sync_session),
) -> SyncLogEntry:
    """POST /api/v1/operations/{operation_id}/trigger"""
    try:
        return await session.orchestrator.trigger(operation_id)
    except UnknownOperationError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except OperationAlreadyRunningError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
