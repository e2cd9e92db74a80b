"""
Aggregate v1 API routes.

Convention: Use "" (not "/") for the root path of a segment (e.g. @router.get(""))
so the route is /api/v1/operations not /api/v1/operations/. This avoids 307 redirects
when the request arrives without a trailing slash.
"""

from fastapi import APIRouter, Depends

from sync_manager.api.v1.endpoints import auto_sync, logs, notifications, operations, sync_logs
from sync_manager.core.security import require_authenticated

api_router = APIRouter(dependencies=[Depends(require_authenticated)])

api_router.include_router(operations.router, prefix="")
api_router.include_router(sync_logs.router, prefix="")
api_router.include_router(logs.router, prefix="")
api_router.include_router(auto_sync.router, prefix="")
api_router.include_router(notifications.router, prefix="")
