"""
Auto sync schedule schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class AutoSyncState(BaseModel):
    enabled: bool
    interval_minutes: int
    next_run: datetime | None = None
    last_result: str | None = None


class AutoSyncUpdate(BaseModel):
    """Request body for PUT /auto-sync (all optional)."""
    enabled: bool | None = None
    interval_minutes: int | None = Field(default=None, ge=1)
