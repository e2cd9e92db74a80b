"""
Sync operation schemas: catalog entries, categories, statuses and display metadata.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SyncCategory(str, Enum):
    DATA_SYNC = "data-sync"
    ORDER_SYNC = "order-sync"
    INVENTORY = "inventory"
    CUSTOMERS = "customers"
    PRICING = "pricing"
    SYSTEM = "system"


class OperationStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCESS = "success"
    ERROR = "error"


class DisplayInfo(BaseModel):
    """Fixed display metadata for a category or status."""
    model_config = ConfigDict(frozen=True)

    label: str
    icon: str
    color: str


CATEGORY_DISPLAY: dict[SyncCategory, DisplayInfo] = {
    SyncCategory.DATA_SYNC: DisplayInfo(label="Data Synchronization", icon="database", color="blue"),
    SyncCategory.ORDER_SYNC: DisplayInfo(label="Order Management", icon="shopping-cart", color="purple"),
    SyncCategory.INVENTORY: DisplayInfo(label="Inventory Management", icon="trending-up", color="green"),
    SyncCategory.CUSTOMERS: DisplayInfo(label="Customer Management", icon="users", color="indigo"),
    SyncCategory.PRICING: DisplayInfo(label="Pricing Management", icon="tag", color="amber"),
    SyncCategory.SYSTEM: DisplayInfo(label="System Operations", icon="settings", color="red"),
}

STATUS_DISPLAY: dict[str, DisplayInfo] = {
    "idle": DisplayInfo(label="Idle", icon="clock", color="gray"),
    "running": DisplayInfo(label="Running", icon="refresh-cw", color="blue"),
    "success": DisplayInfo(label="Success", icon="check-circle", color="green"),
    "error": DisplayInfo(label="Error", icon="alert-triangle", color="red"),
}


class SyncOperation(BaseModel):
    """One triggerable remote action plus the state of its latest run."""

    id: str = Field(..., min_length=1)
    name: str
    description: str
    endpoint: str = Field(..., min_length=1, description="Remote path, invoked with POST")
    method: str = "POST"
    category: SyncCategory

    # Runtime fields, owned by the operation store
    status: OperationStatus = OperationStatus.IDLE
    last_run: datetime | None = None
    duration_ms: int | None = None
    records_processed: int | None = None


class OperationGroup(BaseModel):
    """Operations sharing a category, for the grouped view."""
    category: SyncCategory
    label: str
    icon: str
    operations: list[SyncOperation]


class DisplayMetadata(BaseModel):
    """Label, icon and color for every category and status."""
    categories: dict[SyncCategory, DisplayInfo]
    statuses: dict[str, DisplayInfo]


class OperationSummary(BaseModel):
    """Counters over the current operation states."""
    success: int = 0
    error: int = 0
    running: int = 0
    total: int = 0
