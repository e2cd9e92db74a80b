"""
Static catalog of the sync operations the integration backend exposes.
"""

from sync_manager.schemas.sync_operation import SyncCategory, SyncOperation

FULL_SYNC_ID = "full-sync"

SYNC_OPERATIONS: tuple[SyncOperation, ...] = (
    SyncOperation(
        id="fetch-customers",
        name="Customer Sync",
        description="Fetch and sync customer data from Business NXT to Vendre",
        endpoint="/integration/fetch-customers",
        category=SyncCategory.CUSTOMERS,
    ),
    SyncOperation(
        id="fetch-articles",
        name="Product Sync",
        description="Fetch and sync product catalog from Business NXT to Vendre",
        endpoint="/integration/fetch-articles",
        category=SyncCategory.DATA_SYNC,
    ),
    SyncOperation(
        id="fetch-inventory",
        name="Inventory Sync",
        description="Update stock levels and inventory data from Business NXT to Vendre",
        endpoint="/integration/fetch-inventory",
        category=SyncCategory.INVENTORY,
    ),
    SyncOperation(
        id="sync-order-statuses",
        name="Order Status Sync",
        description="Sync order statuses from Business NXT to Vendre",
        endpoint="/integration/sync-order-statuses",
        category=SyncCategory.ORDER_SYNC,
    ),
    SyncOperation(
        id="sync-pricelists",
        name="Price List Sync",
        description="Sync customer price lists from Business NXT to Vendre",
        endpoint="/integration/sync-pricelists",
        category=SyncCategory.PRICING,
    ),
    SyncOperation(
        id=FULL_SYNC_ID,
        name="Full System Sync",
        description="Complete synchronization of all data between systems",
        endpoint="/integration/full-sync",
        category=SyncCategory.SYSTEM,
    ),
)


def validate_catalog(operations: tuple[SyncOperation, ...] | list[SyncOperation]) -> None:
    """Raise ValueError if two entries share an id."""
    seen: set[str] = set()
    for op in operations:
        if op.id in seen:
            raise ValueError(f"Duplicate sync operation id: {op.id}")
        seen.add(op.id)
