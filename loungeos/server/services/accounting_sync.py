"""
Accounting sync service.

Turns completed orders and costed inventory movements into posted journal
entries. Every generated entry carries a reference to its source
(``POS-{order_id}`` or ``INV-{movement_id}``), which makes the sync
idempotent: a source that already has an entry is never posted again.

Account pairs:

- Sale: Dr 1000 Cash / Cr 4000 Sales Revenue
- IN: Dr 1200 Inventory / Cr 1000 Cash
- OUT: Dr 5000 Cost of Goods Sold / Cr 1200 Inventory
- ADJUSTMENT gain: Dr 1200 / Cr 5000; loss: Dr 5000 / Cr 1200
- TRANSFER: no entry
"""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.entities.inventory import InventoryMovement
from loungeos.core.database.repositories.accounting import JournalEntryRepository
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.inventory import InventoryItemRepository, InventoryMovementRepository
from loungeos.core.database.repositories.orders import OrderRepository
from loungeos.core.errors import LoungeOSError
from loungeos.core.logging_config import get_logger
from loungeos.core.models.domain import EntryType, JournalStatus, MovementType
from loungeos.core.models.io.accounting import JournalLineIn, SyncAllResult, SyncResult, SyncStatus
from loungeos.core.monitoring import log_sync

from .accounting import LedgerService
from .periods import day_bounds

logger = get_logger(__name__)

CASH = "1000"
INVENTORY = "1200"
SALES_REVENUE = "4000"
COST_OF_GOODS_SOLD = "5000"


def sale_reference(order_id: str) -> str:
    return f"POS-{order_id}"


def movement_reference(movement_id: int) -> str:
    return f"INV-{movement_id}"


def movement_lines(movement: InventoryMovement, item_name: str) -> Optional[List[JournalLineIn]]:
    """Build the journal lines for a costed movement, or None when it posts nothing."""
    amount = round(abs(movement.quantity) * (movement.unit_cost or 0.0), 2)
    movement_type = MovementType(movement.movement_type)

    if movement_type is MovementType.stock_in:
        debit = (INVENTORY, f"Purchase: {item_name}")
        credit = (CASH, "Payment for inventory")
    elif movement_type is MovementType.stock_out:
        debit = (COST_OF_GOODS_SOLD, f"Usage: {item_name}")
        credit = (INVENTORY, "Inventory reduction")
    elif movement_type is MovementType.adjustment and movement.quantity > 0:
        debit = (INVENTORY, f"Inventory Adjustment (Gain): {item_name}")
        credit = (COST_OF_GOODS_SOLD, "Inventory Adjustment (Gain)")
    elif movement_type is MovementType.adjustment and movement.quantity < 0:
        debit = (COST_OF_GOODS_SOLD, f"Inventory Adjustment (Loss): {item_name}")
        credit = (INVENTORY, "Inventory Adjustment (Loss)")
    else:
        return None

    return [
        JournalLineIn(account_code=debit[0], description=debit[1], debit=amount),
        JournalLineIn(account_code=credit[0], description=credit[1], credit=amount),
    ]


class AccountingSyncService:
    """Service posting journal entries for sales and inventory movements."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.ledger = LedgerService(session)
        self.entries = JournalEntryRepository(session)
        self.orders = OrderRepository(session)
        self.items = InventoryItemRepository(session)
        self.movements = InventoryMovementRepository(session)
        self.activity = ActivityLogRepository(session)

    async def _unsynced_orders(self, start: Optional[date] = None, end: Optional[date] = None):
        synced = await self.entries.references_with_prefix("POS-")
        orders = await self.orders.list_completed(
            start=day_bounds(start)[0] if start else None,
            end=day_bounds(end)[1] if end else None,
        )
        return [order for order in orders if sale_reference(order.id) not in synced]

    async def _unsynced_movements(self) -> List[InventoryMovement]:
        synced = await self.entries.references_with_prefix("INV-")
        return [
            movement
            for movement in await self.movements.list_costed()
            if movement.movement_type != MovementType.transfer.value
            and movement_reference(movement.id) not in synced
        ]

    async def sync_sales(self, start: Optional[date] = None, end: Optional[date] = None) -> SyncResult:
        """
        Post an entry for every completed order not yet in the ledger.

        Orders whose lines add up to zero or less are skipped. A failing
        order is logged and skipped without affecting the others.

        Args:
            start: First order date included
            end: Last order date included
        """
        pending = await self._unsynced_orders(start, end)
        lines_by_order = await self.orders.get_items_for_orders([order.id for order in pending])
        synced = 0
        for order in pending:
            amount = round(sum(item.quantity * item.price for item in lines_by_order.get(order.id, [])), 2)
            if amount <= 0:
                continue
            try:
                await self.ledger.post_entry(
                    entry_date=order.timestamp.date(),
                    description=f"POS Sale - Order #{order.id}",
                    lines=[
                        JournalLineIn(account_code=CASH, description="POS Sale Receipt", debit=amount),
                        JournalLineIn(account_code=SALES_REVENUE, description="POS Sale", credit=amount),
                    ],
                    entry_type=EntryType.sales,
                    reference=sale_reference(order.id),
                    status=JournalStatus.posted,
                )
                synced += 1
            except LoungeOSError as e:
                logger.warning(f"Skipping sales sync for order {order.id}: {e}")
        await self._finish("sales", synced, len(pending))
        return SyncResult(synced=synced, total=len(pending))

    async def sync_inventory(self) -> SyncResult:
        """Post an entry for every costed movement not yet in the ledger."""
        pending = await self._unsynced_movements()
        names: Dict[int, str] = {
            item.id: item.name for item in await self.items.get_many(sorted({m.item_id for m in pending}))
        }
        synced = 0
        for movement in pending:
            item_name = names.get(movement.item_id, f"Item #{movement.item_id}")
            lines = movement_lines(movement, item_name)
            if lines is None:
                continue
            try:
                await self.ledger.post_entry(
                    entry_date=movement.movement_date.date(),
                    description=f"Inventory {movement.movement_type}: {item_name} - {movement.notes or ''}",
                    lines=lines,
                    entry_type=EntryType.general,
                    reference=movement_reference(movement.id),
                    status=JournalStatus.posted,
                )
                synced += 1
            except LoungeOSError as e:
                logger.warning(f"Skipping inventory sync for movement {movement.id}: {e}")
        await self._finish("inventory", synced, len(pending))
        return SyncResult(synced=synced, total=len(pending))

    async def _finish(self, source: str, synced: int, total: int) -> None:
        try:
            if synced:
                await self.activity.record(None, "ACCOUNTING_SYNC", f"Synced {synced} of {total} {source} records")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info(f"Accounting sync ({source}): {synced}/{total} records posted")
        log_sync(source, synced, total)

    async def sync_all(self, start: Optional[date] = None, end: Optional[date] = None) -> SyncAllResult:
        sales = await self.sync_sales(start, end)
        inventory = await self.sync_inventory()
        return SyncAllResult(
            sales=sales,
            inventory=inventory,
            total_synced=sales.synced + inventory.synced,
            total_available=sales.total + inventory.total,
        )

    async def status(self) -> SyncStatus:
        orders = len(await self._unsynced_orders())
        movements = len(await self._unsynced_movements())
        return SyncStatus(unsynced_orders=orders, unsynced_inventory=movements, total_unsynced=orders + movements)
