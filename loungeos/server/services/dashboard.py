"""Home dashboard figures."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.base import utc_now
from loungeos.core.database.repositories.floors import DiningTableRepository
from loungeos.core.database.repositories.inventory import InventoryItemRepository
from loungeos.core.database.repositories.orders import OrderRepository
from loungeos.core.models.domain import OrderStatus, TableStatus

from .periods import day_bounds, percent_change
from .staff import StaffService

CHART_DAYS = 30


class DashboardService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.orders = OrderRepository(session)
        self.items = InventoryItemRepository(session)
        self.tables = DiningTableRepository(session)

    async def _chart(self, now: datetime, spending: float) -> Dict[str, List[Dict[str, Any]]]:
        revenue: Dict[str, float] = {}
        orders: Dict[str, set] = {}
        for line in await self.orders.completed_lines_since(now - timedelta(days=CHART_DAYS)):
            day = line["timestamp"].date().isoformat()
            revenue[day] = revenue.get(day, 0.0) + line["amount"]
            orders.setdefault(day, set()).add(line["order_id"])

        days = sorted(revenue)
        daily_spending = spending / CHART_DAYS
        return {
            "revenue": [{"date": day, "value": round(revenue[day], 2)} for day in days],
            "orders": [{"date": day, "value": len(orders[day])} for day in days],
            "cashFlow": [{"date": day, "value": round(revenue[day] - daily_spending, 2)} for day in days],
        }

    async def stats(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Collect the home dashboard figures.

        Sales figures count completed order lines. Inventory spending is the
        current stock valued at cost; cash flow is revenue minus that spending.
        """
        now = now or utc_now()
        today = now.date()

        total_revenue = await self.orders.completed_item_revenue()
        daily_sales = await self.orders.completed_item_revenue(*day_bounds(today))
        yesterday_sales = await self.orders.completed_item_revenue(*day_bounds(today - timedelta(days=1)))
        spending = (await self.items.stock_counts())["total_value"]
        cash_flow = total_revenue - spending

        occupied = await self.tables.count_by_status(TableStatus.occupied.value)
        total_tables = await self.tables.count_by_status()
        performance = await StaffService(self.session).performance()

        return {
            "totalRevenue": round(total_revenue, 2),
            "totalSpending": round(spending, 2),
            "totalOrders": await self.orders.count(),
            "completedOrders": await self.orders.count([OrderStatus.completed.value]),
            "canceledOrders": await self.orders.count([OrderStatus.canceled.value]),
            "pendingOrders": await self.orders.count([OrderStatus.pending.value, OrderStatus.in_progress.value]),
            "activeTables": f"{occupied} / {total_tables}",
            "topSellingProducts": await self.orders.top_products(5),
            "recentSales": await self.orders.recent_completed(10),
            "dailySales": round(daily_sales, 2),
            "yesterdaySales": round(yesterday_sales, 2),
            "salesChange": percent_change(daily_sales, yesterday_sales),
            "cashFlow": round(cash_flow, 2),
            "cashFlowChange": percent_change(cash_flow, yesterday_sales - spending),
            "staffPerformance": [entry.model_dump() for entry in performance[:3]],
            "chartData": await self._chart(now, spending),
        }
