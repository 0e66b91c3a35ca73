"""
Financial reports and the accounting dashboard.

Reports read posted (non-draft) journal entries only. Account balances below
one cent are left out.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.base import utc_now
from loungeos.core.database.repositories.accounting import JournalEntryRepository
from loungeos.core.database.repositories.inventory import InventoryMovementRepository
from loungeos.core.database.repositories.orders import OrderRepository
from loungeos.core.models.domain import AccountType

from .accounting import BALANCE_TOLERANCE
from .periods import MONTH_NAMES, last_months, month_bounds, percent_change, shift_month


def _balances(rows: List[Dict[str, Any]], credit_normal: bool) -> List[Dict[str, Any]]:
    balances = []
    for row in rows:
        balance = row["credit"] - row["debit"] if credit_normal else row["debit"] - row["credit"]
        if abs(balance) <= BALANCE_TOLERANCE:
            continue
        balances.append(
            {
                "account_code": row["code"],
                "account_name": row["name"],
                "account_type": row["account_type"],
                "balance": round(balance, 2),
            }
        )
    return balances


def _absolute(balances: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{**balance, "balance": abs(balance["balance"])} for balance in balances]


def _total(balances: List[Dict[str, Any]]) -> float:
    return round(sum(balance["balance"] for balance in balances), 2)


class ReportService:
    """Service producing profit & loss, balance sheet and cash flow reports."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.entries = JournalEntryRepository(session)
        self.orders = OrderRepository(session)
        self.movements = InventoryMovementRepository(session)

    async def profit_loss(self, start: date, end: date) -> Dict[str, Any]:
        """
        Profit and loss over an inclusive date range.

        Revenue balances are credit − debit; expense balances are reported
        as absolute values.
        """
        rows = await self.entries.account_totals(
            [AccountType.revenue.value, AccountType.expense.value], start=start, end=end
        )
        balances = _balances(rows, credit_normal=True)
        revenue = [b for b in balances if b["account_type"] == AccountType.revenue.value]
        expenses = _absolute([b for b in balances if b["account_type"] == AccountType.expense.value])
        total_revenue = _total(revenue)
        total_expenses = _total(expenses)
        return {
            "period": {"start": start.isoformat(), "end": end.isoformat()},
            "revenue": revenue,
            "expenses": expenses,
            "totalRevenue": total_revenue,
            "totalExpenses": total_expenses,
            "netIncome": round(total_revenue - total_expenses, 2),
        }

    async def balance_sheet(self, as_of: date) -> Dict[str, Any]:
        """Balance sheet as of a date (inclusive). Balances are debit − credit."""
        rows = await self.entries.account_totals(
            [AccountType.asset.value, AccountType.liability.value, AccountType.equity.value], end=as_of
        )
        balances = _balances(rows, credit_normal=False)
        assets = [b for b in balances if b["account_type"] == AccountType.asset.value]
        liabilities = _absolute([b for b in balances if b["account_type"] == AccountType.liability.value])
        equity = _absolute([b for b in balances if b["account_type"] == AccountType.equity.value])
        return {
            "asOfDate": as_of.isoformat(),
            "assets": assets,
            "liabilities": liabilities,
            "equity": equity,
            "totalAssets": _total(assets),
            "totalLiabilities": _total(liabilities),
            "totalEquity": _total(equity),
        }

    async def cash_flow(self, start: date, end: date) -> Dict[str, Any]:
        """Cash flow over an inclusive date range, from lines on the cash account."""
        operating = [
            {"description": row["description"] or "Cash transaction", "amount": round(row["amount"], 2)}
            for row in await self.entries.cash_movements(start, end)
        ]
        net = round(sum(row["amount"] for row in operating), 2)
        beginning = round(await self.entries.cash_balance_before(start), 2)
        return {
            "period": {"start": start.isoformat(), "end": end.isoformat()},
            "operating": operating,
            "investing": [],
            "financing": [],
            "netCashFlow": net,
            "beginningCash": beginning,
            "endingCash": round(beginning + net, 2),
        }

    async def _month_figures(self, year: int, month: int) -> Dict[str, float]:
        start, end = month_bounds(year, month)
        revenue = await self.orders.completed_item_revenue(start, end)
        expenses = await self.movements.out_cost(start, end)
        profit = revenue - expenses
        return {
            "revenue": revenue,
            "expenses": expenses,
            "profit": profit,
            "margin": profit / revenue * 100 if revenue > 0 else 0.0,
        }

    async def accounting_dashboard(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Month-over-month figures and a 6-month chart.

        Revenue is the value of completed order lines; expenses are the cost
        of OUT stock movements.
        """
        now = now or utc_now()
        current = await self._month_figures(now.year, now.month)
        previous = await self._month_figures(*shift_month(now.year, now.month, -1))

        chart = []
        for year, month in last_months(now, 6):
            figures = await self._month_figures(year, month)
            chart.append(
                {
                    "month": MONTH_NAMES[month - 1][:3],
                    "revenue": round(figures["revenue"]),
                    "expenses": round(figures["expenses"]),
                }
            )

        return {
            "currentMonth": {
                "netProfit": round(current["profit"], 2),
                "totalRevenue": round(current["revenue"], 2),
                "totalExpenses": round(current["expenses"], 2),
                "profitMargin": round(current["margin"], 2),
            },
            "changes": {
                "revenue": percent_change(current["revenue"], previous["revenue"]),
                "expenses": percent_change(current["expenses"], previous["expenses"]),
                "profit": percent_change(current["profit"], previous["profit"]),
                "profitMargin": round(current["margin"] - previous["margin"], 2) if previous["margin"] > 0 else 0.0,
            },
            "chartData": chart,
        }
