"""
Home Dashboard Endpoint.
"""

from fastapi import APIRouter

from loungeos.server.services.deps import DashboardServiceDep

router = APIRouter()


@router.get(
    "",
    summary="Dashboard Statistics",
    description="Order totals, sales for today and yesterday, inventory spending, cash flow, "
    "table occupancy, best sellers, recent sales and a 30-day chart.",
)
async def dashboard_stats(service: DashboardServiceDep):
    return await service.stats()
