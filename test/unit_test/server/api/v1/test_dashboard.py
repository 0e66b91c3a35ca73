from datetime import datetime, timezone

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_empty_dashboard(client: AsyncClient):
    response = await client.get("/api/v1/dashboard-stats")
    assert response.status_code == 200
    stats = response.json()
    assert stats["totalRevenue"] == 0.0
    assert stats["totalOrders"] == 0
    assert stats["activeTables"] == "0 / 0"
    assert stats["salesChange"] == 0.0
    assert stats["staffPerformance"] == []
    assert stats["chartData"] == {"revenue": [], "orders": [], "cashFlow": []}


async def test_dashboard_figures(client: AsyncClient):
    waiter = (
        await client.post("/api/v1/staff", json={"name": "Wendy", "email": "wendy@lounge.test", "role": "Waiter"})
    ).json()
    await client.post("/api/v1/floors", json={"name": "Main Hall"})
    table = (await client.post("/api/v1/tables", json={"name": "T1", "floor": "Main Hall"})).json()
    await client.post("/api/v1/tables", json={"name": "T2", "floor": "Main Hall"})
    await client.put(f"/api/v1/tables/{table['id']}", json={"status": "Occupied"})

    product = (await client.post("/api/v1/products", json={"name": "Burger", "price": 12.5, "category": "Burgers"})).json()
    await client.post(
        "/api/v1/inventory/items",
        json={"sku": "OIL-1", "name": "Oil", "category": "Dry goods", "current_stock": 4, "cost_per_unit": 2.5},
    )

    done = (
        await client.post(
            "/api/v1/orders",
            json={"table_name": "T1", "items": [{"product_id": product["id"], "quantity": 2}], "waiter_id": waiter["id"]},
        )
    ).json()
    for status in ("In Progress", "Ready", "Completed"):
        await client.patch(f"/api/v1/orders/{done['id']}/status", json={"status": status})
    open_order = (
        await client.post("/api/v1/orders", json={"table_name": "T2", "items": [{"product_id": product["id"]}]})
    ).json()
    await client.patch(f"/api/v1/orders/{open_order['id']}/status", json={"status": "In Progress"})

    stats = (await client.get("/api/v1/dashboard-stats")).json()
    assert stats["totalRevenue"] == 25.0
    assert stats["dailySales"] == 25.0
    assert stats["yesterdaySales"] == 0.0
    assert stats["totalSpending"] == 10.0
    assert stats["cashFlow"] == 15.0
    assert stats["totalOrders"] == 2
    assert stats["completedOrders"] == 1
    assert stats["pendingOrders"] == 1
    assert stats["activeTables"] == "1 / 2"
    assert stats["topSellingProducts"][0]["name"] == "Burger"
    assert [sale["id"] for sale in stats["recentSales"]] == [done["id"]]

    (best,) = stats["staffPerformance"]
    assert best["name"] == "Wendy"
    assert best["completed_orders"] == 1
    assert best["total_revenue"] == 25.0

    today = datetime.now(timezone.utc).date().isoformat()
    assert stats["chartData"]["revenue"] == [{"date": today, "value": 25.0}]
    assert stats["chartData"]["orders"] == [{"date": today, "value": 1}]
