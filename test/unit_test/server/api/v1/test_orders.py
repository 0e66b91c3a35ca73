from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import AsyncClient

from loungeos.server.services import orders as order_service

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def menu(client: AsyncClient) -> dict:
    await client.post("/api/v1/categories", json={"name": "Burgers", "is_food": True})
    await client.post("/api/v1/categories", json={"name": "Drinks", "is_food": False})
    burger = (
        await client.post("/api/v1/products", json={"name": "Burger", "price": 10.0, "category": "Burgers", "quantity": 20})
    ).json()
    cola = (
        await client.post("/api/v1/products", json={"name": "Cola", "price": 2.5, "category": "Drinks", "quantity": 50})
    ).json()
    return {"burger": burger, "cola": cola}


async def _order(client: AsyncClient, items: list, table: str = "T1", **extra) -> dict:
    response = await client.post("/api/v1/orders", json={"table_name": table, "items": items, **extra})
    assert response.status_code == 201, response.text
    return response.json()


async def _status(client: AsyncClient, order_id: str, status: str, **extra):
    return await client.patch(f"/api/v1/orders/{order_id}/status", json={"status": status, **extra})


def _quantities(order: dict) -> dict:
    return {item["name"]: item["quantity"] for item in order["items"]}


async def test_create_order_computes_totals_and_takes_stock(client: AsyncClient, menu: dict):
    order = await _order(
        client,
        [{"product_id": menu["burger"]["id"], "quantity": 2}, {"product_id": menu["cola"]["id"], "quantity": 3}],
        tax=1.5,
        discount=2.0,
        discount_name="Happy hour",
    )
    assert order["id"].startswith("ORD-")
    assert order["status"] == "Pending"
    assert order["subtotal"] == pytest.approx(27.5)
    assert order["total"] == pytest.approx(27.0)
    assert _quantities(order) == {"Burger": 2, "Cola": 3}

    burger = (await client.get(f"/api/v1/products/{menu['burger']['id']}")).json()
    assert burger["quantity"] == 18


async def test_create_order_with_unknown_product_writes_nothing(client: AsyncClient, menu: dict):
    response = await client.post(
        "/api/v1/orders",
        json={"table_name": "T1", "items": [{"product_id": menu["burger"]["id"]}, {"product_id": 999}]},
    )
    assert response.status_code == 404
    assert (await client.get("/api/v1/orders")).json() == []
    burger = (await client.get(f"/api/v1/products/{menu['burger']['id']}")).json()
    assert burger["quantity"] == 20


async def test_create_order_requires_items(client: AsyncClient):
    response = await client.post("/api/v1/orders", json={"table_name": "T1", "items": []})
    assert response.status_code == 422


async def test_order_with_inventory_item_line(client: AsyncClient):
    item = (
        await client.post(
            "/api/v1/inventory/items",
            json={
                "name": "Bottled Water",
                "sku": "WAT-1",
                "category": "Beverages",
                "unit": "bottle",
                "current_stock": 12,
                "cost_per_unit": 0.5,
            },
        )
    ).json()
    order = await _order(client, [{"product_id": item["id"], "item_type": "inventory_item", "quantity": 2, "price": 1.5}])
    assert order["items"][0]["name"] == "Bottled Water"
    assert order["total"] == pytest.approx(3.0)

    item = (await client.get(f"/api/v1/inventory/items/{item['id']}")).json()
    assert item["current_stock"] == 10


async def test_get_and_list_orders(client: AsyncClient, menu: dict):
    first = await _order(client, [{"product_id": menu["cola"]["id"]}])
    await _order(client, [{"product_id": menu["burger"]["id"]}], table="T2")
    await _status(client, first["id"], "In Progress")

    assert len((await client.get("/api/v1/orders")).json()) == 2
    in_progress = (await client.get("/api/v1/orders", params={"status": "In Progress"})).json()
    assert [order["id"] for order in in_progress] == [first["id"]]

    response = await client.get(f"/api/v1/orders/{first['id']}")
    assert response.status_code == 200
    assert response.json()["table_name"] == "T1"

    assert (await client.get("/api/v1/orders/ORD-missing")).status_code == 404


async def test_update_order_replaces_lines_without_touching_stock(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["burger"]["id"], "quantity": 1}])
    response = await client.put(
        f"/api/v1/orders/{order['id']}",
        json={"table_name": "T9", "items": [{"product_id": menu["cola"]["id"], "quantity": 4}]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["table_name"] == "T9"
    assert _quantities(body) == {"Cola": 4}
    assert body["subtotal"] == pytest.approx(10.0)
    assert body["total"] == pytest.approx(10.0)

    cola = (await client.get(f"/api/v1/products/{menu['cola']['id']}")).json()
    assert cola["quantity"] == 50


async def test_update_order_financials_only(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["burger"]["id"], "quantity": 2}])
    response = await client.put(f"/api/v1/orders/{order['id']}", json={"discount": 5.0})
    body = response.json()
    assert body["subtotal"] == pytest.approx(20.0)
    assert body["total"] == pytest.approx(15.0)
    assert _quantities(body) == {"Burger": 2}


async def test_status_lifecycle(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"]}])

    for status in ("In Progress", "Ready", "Completed"):
        response = await _status(client, order["id"], status)
        assert response.status_code == 200
        assert response.json()["status"] == status

    response = await _status(client, order["id"], "Pending")
    assert response.status_code == 409


async def test_status_can_move_one_column_back(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"]}])
    await _status(client, order["id"], "In Progress")
    response = await _status(client, order["id"], "Pending")
    assert response.status_code == 200


async def test_status_cannot_be_reapplied(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"]}])
    response = await _status(client, order["id"], "Pending")
    assert response.status_code == 409

    await _status(client, order["id"], "In Progress")
    response = await _status(client, order["id"], "In Progress")
    assert response.status_code == 409

    activity = (await client.get("/api/v1/activity-logs")).json()
    assert sum(1 for entry in activity if entry["action"] == "ORDER_STATUS") == 1


async def test_status_cannot_skip_columns(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"]}])
    response = await _status(client, order["id"], "Completed")
    assert response.status_code == 409
    assert "Pending" in response.json()["detail"]


async def test_cancel_records_who_and_why(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"]}])
    response = await _status(client, order["id"], "Canceled", cancelled_by=7, cancellation_reason="Customer left")
    assert response.status_code == 200
    body = response.json()
    assert body["cancelled_by"] == 7
    assert body["cancellation_reason"] == "Customer left"
    assert body["cancelled_at"] is not None

    response = await _status(client, order["id"], "Canceled")
    assert response.status_code == 409


async def test_delete_order(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"]}])
    assert (await client.delete(f"/api/v1/orders/{order['id']}")).status_code == 204
    assert (await client.get(f"/api/v1/orders/{order['id']}")).status_code == 404
    assert (await client.delete(f"/api/v1/orders/{order['id']}")).status_code == 404


async def test_split_order(client: AsyncClient, menu: dict):
    order = await _order(
        client,
        [{"product_id": menu["burger"]["id"], "quantity": 2}, {"product_id": menu["cola"]["id"], "quantity": 2}],
    )
    response = await client.post(
        "/api/v1/orders/split",
        json={"order_id": order["id"], "items": [{"product_id": menu["burger"]["id"], "quantity": 1}]},
    )
    assert response.status_code == 200
    result = response.json()

    new_order = result["new_order"]
    assert new_order["id"].endswith("-SPLIT")
    assert new_order["status"] == "Pending"
    assert new_order["table_name"] == "T1"
    assert _quantities(new_order) == {"Burger": 1}
    assert new_order["total"] == pytest.approx(10.0)

    updated = result["updated_order"]
    assert _quantities(updated) == {"Burger": 1, "Cola": 2}
    assert updated["subtotal"] == pytest.approx(15.0)


async def test_split_every_line_deletes_original(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"], "quantity": 2}])
    response = await client.post(
        "/api/v1/orders/split",
        json={"order_id": order["id"], "items": [{"product_id": menu["cola"]["id"], "quantity": 2}]},
    )
    assert response.status_code == 200
    assert response.json()["updated_order"] is None
    assert (await client.get(f"/api/v1/orders/{order['id']}")).status_code == 404


async def test_split_more_than_ordered(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"], "quantity": 1}])
    response = await client.post(
        "/api/v1/orders/split",
        json={"order_id": order["id"], "items": [{"product_id": menu["cola"]["id"], "quantity": 3}]},
    )
    assert response.status_code == 400

    response = await client.post(
        "/api/v1/orders/split",
        json={"order_id": order["id"], "items": [{"product_id": menu["burger"]["id"], "quantity": 1}]},
    )
    assert response.status_code == 400


async def test_merge_orders_consolidates_lines(client: AsyncClient, menu: dict):
    source = await _order(
        client,
        [{"product_id": menu["cola"]["id"], "quantity": 1}, {"product_id": menu["burger"]["id"], "quantity": 1}],
        table="T2",
    )
    target = await _order(client, [{"product_id": menu["cola"]["id"], "quantity": 2}])

    response = await client.post(
        "/api/v1/orders/merge", json={"from_order_id": source["id"], "to_order_id": target["id"]}
    )
    assert response.status_code == 200
    merged = response.json()
    assert merged["id"] == target["id"]
    assert _quantities(merged) == {"Cola": 3, "Burger": 1}
    assert merged["subtotal"] == pytest.approx(17.5)
    assert (await client.get(f"/api/v1/orders/{source['id']}")).status_code == 404


async def test_split_item_not_on_order(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"], "quantity": 2}])
    response = await client.post(
        "/api/v1/orders/split",
        json={"order_id": order["id"], "items": [{"product_id": menu["burger"]["id"], "quantity": 1}]},
    )
    assert response.status_code == 400
    assert "not on order" in response.json()["detail"]

    unchanged = (await client.get(f"/api/v1/orders/{order['id']}")).json()
    assert _quantities(unchanged) == {"Cola": 2}


async def test_split_in_same_millisecond_gets_fresh_id(client: AsyncClient, menu: dict, monkeypatch):
    order = await _order(client, [{"product_id": menu["cola"]["id"], "quantity": 3}])
    monkeypatch.setattr(order_service, "time", SimpleNamespace(time=lambda: 1767225600.0))

    ids = []
    for _ in range(2):
        response = await client.post(
            "/api/v1/orders/split",
            json={"order_id": order["id"], "items": [{"product_id": menu["cola"]["id"], "quantity": 1}]},
        )
        assert response.status_code == 200, response.text
        ids.append(response.json()["new_order"]["id"])

    assert ids == ["ORD-1767225600000-SPLIT", "ORD-1767225600001-SPLIT"]


async def test_merge_moves_other_lines_separately(client: AsyncClient, menu: dict):
    source = await _order(
        client,
        [{"product_id": menu["cola"]["id"], "quantity": 1}, {"product_id": menu["burger"]["id"], "quantity": 2}],
        table="T2",
    )
    target = await _order(client, [{"product_id": menu["cola"]["id"], "quantity": 2}])

    response = await client.post(
        "/api/v1/orders/merge", json={"from_order_id": source["id"], "to_order_id": target["id"]}
    )
    assert response.status_code == 200
    lines = response.json()["items"]
    assert len(lines) == 2
    by_name = {line["name"]: line for line in lines}
    assert by_name["Cola"]["quantity"] == 3
    assert by_name["Burger"]["quantity"] == 2
    assert by_name["Burger"]["price"] == pytest.approx(10.0)


async def test_merge_order_into_itself(client: AsyncClient, menu: dict):
    order = await _order(client, [{"product_id": menu["cola"]["id"]}])
    response = await client.post("/api/v1/orders/merge", json={"from_order_id": order["id"], "to_order_id": order["id"]})
    assert response.status_code == 400


async def test_order_stats(client: AsyncClient, menu: dict):
    done = await _order(client, [{"product_id": menu["burger"]["id"], "quantity": 2}])
    for status in ("In Progress", "Ready", "Completed"):
        await _status(client, done["id"], status)
    dropped = await _order(client, [{"product_id": menu["cola"]["id"]}])
    await _status(client, dropped["id"], "Canceled")
    await _order(client, [{"product_id": menu["cola"]["id"]}])

    response = await client.get("/api/v1/orders/stats")
    assert response.status_code == 200
    stats = response.json()
    assert stats["totalOrders"] == 3
    assert stats["completedOrders"] == 1
    assert stats["canceledOrders"] == 1
    assert stats["totalRevenue"] == pytest.approx(20.0)
    assert [sale["id"] for sale in stats["recentSales"]] == [done["id"]]
    assert stats["topSellingProducts"][0]["name"] == "Burger"
