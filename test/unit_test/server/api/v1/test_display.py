import pytest
import pytest_asyncio
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def mixed_order(client: AsyncClient) -> dict:
    await client.post("/api/v1/categories", json={"name": "Burgers", "is_food": True})
    await client.post("/api/v1/categories", json={"name": "Drinks"})
    burger = (await client.post("/api/v1/products", json={"name": "Burger", "price": 10, "category": "Burgers"})).json()
    cola = (await client.post("/api/v1/products", json={"name": "Cola", "price": 2, "category": "Drinks"})).json()
    response = await client.post(
        "/api/v1/orders",
        json={"table_name": "T1", "items": [{"product_id": burger["id"]}, {"product_id": cola["id"]}]},
    )
    return response.json()


async def test_kitchen_board_shows_food_lines(client: AsyncClient, mixed_order: dict):
    response = await client.get("/api/v1/display/kitchen")
    assert response.status_code == 200
    board = response.json()
    assert board["board"] == "kitchen"
    assert set(board["columns"]) == {"Pending", "In Progress", "Ready", "Canceled"}
    (order,) = board["columns"]["Pending"]
    assert [item["name"] for item in order["items"]] == ["Burger"]


async def test_bar_board_shows_other_lines(client: AsyncClient, mixed_order: dict):
    board = (await client.get("/api/v1/display/bar")).json()
    (order,) = board["columns"]["Pending"]
    assert [item["name"] for item in order["items"]] == ["Cola"]


async def test_completed_orders_leave_the_boards(client: AsyncClient, mixed_order: dict):
    for status in ("In Progress", "Ready", "Completed"):
        await client.patch(f"/api/v1/orders/{mixed_order['id']}/status", json={"status": status})

    board = (await client.get("/api/v1/display/kitchen")).json()
    assert all(orders == [] for orders in board["columns"].values())


async def test_board_moves_with_status(client: AsyncClient, mixed_order: dict):
    await client.patch(f"/api/v1/orders/{mixed_order['id']}/status", json={"status": "In Progress"})
    board = (await client.get("/api/v1/display/bar")).json()
    assert board["columns"]["Pending"] == []
    assert [order["id"] for order in board["columns"]["In Progress"]] == [mixed_order["id"]]


async def test_board_without_orders(client: AsyncClient):
    board = (await client.get("/api/v1/display/kitchen")).json()
    assert all(orders == [] for orders in board["columns"].values())
