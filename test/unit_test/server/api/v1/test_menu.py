import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _category(client: AsyncClient, name: str, is_food: bool = False) -> dict:
    response = await client.post("/api/v1/categories", json={"name": name, "is_food": is_food})
    assert response.status_code == 201
    return response.json()


async def _product(client: AsyncClient, name: str, price: float, category: str, quantity: int = 10) -> dict:
    response = await client.post(
        "/api/v1/products", json={"name": name, "price": price, "category": category, "quantity": quantity}
    )
    assert response.status_code == 201
    return response.json()


async def test_categories_crud(client: AsyncClient):
    drinks = await _category(client, "Drinks")
    await _category(client, "Burgers", is_food=True)

    response = await client.get("/api/v1/categories")
    assert [category["name"] for category in response.json()] == ["Burgers", "Drinks"]

    response = await client.put(f"/api/v1/categories/{drinks['id']}", json={"name": "Cocktails"})
    assert response.status_code == 200
    assert response.json() == {"id": drinks["id"], "name": "Cocktails", "is_food": False}

    response = await client.delete(f"/api/v1/categories/{drinks['id']}")
    assert response.status_code == 204
    assert [category["name"] for category in (await client.get("/api/v1/categories")).json()] == ["Burgers"]


async def test_category_name_conflicts(client: AsyncClient):
    await _category(client, "Drinks")
    burgers = await _category(client, "Burgers", is_food=True)

    response = await client.post("/api/v1/categories", json={"name": "Drinks"})
    assert response.status_code == 409

    response = await client.put(f"/api/v1/categories/{burgers['id']}", json={"name": "Drinks"})
    assert response.status_code == 409


async def test_unknown_category(client: AsyncClient):
    assert (await client.put("/api/v1/categories/999", json={"name": "X"})).status_code == 404
    assert (await client.delete("/api/v1/categories/999")).status_code == 404


async def test_products_crud(client: AsyncClient):
    await _category(client, "Drinks")
    cola = await _product(client, "Cola", 2.5, "Drinks")
    assert cola["quantity"] == 10

    response = await client.get(f"/api/v1/products/{cola['id']}")
    assert response.status_code == 200
    assert response.json()["price"] == 2.5

    response = await client.put(f"/api/v1/products/{cola['id']}", json={"price": 3.0})
    assert response.status_code == 200
    assert response.json()["price"] == 3.0
    assert response.json()["name"] == "Cola"

    response = await client.delete(f"/api/v1/products/{cola['id']}")
    assert response.status_code == 204
    assert (await client.get(f"/api/v1/products/{cola['id']}")).status_code == 404


async def test_list_products_by_category(client: AsyncClient):
    await _product(client, "Cola", 2.5, "Drinks")
    await _product(client, "Burger", 9.0, "Burgers")
    await _product(client, "Beer", 4.0, "Drinks")

    response = await client.get("/api/v1/products")
    assert [product["name"] for product in response.json()] == ["Beer", "Burger", "Cola"]

    response = await client.get("/api/v1/products", params={"category": "Drinks"})
    assert [product["name"] for product in response.json()] == ["Beer", "Cola"]


async def test_product_negative_price_rejected(client: AsyncClient):
    response = await client.post("/api/v1/products", json={"name": "Cola", "price": -1, "category": "Drinks"})
    assert response.status_code == 422


async def test_update_stock(client: AsyncClient):
    cola = await _product(client, "Cola", 2.5, "Drinks")
    response = await client.post("/api/v1/products/update-stock", json={"product_id": cola["id"], "quantity": 42})
    assert response.status_code == 200
    assert response.json()["quantity"] == 42

    response = await client.post("/api/v1/products/update-stock", json={"product_id": 999, "quantity": 1})
    assert response.status_code == 404


async def test_product_writes_are_logged(client: AsyncClient):
    cola = await _product(client, "Cola", 2.5, "Drinks")
    await client.delete(f"/api/v1/products/{cola['id']}")
    actions = {entry["action"] for entry in (await client.get("/api/v1/activity-logs")).json()}
    assert {"PRODUCT_CREATE", "PRODUCT_DELETE"} <= actions
