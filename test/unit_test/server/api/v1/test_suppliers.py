import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_suppliers_crud(client: AsyncClient):
    response = await client.post(
        "/api/v1/suppliers", json={"name": "Fresh Farms", "contact_person": "Jo", "phone": "555-0100"}
    )
    assert response.status_code == 201
    supplier = response.json()
    assert supplier["email"] is None

    response = await client.get(f"/api/v1/suppliers/{supplier['id']}")
    assert response.json()["contact_person"] == "Jo"

    response = await client.put(f"/api/v1/suppliers/{supplier['id']}", json={"email": "orders@fresh.test"})
    assert response.status_code == 200
    assert response.json()["email"] == "orders@fresh.test"
    assert response.json()["phone"] == "555-0100"

    assert len((await client.get("/api/v1/suppliers")).json()) == 1

    response = await client.delete(f"/api/v1/suppliers/{supplier['id']}")
    assert response.status_code == 204
    assert (await client.get("/api/v1/suppliers")).json() == []


async def test_unknown_supplier(client: AsyncClient):
    assert (await client.get("/api/v1/suppliers/999")).status_code == 404
    assert (await client.put("/api/v1/suppliers/999", json={"name": "X"})).status_code == 404
    assert (await client.delete("/api/v1/suppliers/999")).status_code == 404
