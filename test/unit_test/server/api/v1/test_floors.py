import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _floor(client: AsyncClient, name: str = "Main Hall") -> dict:
    response = await client.post("/api/v1/floors", json={"name": name})
    assert response.status_code == 201
    return response.json()


async def _table(client: AsyncClient, name: str, floor: str = "Main Hall", capacity: int = 4) -> dict:
    response = await client.post("/api/v1/tables", json={"name": name, "floor": floor, "capacity": capacity})
    assert response.status_code == 201
    return response.json()


async def test_create_and_list_floors(client: AsyncClient):
    await _floor(client, "Terrace")
    await _floor(client, "Main Hall")
    response = await client.get("/api/v1/floors")
    assert response.status_code == 200
    assert sorted(floor["name"] for floor in response.json()) == ["Main Hall", "Terrace"]


async def test_duplicate_floor_name(client: AsyncClient):
    await _floor(client)
    response = await client.post("/api/v1/floors", json={"name": "Main Hall"})
    assert response.status_code == 409


async def test_delete_floor_with_tables_is_rejected(client: AsyncClient):
    await _floor(client)
    table = await _table(client, "T1")

    response = await client.delete("/api/v1/floors/Main Hall")
    assert response.status_code == 400

    await client.delete(f"/api/v1/tables/{table['id']}")
    response = await client.delete("/api/v1/floors/Main Hall")
    assert response.status_code == 204


async def test_delete_unknown_floor(client: AsyncClient):
    response = await client.delete("/api/v1/floors/Basement")
    assert response.status_code == 404


async def test_create_table_starts_available(client: AsyncClient):
    floor = await _floor(client)
    table = await _table(client, "T1", capacity=6)
    assert table["status"] == "Available"
    assert table["capacity"] == 6
    assert table["floor"] == "Main Hall"
    assert table["floor_id"] == floor["id"]


async def test_create_table_on_unknown_floor(client: AsyncClient):
    response = await client.post("/api/v1/tables", json={"name": "T1", "floor": "Nowhere"})
    assert response.status_code == 404


async def test_duplicate_table_name(client: AsyncClient):
    await _floor(client)
    await _table(client, "T1")
    response = await client.post("/api/v1/tables", json={"name": "T1", "floor": "Main Hall"})
    assert response.status_code == 409


async def test_update_table_moves_floor_and_status(client: AsyncClient):
    await _floor(client)
    await _floor(client, "Terrace")
    table = await _table(client, "T1")

    response = await client.put(f"/api/v1/tables/{table['id']}", json={"floor": "Terrace", "status": "Reserved"})
    assert response.status_code == 200
    body = response.json()
    assert body["floor"] == "Terrace"
    assert body["status"] == "Reserved"

    response = await client.put(f"/api/v1/tables/{table['id']}", json={"capacity": 2})
    assert response.json()["floor"] == "Terrace"
    assert response.json()["capacity"] == 2


async def test_update_unknown_table(client: AsyncClient):
    response = await client.put("/api/v1/tables/999", json={"capacity": 2})
    assert response.status_code == 404


async def test_table_stats(client: AsyncClient):
    await _floor(client)
    first = await _table(client, "T1")
    await _table(client, "T2")
    await _table(client, "T3")
    await client.put(f"/api/v1/tables/{first['id']}", json={"status": "Occupied"})

    response = await client.get("/api/v1/tables/stats")
    assert response.status_code == 200
    assert response.json() == {
        "totalTables": 3,
        "occupiedTables": 1,
        "availableTables": 2,
        "activeTables": "1 / 3",
    }


async def test_list_tables_with_floor_name(client: AsyncClient):
    await _floor(client)
    await _table(client, "T1")
    response = await client.get("/api/v1/tables")
    (table,) = response.json()
    assert table["floor"] == "Main Hall"
