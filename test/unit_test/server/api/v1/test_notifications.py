import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _notify(client: AsyncClient, title: str, user_id=None, type_: str = "info") -> dict:
    response = await client.post(
        "/api/v1/notifications",
        json={"title": title, "description": f"{title} details", "type": type_, "user_id": user_id},
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_notification(client: AsyncClient):
    notification = await _notify(client, "Low stock", type_="warning")
    assert notification["id"].startswith("notif_")
    assert notification["is_read"] is False
    assert notification["type"] == "warning"


async def test_list_for_user_includes_broadcasts(client: AsyncClient):
    await _notify(client, "For everyone")
    await _notify(client, "For user 1", user_id=1)
    await _notify(client, "For user 2", user_id=2)

    titles = {n["title"] for n in (await client.get("/api/v1/notifications", params={"user_id": 1})).json()}
    assert titles == {"For everyone", "For user 1"}
    assert len((await client.get("/api/v1/notifications")).json()) == 3


async def test_mark_read(client: AsyncClient):
    notification = await _notify(client, "Order ready")
    response = await client.patch(f"/api/v1/notifications/{notification['id']}/read")
    assert response.status_code == 200
    assert response.json()["is_read"] is True

    response = await client.patch("/api/v1/notifications/notif_missing/read")
    assert response.status_code == 404


async def test_mark_all_read_and_clear(client: AsyncClient):
    await _notify(client, "One")
    await _notify(client, "Two")

    response = await client.post("/api/v1/notifications/read-all")
    assert response.status_code == 200
    assert all(n["is_read"] for n in (await client.get("/api/v1/notifications")).json())

    assert (await client.delete("/api/v1/notifications")).status_code == 204
    assert (await client.get("/api/v1/notifications")).json() == []
