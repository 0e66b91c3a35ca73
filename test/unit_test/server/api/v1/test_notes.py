import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _note(client: AsyncClient, title: str, content: str = "Check the ice machine", **extra) -> dict:
    response = await client.post("/api/v1/notes", json={"title": title, "content": content, **extra})
    assert response.status_code == 201, response.text
    return response.json()


async def _titles(client: AsyncClient) -> list:
    return [note["title"] for note in (await client.get("/api/v1/notes")).json()]


async def test_create_note(client: AsyncClient):
    response = await client.post(
        "/api/v1/notes",
        json={"title": "Delivery", "content": "Kegs arrive at 9", "tags": ["bar", "morning"]},
        headers={"X-Actor-Id": "2"},
    )
    assert response.status_code == 201
    note = response.json()
    assert note["tags"] == ["bar", "morning"]
    assert note["user_id"] == 2
    assert note["is_pinned"] is False

    activity = (await client.get("/api/v1/activity-logs")).json()
    assert activity[0]["action"] == "NOTE_CREATE"
    assert activity[0]["details"] == "Created note: Delivery"


async def test_note_requires_title_and_content(client: AsyncClient):
    assert (await client.post("/api/v1/notes", json={"title": "Empty", "content": ""})).status_code == 422
    assert (await client.post("/api/v1/notes", json={"content": "No title"})).status_code == 422


async def test_pinned_notes_first_then_latest(client: AsyncClient):
    first = await _note(client, "First")
    await _note(client, "Second")
    await _note(client, "Third")
    assert await _titles(client) == ["Third", "Second", "First"]

    response = await client.put(f"/api/v1/notes/{first['id']}/pin", json={"is_pinned": True})
    assert response.status_code == 200
    assert response.json()["is_pinned"] is True
    assert response.json()["content"] == "Check the ice machine"
    assert await _titles(client) == ["First", "Third", "Second"]

    await client.put(f"/api/v1/notes/{first['id']}/pin", json={"is_pinned": False})
    assert await _titles(client) == ["First", "Third", "Second"]


async def test_update_note_replaces_fields(client: AsyncClient):
    note = await _note(client, "Old", tags=["a"])
    await _note(client, "Other")

    response = await client.put(
        f"/api/v1/notes/{note['id']}", json={"title": "New", "content": "Rewritten", "tags": ["b", "c"]}
    )
    assert response.status_code == 200
    body = response.json()
    assert (body["title"], body["content"], body["tags"]) == ("New", "Rewritten", ["b", "c"])
    assert await _titles(client) == ["New", "Other"]

    response = await client.put(f"/api/v1/notes/{note['id']}", json={"title": "New"})
    assert response.status_code == 422


async def test_missing_note(client: AsyncClient):
    assert (await client.put("/api/v1/notes/99", json={"title": "x", "content": "y"})).status_code == 404
    assert (await client.put("/api/v1/notes/99/pin", json={"is_pinned": True})).status_code == 404
    assert (await client.delete("/api/v1/notes/99")).status_code == 404


async def test_delete_note(client: AsyncClient):
    note = await _note(client, "Temporary")
    assert (await client.delete(f"/api/v1/notes/{note['id']}")).status_code == 204
    assert await _titles(client) == []

    activity = (await client.get("/api/v1/activity-logs")).json()
    assert activity[0]["details"] == "Deleted note: Temporary"
