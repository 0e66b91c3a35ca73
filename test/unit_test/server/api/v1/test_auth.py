import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

ADMIN = {"name": "Ada Admin", "email": "ada@lounge.test", "password": "s3cret!"}


async def _setup_admin(client: AsyncClient) -> dict:
    response = await client.post("/api/v1/auth/setup", json=ADMIN)
    assert response.status_code == 201
    return response.json()


async def test_setup_check_before_and_after_setup(client: AsyncClient):
    response = await client.get("/api/v1/auth/setup-check")
    assert response.status_code == 200
    assert response.json() == {"is_setup": False}

    await _setup_admin(client)

    response = await client.get("/api/v1/auth/setup-check")
    assert response.json() == {"is_setup": True}


async def test_setup_creates_super_admin_without_password(client: AsyncClient):
    admin = await _setup_admin(client)
    assert admin["role"] == "Super Admin"
    assert admin["status"] == "Active"
    assert admin["force_password_change"] is False
    assert "password" not in admin


async def test_setup_only_allowed_once(client: AsyncClient):
    await _setup_admin(client)
    response = await client.post(
        "/api/v1/auth/setup", json={"name": "Other", "email": "other@lounge.test", "password": "another1"}
    )
    assert response.status_code == 400
    assert "already" in response.json()["detail"]


async def test_login_success(client: AsyncClient):
    admin = await _setup_admin(client)
    response = await client.post("/api/v1/auth/login", json={"email": ADMIN["email"], "password": ADMIN["password"]})
    assert response.status_code == 200
    assert response.json()["id"] == admin["id"]

    activity = (await client.get("/api/v1/activity-logs")).json()
    assert any(entry["action"] == "LOGIN" for entry in activity)


async def test_login_wrong_password(client: AsyncClient):
    await _setup_admin(client)
    response = await client.post("/api/v1/auth/login", json={"email": ADMIN["email"], "password": "wrong"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


async def test_login_unknown_email(client: AsyncClient):
    response = await client.post("/api/v1/auth/login", json={"email": "ghost@lounge.test", "password": "whatever"})
    assert response.status_code == 401


async def test_new_staff_must_change_default_password(client: AsyncClient):
    await client.post("/api/v1/staff", json={"name": "Wendy", "email": "wendy@lounge.test", "role": "Waiter"})

    response = await client.post("/api/v1/auth/login", json={"email": "wendy@lounge.test", "password": "password123"})
    assert response.status_code == 200
    assert response.json()["force_password_change"] is True

    response = await client.post(
        "/api/v1/auth/reset-password", json={"email": "wendy@lounge.test", "new_password": "brandnew"}
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Password updated successfully"}

    response = await client.post("/api/v1/auth/login", json={"email": "wendy@lounge.test", "password": "password123"})
    assert response.status_code == 401

    response = await client.post("/api/v1/auth/login", json={"email": "wendy@lounge.test", "password": "brandnew"})
    assert response.status_code == 200
    assert response.json()["force_password_change"] is False


async def test_reset_password_unknown_email(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/reset-password", json={"email": "ghost@lounge.test", "new_password": "brandnew"}
    )
    assert response.status_code == 404


async def test_reset_password_too_short(client: AsyncClient):
    response = await client.post("/api/v1/auth/reset-password", json={"email": "a@b.c", "new_password": "123"})
    assert response.status_code == 422


async def test_setup_password_longer_than_bcrypt_accepts(client: AsyncClient):
    response = await client.post("/api/v1/auth/setup", json={**ADMIN, "password": "x" * 80})
    assert response.status_code == 422
    assert (await client.get("/api/v1/auth/setup-check")).json() == {"is_setup": False}


async def test_reset_password_counts_utf8_bytes(client: AsyncClient):
    # 40 characters, 80 bytes
    response = await client.post(
        "/api/v1/auth/reset-password", json={"email": "ada@lounge.test", "new_password": "é" * 40}
    )
    assert response.status_code == 422


async def test_login_with_over_long_password_is_rejected(client: AsyncClient):
    await _setup_admin(client)
    response = await client.post("/api/v1/auth/login", json={"email": ADMIN["email"], "password": "x" * 80})
    assert response.status_code == 401
