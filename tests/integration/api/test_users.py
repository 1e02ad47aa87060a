import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_admin_lists_users(client: AsyncClient, seed_user):
    _, admin_headers = await seed_user("admin")
    await seed_user("agent")

    response = await client.get("/api/users", headers=admin_headers)

    assert response.status_code == 200
    assert sorted(u["role"] for u in response.json()) == ["admin", "agent"]


@pytest.mark.asyncio
@pytest.mark.parametrize("role", ["manager", "agent", "viewer"])
async def test_non_admin_cannot_list_users(client: AsyncClient, seed_user, role):
    _, headers = await seed_user(role)

    response = await client.get("/api/users", headers=headers)

    assert response.status_code == 403
    assert response.json()["error"] == {"code": "FORBIDDEN", "message": "Insufficient role"}


@pytest.mark.asyncio
async def test_anonymous_api_call_is_unauthenticated(client: AsyncClient):
    response = await client.get("/api/users")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_change_role_takes_effect_on_next_request(client: AsyncClient, seed_user):
    _, admin_headers = await seed_user("admin")
    agent, agent_headers = await seed_user("agent")

    response = await client.post(
        "/api/leads", json={"name": "X", "phone": "0312345678"}, headers=agent_headers
    )
    assert response.status_code == 403

    response = await client.patch(
        f"/api/users/{agent.id}/role", json={"role": "manager"}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["user"]["role"] == "manager"

    # Same token, new role
    response = await client.post(
        "/api/leads", json={"name": "X", "phone": "0312345678"}, headers=agent_headers
    )
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_change_role_errors(client: AsyncClient, seed_user):
    admin, admin_headers = await seed_user("admin")

    response = await client.patch(
        f"/api/users/{admin.id}/role", json={"role": "viewer"}, headers=admin_headers
    )
    assert response.status_code == 409

    response = await client.patch(
        "/api/users/9999/role", json={"role": "viewer"}, headers=admin_headers
    )
    assert response.status_code == 404

    response = await client.patch(
        f"/api/users/{admin.id}/role", json={"role": "root"}, headers=admin_headers
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_own_profile(client: AsyncClient, seed_user):
    _, headers = await seed_user("viewer")

    response = await client.patch(
        "/api/users/me", json={"name": "Victor"}, headers=headers
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Victor"
    assert response.json()["email"] == "vic@example.com"
    assert response.json()["role"] == "viewer"
