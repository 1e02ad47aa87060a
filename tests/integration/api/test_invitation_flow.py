import pytest
from httpx import AsyncClient
from sqlmodel import select

from telecrm.adapter.repositories.invitation_repository import InvitationRepository
from telecrm.domain.base import utcnow
from telecrm.domain.entities import Invitation, UserRole
from tests.utils.session_cookie import cookie_header, session_token


async def issue(client: AsyncClient, headers: dict, email: str, role: str) -> dict:
    response = await client.post(
        "/api/invitations", json={"email": email, "role": role}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_invite_accept_login(client: AsyncClient, seed_user):
    """An invited agent verifies, accepts, signs in and sees their role"""
    _, admin_headers = await seed_user("admin")
    invitation = await issue(client, admin_headers, "new@example.com", "agent")
    token = invitation["token"]
    assert invitation["role"] == "agent"

    response = await client.get("/api/invitations/verify", params={"token": token})
    assert response.status_code == 200
    assert response.json() == {"email": "new@example.com", "role": "agent"}

    response = await client.post(
        "/api/invitations/accept",
        json={"token": token, "name": "Bob", "password": "pw1234"},
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}

    response = await client.post(
        "/api/auth/login", json={"email": "new@example.com", "password": "pw1234"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["open_id"] == "local:new@example.com"
    assert body["user"]["login_method"] == "local"
    assert body["user"]["role"] == "agent"
    token_value = session_token(response)
    assert token_value

    response = await client.get("/api/auth/me", headers=cookie_header(token_value))
    assert response.status_code == 200
    assert response.json()["role"] == "agent"
    assert response.json()["name"] == "Bob"

    # Single use
    response = await client.post(
        "/api/invitations/accept",
        json={"token": token, "name": "Mallory", "password": "other"},
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVITATION_ALREADY_USED"

    response = await client.get("/api/invitations/verify", params={"token": token})
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_expired_invitation(client: AsyncClient, seed_user, session_factory):
    _, admin_headers = await seed_user("admin")
    token = (await issue(client, admin_headers, "late@example.com", "viewer"))["token"]

    async with session_factory() as session:
        invitation = (
            await session.exec(select(Invitation).where(Invitation.token == token))
        ).one()
        invitation.expires_at = utcnow()
        session.add(invitation)
        await session.commit()

    response = await client.get("/api/invitations/verify", params={"token": token})
    assert response.status_code == 410
    assert response.json()["error"]["code"] == "INVITATION_EXPIRED"

    response = await client.post(
        "/api/invitations/accept",
        json={"token": token, "name": "Late", "password": "pw1234"},
    )
    assert response.status_code == 410


@pytest.mark.asyncio
async def test_unknown_invitation(client: AsyncClient):
    response = await client.get("/api/invitations/verify", params={"token": "doesnotexist"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_invitation_lookup_by_token(client: AsyncClient, seed_user, session_factory):
    _, admin_headers = await seed_user("admin")
    token = (await issue(client, admin_headers, "lookup@example.com", "manager"))["token"]

    async with session_factory() as session:
        repository = InvitationRepository(session)
        invitation = await repository.get_by_token(token)
        missing = await repository.get_by_token("doesnotexist")

    assert isinstance(invitation, Invitation)
    assert invitation.email == "lookup@example.com"
    assert invitation.role == UserRole.manager
    assert missing is None


@pytest.mark.asyncio
async def test_invitation_cannot_grant_admin(client: AsyncClient, seed_user):
    _, admin_headers = await seed_user("admin")

    response = await client.post(
        "/api/invitations",
        json={"email": "boss@example.com", "role": "admin"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ROLE"


@pytest.mark.asyncio
async def test_only_admins_issue_invitations(client: AsyncClient, seed_user):
    _, manager_headers = await seed_user("manager")

    response = await client.post(
        "/api/invitations",
        json={"email": "x@example.com", "role": "agent"},
        headers=manager_headers,
    )
    assert response.status_code == 403

    response = await client.post(
        "/api/invitations", json={"email": "x@example.com", "role": "agent"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_accept_validates_input(client: AsyncClient):
    response = await client.post(
        "/api/invitations/accept",
        json={"token": "short", "name": "", "password": "abc"},
    )

    assert response.status_code == 422
